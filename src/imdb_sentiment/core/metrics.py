#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Binary Classification Metrics

Confusion-matrix metrics are computed from scratch:
- Confusion matrix / confusion counts
- Accuracy
- Cohen's kappa
- Sensitivity (true positive rate) and specificity (true negative rate)

ROC curve and AUC are delegated to sklearn.metrics.

Labels are 0/1 with 1 = positive. Predicted probabilities are turned into
labels with a fixed threshold: proba > 0.5 is positive.
"""

from typing import Dict, List, NamedTuple, Optional

import numpy as np
import pandas as pd
from sklearn.metrics import roc_auc_score, roc_curve

DEFAULT_THRESHOLD = 0.5


class ConfusionCounts(NamedTuple):
    tp: int
    tn: int
    fp: int
    fn: int

    @property
    def total(self) -> int:
        return self.tp + self.tn + self.fp + self.fn


def _check_lengths(y_true: np.ndarray, y_other: np.ndarray):
    if len(y_true) != len(y_other):
        raise ValueError("y_true and y_pred must have the same length")


def confusion_matrix(
    y_true: np.ndarray, y_pred: np.ndarray, labels: Optional[List] = None
) -> np.ndarray:
    """
    Compute confusion matrix from scratch.

    Args:
        y_true: Ground truth labels
        y_pred: Predicted labels
        labels: List of labels to include in matrix (if None, use unique labels)

    Returns:
        Confusion matrix as 2D numpy array (rows = actual, columns = predicted)
    """
    y_true = np.asarray(y_true)
    y_pred = np.asarray(y_pred)
    _check_lengths(y_true, y_pred)

    if labels is None:
        labels = sorted(set(y_true) | set(y_pred))

    n_labels = len(labels)
    label_to_idx = {label: i for i, label in enumerate(labels)}

    cm = np.zeros((n_labels, n_labels), dtype=int)
    for true_label, pred_label in zip(y_true, y_pred):
        cm[label_to_idx[true_label], label_to_idx[pred_label]] += 1

    return cm


def confusion_counts(y_true: np.ndarray, y_pred: np.ndarray) -> ConfusionCounts:
    """TP/TN/FP/FN for 0/1 labels."""
    cm = confusion_matrix(y_true, y_pred, labels=[0, 1])
    return ConfusionCounts(
        tp=int(cm[1, 1]), tn=int(cm[0, 0]), fp=int(cm[0, 1]), fn=int(cm[1, 0])
    )


def _ratio(num: float, den: float) -> float:
    return float(num / den) if den else 0.0


def accuracy_score(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    """
    Compute accuracy score from scratch.

    Args:
        y_true: Ground truth labels
        y_pred: Predicted labels

    Returns:
        Accuracy score (0.0 to 1.0)
    """
    y_true = np.asarray(y_true)
    y_pred = np.asarray(y_pred)
    _check_lengths(y_true, y_pred)

    if len(y_true) == 0:
        return 0.0

    return float(np.sum(y_true == y_pred) / len(y_true))


def accuracy_from_counts(counts: ConfusionCounts) -> float:
    return _ratio(counts.tp + counts.tn, counts.total)


def sensitivity(counts: ConfusionCounts) -> float:
    """TP / (TP + FN)"""
    return _ratio(counts.tp, counts.tp + counts.fn)


def specificity(counts: ConfusionCounts) -> float:
    """TN / (TN + FP)"""
    return _ratio(counts.tn, counts.tn + counts.fp)


def cohen_kappa(counts: ConfusionCounts) -> float:
    """
    Cohen's kappa from confusion counts.

    expected accuracy = P(pred pos) * P(true pos) + P(pred neg) * P(true neg)
    kappa = (accuracy - expected) / (1 - expected)
    """
    total = counts.total
    if total == 0:
        return 0.0
    observed = accuracy_from_counts(counts)
    pred_pos = counts.tp + counts.fp
    pred_neg = counts.tn + counts.fn
    true_pos = counts.tp + counts.fn
    true_neg = counts.tn + counts.fp
    expected = (pred_pos * true_pos + pred_neg * true_neg) / total**2
    return _ratio(observed - expected, 1.0 - expected)


def threshold_predictions(
    proba: np.ndarray, threshold: float = DEFAULT_THRESHOLD
) -> np.ndarray:
    return (np.asarray(proba, dtype=float) > threshold).astype(int)


def roc_points(y_true: np.ndarray, proba: np.ndarray) -> pd.DataFrame:
    """ROC curve swept over the probability threshold."""
    y_true = np.asarray(y_true)
    proba = np.asarray(proba, dtype=float)
    _check_lengths(y_true, proba)
    fpr, tpr, thresholds = roc_curve(y_true, proba, pos_label=1)
    return pd.DataFrame({"fpr": fpr, "tpr": tpr, "threshold": thresholds})


def roc_auc(y_true: np.ndarray, proba: np.ndarray) -> float:
    y_true = np.asarray(y_true)
    if len(np.unique(y_true)) < 2:
        # AUC is undefined with a single class present
        return float("nan")
    return float(roc_auc_score(y_true, np.asarray(proba, dtype=float)))


def compute_all_metrics(
    y_true: np.ndarray, proba: np.ndarray, threshold: float = DEFAULT_THRESHOLD
) -> Dict[str, object]:
    """
    Compute all metrics reported for one model.

    Args:
        y_true: Ground truth 0/1 labels
        proba: Predicted probability of the positive class
        threshold: Decision threshold (fixed, not tuned)

    Returns:
        Dictionary with accuracy, kappa, sensitivity, specificity, auc, the
        confusion counts and the confusion matrix
    """
    y_true = np.asarray(y_true).astype(int)
    proba = np.asarray(proba, dtype=float)
    _check_lengths(y_true, proba)

    y_pred = threshold_predictions(proba, threshold)
    counts = confusion_counts(y_true, y_pred)

    return {
        "accuracy": accuracy_from_counts(counts),
        "kappa": cohen_kappa(counts),
        "sensitivity": sensitivity(counts),
        "specificity": specificity(counts),
        "auc": roc_auc(y_true, proba),
        "counts": counts._asdict(),
        "confusion_matrix": confusion_matrix(y_true, y_pred, labels=[0, 1]).tolist(),
    }
