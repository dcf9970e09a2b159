import numpy as np
import pytest
from sklearn.metrics import cohen_kappa_score

from imdb_sentiment.core.metrics import (
    ConfusionCounts,
    accuracy_from_counts,
    accuracy_score,
    cohen_kappa,
    compute_all_metrics,
    confusion_counts,
    confusion_matrix,
    roc_auc,
    roc_points,
    sensitivity,
    specificity,
    threshold_predictions,
)


def _labels(tp, tn, fp, fn):
    y_true = np.array([1] * tp + [0] * tn + [0] * fp + [1] * fn)
    y_pred = np.array([1] * tp + [0] * tn + [1] * fp + [0] * fn)
    return y_true, y_pred


def test_hand_computed_metrics():
    counts = ConfusionCounts(tp=30, tn=30, fp=10, fn=10)
    assert accuracy_from_counts(counts) == pytest.approx(0.75)
    assert sensitivity(counts) == pytest.approx(0.75)
    assert specificity(counts) == pytest.approx(0.75)
    assert cohen_kappa(counts) == pytest.approx(0.5)


def test_kappa_matches_sklearn_on_unbalanced_counts():
    y_true, y_pred = _labels(tp=20, tn=15, fp=5, fn=10)
    counts = confusion_counts(y_true, y_pred)
    assert counts == ConfusionCounts(tp=20, tn=15, fp=5, fn=10)
    assert cohen_kappa(counts) == pytest.approx(0.4)
    assert cohen_kappa(counts) == pytest.approx(cohen_kappa_score(y_true, y_pred))


def test_confusion_matrix_layout():
    y_true, y_pred = _labels(tp=3, tn=2, fp=1, fn=4)
    cm = confusion_matrix(y_true, y_pred, labels=[0, 1])
    np.testing.assert_array_equal(cm, [[2, 1], [4, 3]])
    assert accuracy_score(y_true, y_pred) == pytest.approx(0.5)


def test_threshold_is_strictly_greater_than_half():
    np.testing.assert_array_equal(threshold_predictions([0.2, 0.5, 0.51, 0.9]), [0, 0, 1, 1])


def test_zero_denominators_return_zero():
    counts = ConfusionCounts(tp=0, tn=5, fp=0, fn=0)
    assert sensitivity(counts) == 0.0
    assert specificity(counts) == 1.0
    assert cohen_kappa(ConfusionCounts(0, 0, 0, 0)) == 0.0
    assert accuracy_score([], []) == 0.0


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        compute_all_metrics([0, 1, 1], [0.2, 0.8])


def test_roc_curve_on_perfect_separation():
    y_true = np.array([0, 0, 1, 1])
    proba = np.array([0.1, 0.3, 0.7, 0.9])
    roc = roc_points(y_true, proba)

    assert list(roc.columns) == ["fpr", "tpr", "threshold"]
    assert (roc["fpr"].iloc[0], roc["tpr"].iloc[0]) == (0.0, 0.0)
    assert (roc["fpr"].iloc[-1], roc["tpr"].iloc[-1]) == (1.0, 1.0)
    assert roc["fpr"].is_monotonic_increasing
    assert roc_auc(y_true, proba) == pytest.approx(1.0)


def test_roc_auc_single_class_is_nan():
    assert np.isnan(roc_auc([1, 1], [0.2, 0.9]))


def test_compute_all_metrics():
    y_true = np.array([1, 1, 1, 0, 0, 0])
    proba = np.array([0.9, 0.8, 0.4, 0.6, 0.1, 0.2])
    m = compute_all_metrics(y_true, proba)

    assert m["counts"] == {"tp": 2, "tn": 2, "fp": 1, "fn": 1}
    assert m["accuracy"] == pytest.approx(4 / 6)
    assert m["sensitivity"] == pytest.approx(2 / 3)
    assert m["specificity"] == pytest.approx(2 / 3)
    assert m["kappa"] == pytest.approx(1 / 3)
    assert m["confusion_matrix"] == [[2, 1], [1, 2]]
    assert 0.0 <= m["auc"] <= 1.0
