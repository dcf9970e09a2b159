# splitting.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, TYPE_CHECKING

import numpy as np
from sklearn.model_selection import train_test_split

from ..config import DEFAULT_SEED, TRAIN_FRACTION
from .exceptions import ColumnAlignmentError, SplitIntegrityError

if TYPE_CHECKING:
    from ..features.feature_matrix import FeatureMatrix


@dataclass(frozen=True)
class DataSplit:
    train: "FeatureMatrix"
    test: "FeatureMatrix"
    train_rows: List[int]
    test_rows: List[int]


def check_column_alignment(train: "FeatureMatrix", test: "FeatureMatrix"):
    """Raise ColumnAlignmentError unless both matrices have the same label column and feature columns, in order."""
    train_label, test_label = train.frame.columns[0], test.frame.columns[0]
    if train_label != test_label:
        raise ColumnAlignmentError(f"label columns differ: {train_label!r} vs {test_label!r}")

    train_cols = train.feature_columns
    test_cols = test.feature_columns
    if train_cols != test_cols:
        only_train = sorted(set(train_cols) - set(test_cols))
        only_test = sorted(set(test_cols) - set(train_cols))
        raise ColumnAlignmentError(
            f"train/test feature columns differ "
            f"(train only: {only_train[:10]}, test only: {only_test[:10]}, "
            f"same set but different order: {not only_train and not only_test})"
        )


def check_partition(train_rows: List[int], test_rows: List[int], n_rows: int):
    """Raise SplitIntegrityError unless the two position lists partition range(n_rows)."""
    overlap = set(train_rows) & set(test_rows)
    if overlap:
        raise SplitIntegrityError(f"{len(overlap)} rows are in both train and test: {sorted(overlap)[:10]}")
    covered = set(train_rows) | set(test_rows)
    if len(train_rows) + len(test_rows) != n_rows or covered != set(range(n_rows)):
        missing = sorted(set(range(n_rows)) - covered)
        raise SplitIntegrityError(
            f"split covers {len(covered)} of {n_rows} rows (missing: {missing[:10]})"
        )


def stratified_train_test_split(
    fm: "FeatureMatrix",
    train_fraction: float = TRAIN_FRACTION,
    random_state: int = DEFAULT_SEED,
) -> DataSplit:
    """
    Stratified train/test partition of the feature matrix rows.

    Both parts are sliced from the same matrix, so they share its columns.
    """
    if not 0.0 < train_fraction < 1.0:
        raise ValueError("train_fraction must be between 0 and 1")

    positions = np.arange(fm.n_rows)
    train_rows, test_rows = train_test_split(
        positions,
        train_size=train_fraction,
        random_state=random_state,
        stratify=fm.y,
    )
    train_rows = sorted(int(i) for i in train_rows)
    test_rows = sorted(int(i) for i in test_rows)

    check_partition(train_rows, test_rows, fm.n_rows)

    train, test = fm.select(train_rows), fm.select(test_rows)
    check_column_alignment(train, test)

    print(f"Data split: {len(train_rows)} train, {len(test_rows)} test")
    print(f"Train class balance: {_balance(train.y)}")
    print(f"Test class balance: {_balance(test.y)}")

    return DataSplit(train=train, test=test, train_rows=train_rows, test_rows=test_rows)


def _balance(y: np.ndarray) -> dict:
    if len(y) == 0:
        return {}
    return {"positive": float(np.mean(y)), "negative": float(1 - np.mean(y))}
