#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Feature Matrix Builder

Turns a label-balanced sample of reviews into a dense document-feature matrix:

1. Stratified sample of N reviews per label (fixed seed)
2. Normalization of each sampled review
3. Per-review token counts
4. Two-pass assembly: vocabulary first, then fixed-width rows in sample order
5. The sentiment label prepended as a two-level categorical column

Reviews that normalize to nothing keep an all-zero row, so the matrix always
has exactly 2N rows.
"""
from __future__ import annotations

import warnings
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd

from ..config import DEFAULT_SEED, LABELS, N_PER_CLASS, POSITIVE_LABEL
from ..core.exceptions import EmptyDocumentWarning
from ..core.text_normalizer import NormalizerConfig, build_vocabulary, normalize_documents
from ..prepare_dataset import stratified_sample

# tokens are purely alphabetic, so this name never collides with a word column
LABEL_COLUMN = "sentiment_label"


@dataclass(frozen=True)
class FeatureMatrix:
    """
    Dense counts with the label in the first column.

    frame: DataFrame [sentiment_label, <word columns...>], one row per sampled review
    vocabulary: word columns, in column order
    review_ids: source review_id of each row, in row order
    """

    frame: pd.DataFrame
    vocabulary: Tuple[str, ...]
    review_ids: Tuple[int, ...]

    @property
    def n_rows(self) -> int:
        return len(self.frame)

    @property
    def feature_columns(self) -> List[str]:
        return list(self.frame.columns[1:])

    @property
    def X(self) -> np.ndarray:
        return self.frame[list(self.vocabulary)].to_numpy(dtype=np.int64)

    @property
    def y(self) -> np.ndarray:
        return (self.frame[LABEL_COLUMN] == POSITIVE_LABEL).to_numpy(dtype=int)

    def select(self, rows: Sequence[int]) -> "FeatureMatrix":
        """Rows by position, same columns in the same order."""
        rows = list(rows)
        return FeatureMatrix(
            frame=self.frame.iloc[rows].reset_index(drop=True),
            vocabulary=self.vocabulary,
            review_ids=tuple(self.review_ids[i] for i in rows),
        )


def count_tokens(token_lists: Iterable[List[str]]) -> List[Counter]:
    return [Counter(tokens) for tokens in token_lists]


def vectorize(counts: Sequence[Counter], vocabulary: Sequence[str]) -> np.ndarray:
    """Materialize per-review counters as fixed-width rows over ``vocabulary``."""
    index = {word: j for j, word in enumerate(vocabulary)}
    X = np.zeros((len(counts), len(vocabulary)), dtype=np.int64)
    for i, counter in enumerate(counts):
        for word, n in counter.items():
            j = index.get(word)
            if j is not None:
                X[i, j] = n
    return X


def assemble_feature_matrix(
    labels: Sequence[str],
    token_lists: Sequence[List[str]],
    review_ids: Sequence[int],
) -> FeatureMatrix:
    """Build the matrix from already-normalized token lists (one per review)."""
    if not (len(labels) == len(token_lists) == len(review_ids)):
        raise ValueError("labels, token_lists and review_ids must have the same length")

    # pass 1: the column set is fixed before any row is built
    vocabulary = build_vocabulary(w for tokens in token_lists for w in tokens)
    # pass 2
    X = vectorize(count_tokens(token_lists), vocabulary)

    frame = pd.DataFrame(X, columns=list(vocabulary))
    frame.insert(
        0, LABEL_COLUMN, pd.Categorical(list(labels), categories=list(LABELS))
    )
    return FeatureMatrix(
        frame=frame, vocabulary=vocabulary, review_ids=tuple(int(i) for i in review_ids)
    )


def build_feature_matrix(
    reviews: pd.DataFrame,
    config: NormalizerConfig,
    n_per_class: int = N_PER_CLASS,
    random_state: int = DEFAULT_SEED,
    text_col: str = "review",
    label_col: str = "sentiment",
    id_col: str = "review_id",
) -> FeatureMatrix:
    """
    Sample ``n_per_class`` reviews per label and build their feature matrix.

    Args:
        reviews: Full corpus (review_id, review, sentiment)
        config: Normalization settings; ``config.stem`` controls stemming here
        n_per_class: Reviews drawn per label
        random_state: Sampling seed

    Returns:
        FeatureMatrix with exactly ``n_per_class * 2`` rows

    Raises:
        SamplingError: a label has fewer than ``n_per_class`` reviews
    """
    sample = stratified_sample(
        reviews, label_col, n_per_class, random_state=random_state, labels=LABELS
    )
    if id_col not in sample.columns:
        sample = sample.assign(**{id_col: range(len(sample))})

    token_lists = normalize_documents(sample[text_col], config)

    empty = [int(rid) for rid, tokens in zip(sample[id_col], token_lists) if not tokens]
    if empty:
        warnings.warn(
            f"{len(empty)} sampled review(s) have no tokens after normalization "
            f"and get all-zero rows: {empty[:10]}",
            EmptyDocumentWarning,
            stacklevel=2,
        )

    fm = assemble_feature_matrix(sample[label_col].tolist(), token_lists, sample[id_col].tolist())
    if fm.n_rows != len(sample):
        raise RuntimeError(
            f"feature matrix has {fm.n_rows} rows for {len(sample)} sampled reviews"
        )
    return fm
