#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Prepare IMDb dataset (Kaggle "IMDB Dataset.csv"):
- Load (review, sentiment) pairs and tag each row with its review_id
- Normalize text into one token per row (stop words, "br" artifact and
  non-alphabetic tokens removed, stems kept)
- Save the token table to <outdir>/imdb_clean.csv

This module provides functions to prepare the dataset programmatically.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from .config import DEFAULT_SEED, LABELS
from .core.exceptions import DataLoadError, SamplingError
from .core.text_normalizer import NormalizedCorpus, NormalizerConfig, normalize_reviews

REQUIRED_COLUMNS = ("review", "sentiment")
CLEAN_COLUMNS = ["sentiment", "word", "review_id"]


def load_reviews(src_path: str | Path) -> pd.DataFrame:
    """
    Load the raw review CSV.

    Args:
        src_path: Path to a CSV with ``review`` and ``sentiment`` columns

    Returns:
        DataFrame with columns review_id, review, sentiment
    """
    src = Path(src_path)
    if not src.exists():
        raise DataLoadError(f"Raw data file not found: {src}")

    df = pd.read_csv(src)
    rename_map = {c: c.lower().strip() for c in df.columns if c.lower().strip() in REQUIRED_COLUMNS}
    df = df.rename(columns=rename_map)

    missing = set(REQUIRED_COLUMNS) - set(df.columns)
    if missing:
        raise DataLoadError(f"Missing expected columns: {sorted(missing)} in {src}")

    df = df[list(REQUIRED_COLUMNS)].copy()
    df["review_id"] = range(len(df))
    df = df.dropna(subset=["review", "sentiment"])

    df["sentiment"] = df["sentiment"].astype(str).str.strip().str.lower()
    unknown = sorted(set(df["sentiment"]) - set(LABELS))
    if unknown:
        raise DataLoadError(f"Unknown sentiment labels {unknown} in {src}")

    df["review"] = df["review"].astype(str)
    return df[["review_id", "review", "sentiment"]].reset_index(drop=True)


def stratified_sample(
    df: pd.DataFrame,
    label_col: str,
    n_per_class: int,
    random_state: int = DEFAULT_SEED,
    labels: Optional[Iterable[str]] = None,
) -> pd.DataFrame:
    """Draw exactly ``n_per_class`` rows per label, without replacement."""
    if n_per_class <= 0:
        raise ValueError("n_per_class must be positive")

    counts = df[label_col].value_counts()
    expected = list(labels) if labels is not None else list(pd.unique(df[label_col]))
    for label in expected:
        available = int(counts.get(label, 0))
        if available < n_per_class:
            raise SamplingError(
                f"label {label!r} has {available} rows, need {n_per_class}"
            )

    parts = []
    for _, g in df.groupby(label_col, sort=False):
        parts.append(g.sample(n=n_per_class, random_state=random_state))
    return pd.concat(parts).reset_index(drop=True)


def write_clean_tokens(tokens: pd.DataFrame, path: str | Path) -> Path:
    """Write the normalized token table (one token per row)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tokens[CLEAN_COLUMNS].to_csv(path, index=False, encoding="utf-8")
    return path


def read_clean_tokens(path: str | Path) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise DataLoadError(f"Clean token file not found: {path}")
    # keep_default_na: words such as "nan" or "null" must stay strings
    df = pd.read_csv(path, dtype={"word": str, "sentiment": str}, keep_default_na=False)
    missing = set(CLEAN_COLUMNS) - set(df.columns)
    if missing:
        raise DataLoadError(f"Missing expected columns: {sorted(missing)} in {path}")
    return df[CLEAN_COLUMNS]


def prepare_dataset(
    src_path: str | Path,
    outdir: str | Path = "data",
    config: Optional[NormalizerConfig] = None,
) -> tuple[pd.DataFrame, NormalizedCorpus, dict]:
    """
    Load the raw CSV, normalize every review and save imdb_clean.csv.

    Args:
        src_path: Path to raw IMDB Dataset.csv file
        outdir: Output directory for processed files
        config: Normalizer configuration (NLTK English stop words if None)

    Returns:
        (reviews, normalized corpus, metadata dict)
    """
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    config = config or NormalizerConfig.default()

    reviews = load_reviews(src_path)
    corpus = normalize_reviews(reviews, config, warn_empty=True)

    clean_path = write_clean_tokens(corpus.tokens, outdir / "imdb_clean.csv")

    meta = {
        "src": str(src_path),
        "out_clean": str(clean_path),
        "reviews": int(len(reviews)),
        "tokens": int(len(corpus.tokens)),
        "vocabulary_size": len(corpus.vocabulary),
        "empty_reviews": len(corpus.empty_review_ids),
        "class_balance_full": reviews["sentiment"].value_counts().to_dict(),
    }
    return reviews, corpus, meta


def main():
    """CLI interface: normalize the corpus and write imdb_clean.csv only."""
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--src", required=True, help="Path to Kaggle IMDB CSV (review,sentiment)"
    )
    parser.add_argument("--outdir", default="data", help="Output root directory")

    args = parser.parse_args()

    _, _, meta = prepare_dataset(src_path=args.src, outdir=args.outdir)

    print(json.dumps(meta, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
