#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Unified runner for the IMDB sentiment analysis.

- Run from project root (after `pip install -e .`).
- Loads the raw Kaggle CSV, writes imdb_clean.csv, runs the descriptive
  analysis, builds the feature matrix and compares the tree ensembles.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from imdb_sentiment.config import (
    DEFAULT_SEED,
    LDA_PASSES,
    N_PER_CLASS,
    N_TOPICS,
    TOP_N_TERMS,
    TRAIN_FRACTION,
    ExperimentConfig,
)
from imdb_sentiment.core.exceptions import DataLoadError
from imdb_sentiment.experiments.experimental_pipeline import ExperimentalPipeline

ROOT = Path(__file__).parent.resolve()


# -----------------------------
# Utilities
# -----------------------------
def _resolve_csv(data_dir: Optional[Path], csv_path: Optional[Path]) -> Path:
    """Locate the raw CSV from --csv or --data-dir (defaults to ROOT/data)."""
    if csv_path is not None:
        p = csv_path if csv_path.is_absolute() else (ROOT / csv_path)
        if not p.exists():
            raise DataLoadError(f"CSV not found: {p}")
        return p
    if data_dir is None:
        data_dir = ROOT / "data"
    p = data_dir / "IMDB Dataset.csv"
    if not p.exists():
        raise DataLoadError(
            f"Cannot find {p}. Place 'IMDB Dataset.csv' under --data-dir "
            f"or pass --csv explicitly."
        )
    return p


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Run the IMDB sentiment analysis from project root")
    ap.add_argument("--data-dir", type=Path, default=None, help="Directory containing 'IMDB Dataset.csv'")
    ap.add_argument("--csv", type=Path, default=None, help="Explicit path to the raw review CSV")
    ap.add_argument("--out-dir", type=Path, default=Path("data"), help="Where imdb_clean.csv is written")
    ap.add_argument("--results-dir", type=Path, default=Path("results"))
    ap.add_argument("--n-per-class", type=int, default=N_PER_CLASS)
    ap.add_argument("--train-fraction", type=float, default=TRAIN_FRACTION)
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED)
    ap.add_argument("--n-topics", type=int, default=N_TOPICS)
    ap.add_argument("--lda-passes", type=int, default=LDA_PASSES)
    ap.add_argument("--top-n", type=int, default=TOP_N_TERMS)
    ap.add_argument("--model", choices=["rf", "gbm", "all"], default="all")
    ap.add_argument("--stem-features", action="store_true", help="Stem tokens in the feature matrix too")
    ap.add_argument("--skip-topics", action="store_true", help="Skip LDA topic modeling")
    ap.add_argument("--fast", action="store_true", help="Smaller ensembles")
    return ap


def config_from_args(args: argparse.Namespace) -> ExperimentConfig:
    return ExperimentConfig(
        csv_path=_resolve_csv(args.data_dir, args.csv),
        out_dir=args.out_dir,
        results_dir=args.results_dir,
        random_state=args.seed,
        n_per_class=args.n_per_class,
        train_fraction=args.train_fraction,
        n_topics=args.n_topics,
        lda_passes=args.lda_passes,
        top_n=args.top_n,
        stem_features=args.stem_features,
        skip_topics=args.skip_topics,
        fast=args.fast,
        models=("rf", "gbm") if args.model == "all" else (args.model,),
    )


# -----------------------------
# Main
# -----------------------------
def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    pipeline = ExperimentalPipeline(config)
    pipeline.run_complete_pipeline()


if __name__ == "__main__":
    main()
