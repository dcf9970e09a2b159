#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Standalone script to plot results from an experiment results JSON file
"""

import argparse
import json
from pathlib import Path

from imdb_sentiment.experiments.visualization import (
    export_summary_table,
    plot_confusion_matrices,
    plot_model_performance,
    plot_roc_curves,
)


def latest_results_file(results_dir: Path) -> Path:
    files = list(results_dir.glob("experiment_results_*.json"))
    if not files:
        raise FileNotFoundError(f"No experiment_results_*.json in {results_dir}")
    return max(files, key=lambda p: p.stat().st_mtime)


def main(argv=None):
    """Plot results from experiment results JSON file"""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--results-dir", type=Path, default=Path("results"))
    parser.add_argument(
        "--results-file",
        type=Path,
        default=None,
        help="Results JSON (default: most recent experiment_results_*.json)",
    )
    args = parser.parse_args(argv)

    results_file = args.results_file or latest_results_file(args.results_dir)
    print(f"Loading results from: {results_file}")

    with open(results_file, "r", encoding="utf-8") as f:
        data = json.load(f)

    model_results = data.get("models") or {}
    if not model_results:
        raise ValueError(f"No model results found in {results_file}")

    print(f"Found {len(model_results)} models:")
    for model_name in model_results:
        print(f"  - {model_name}")

    args.results_dir.mkdir(parents=True, exist_ok=True)

    print("\nGenerating visualizations...")
    plot_model_performance(model_results, args.results_dir)
    plot_roc_curves(model_results, args.results_dir)
    plot_confusion_matrices(model_results, args.results_dir)
    export_summary_table(model_results, args.results_dir)

    print("\nVisualization complete!")


if __name__ == "__main__":
    main()
