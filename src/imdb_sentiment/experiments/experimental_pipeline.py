#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Main Experimental Pipeline for IMDB Sentiment Analysis

Descriptive branch:
1. Data loading and normalization (writes imdb_clean.csv)
2. Term frequency, TF-IDF and LDA topics

Modeling branch:
3. Feature matrix on a label-balanced sample
4. Stratified split, Random Forest and Gradient Boosting, test-set evaluation

Then:
5. Visualizations
6. Results collection (JSON, CSV and markdown tables)
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from ..config import ExperimentConfig, MODEL_DISPLAY_NAMES
from ..core.metrics import compute_all_metrics, roc_points
from ..core.splitting import DataSplit, check_column_alignment, stratified_train_test_split
from ..core.text_normalizer import NormalizedCorpus, NormalizerConfig
from ..features.feature_matrix import FeatureMatrix, build_feature_matrix
from ..features.frequency import term_frequency, tf_idf, top_terms
from ..features.topic_model import fit_topic_model, top_topic_terms
from ..models.models_registry import get_factory
from ..prepare_dataset import prepare_dataset
from .visualization import (
    export_summary_table,
    plot_confusion_matrices,
    plot_label_distribution,
    plot_model_performance,
    plot_review_lengths,
    plot_roc_curves,
    plot_top_terms,
)


def _banner(title: str):
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


class ExperimentalPipeline:
    """
    Orchestrates one analysis run, from the raw CSV to plots and summary tables.
    """

    def __init__(
        self,
        config: Optional[ExperimentConfig] = None,
        normalizer: Optional[NormalizerConfig] = None,
    ):
        """
        Initialize experimental pipeline.

        Args:
            config: Run configuration (paths, seeds, sample size, models)
            normalizer: Stop words / artifact settings; NLTK English stop
                words are loaded when None
        """
        self.config = config or ExperimentConfig()
        self._normalizer = normalizer
        self.results_dir = Path(self.config.results_dir)
        self.results_dir.mkdir(parents=True, exist_ok=True)

        self.reviews: Optional[pd.DataFrame] = None
        self.corpus: Optional[NormalizedCorpus] = None
        self.features: Optional[FeatureMatrix] = None
        self.split: Optional[DataSplit] = None
        self.descriptive: Dict[str, pd.DataFrame] = {}
        self.model_results: Dict[str, Dict[str, Any]] = {}
        self.meta: Dict[str, Any] = {}

    @property
    def normalizer(self) -> NormalizerConfig:
        if self._normalizer is None:
            self._normalizer = NormalizerConfig.default()
        return self._normalizer

    def load_and_prepare_data(self):
        """Load the raw CSV, normalize it and write imdb_clean.csv."""
        _banner("STEP 1: Loading and Preparing Data")

        print(f"[info] Preparing dataset from raw data: {self.config.csv_path}")
        self.reviews, self.corpus, self.meta = prepare_dataset(
            src_path=self.config.csv_path,
            outdir=self.config.out_dir,
            config=self.normalizer.with_stemming(True),
        )

        print(f"[data] rows={self.meta['reviews']}, balance={self.meta['class_balance_full']}")
        print(
            f"[data] tokens={self.meta['tokens']}, vocabulary={self.meta['vocabulary_size']}, "
            f"empty reviews={self.meta['empty_reviews']}"
        )
        print(f"[info] Clean token table written to {self.meta['out_clean']}")
        return self.corpus

    def run_descriptive_analysis(self):
        """Term frequency, TF-IDF and (optionally) LDA topics."""
        _banner("STEP 2: Descriptive Analysis")
        assert self.corpus is not None, "call load_and_prepare_data() first"

        tokens = self.corpus.tokens
        n = self.config.top_n

        tf = term_frequency(tokens)
        self.descriptive["top_tf"] = top_terms(tf, "n", n)
        tfidf = tf_idf(tokens)
        self.descriptive["top_tfidf"] = top_terms(tfidf, "tf_idf", n)

        print(f"\nTop {n} terms by frequency:")
        print(self.descriptive["top_tf"][["sentiment", "rank", "word", "n"]].to_string(index=False))
        print(f"\nTop {n} terms by TF-IDF:")
        print(
            self.descriptive["top_tfidf"][["sentiment", "rank", "word", "tf_idf"]].to_string(index=False)
        )

        if self.config.skip_topics:
            print("\n[info] Topic modeling is disabled (--skip-topics).")
            return self.descriptive

        print(f"\n[info] Fitting LDA with {self.config.n_topics} topics...")
        topics = fit_topic_model(
            tokens,
            n_topics=self.config.n_topics,
            random_state=self.config.random_state,
            passes=self.config.lda_passes,
        )
        self.descriptive["top_topics"] = top_topic_terms(topics.topic_terms, n)
        for topic, g in self.descriptive["top_topics"].groupby("topic"):
            print(f"  topic {topic}: {' '.join(g['word'])}")

        return self.descriptive

    def build_features(self) -> FeatureMatrix:
        """Feature matrix on a balanced sample of the raw reviews."""
        _banner("STEP 3: Building Feature Matrix")
        assert self.reviews is not None, "call load_and_prepare_data() first"

        cfg = self.config
        self.features = build_feature_matrix(
            self.reviews,
            self.normalizer.with_stemming(cfg.stem_features),
            n_per_class=cfg.n_per_class,
            random_state=cfg.random_state,
        )
        print(
            f"[data] feature matrix: {self.features.n_rows} rows x "
            f"{len(self.features.vocabulary)} words (+1 label column), "
            f"stemmed={cfg.stem_features}"
        )
        return self.features

    def run_models(self) -> Dict[str, Dict[str, Any]]:
        """Split, fit every configured model and evaluate it on the test part."""
        _banner("STEP 4: Training and Evaluating Models")
        assert self.features is not None, "call build_features() first"

        cfg = self.config
        self.split = stratified_train_test_split(
            self.features, train_fraction=cfg.train_fraction, random_state=cfg.random_state
        )
        train, test = self.split.train, self.split.test
        check_column_alignment(train, test)

        for model_key in cfg.models:
            name = MODEL_DISPLAY_NAMES.get(model_key, model_key)
            params = cfg.params_for(model_key)
            print(f"\n=== {name} ===")
            print(f"Params: {params}")

            model = get_factory(model_key)(params)
            model.fit(train.X, train.y)
            proba = model.positive_proba(test.X)

            metrics = compute_all_metrics(test.y, proba)
            roc = roc_points(test.y, proba)
            self.model_results[name] = {
                "model_key": model_key,
                "params": params,
                "metrics": metrics,
                "roc": {col: roc[col].tolist() for col in roc.columns},
            }
            print(
                f"{name}: accuracy={metrics['accuracy']:.3f}, kappa={metrics['kappa']:.3f}, "
                f"sensitivity={metrics['sensitivity']:.3f}, "
                f"specificity={metrics['specificity']:.3f}, auc={metrics['auc']:.3f}"
            )

        return self.model_results

    def create_visualizations(self):
        """Create visualizations for the results."""
        _banner("STEP 5: Creating Visualizations")
        out = self.results_dir

        if self.reviews is not None:
            plot_label_distribution(self.reviews, out)
            plot_review_lengths(self.reviews, out)
        if "top_tf" in self.descriptive:
            plot_top_terms(
                self.descriptive["top_tf"], "n", out, "top_terms_tf.png",
                "Most frequent terms per sentiment",
            )
        if "top_tfidf" in self.descriptive:
            plot_top_terms(
                self.descriptive["top_tfidf"], "tf_idf", out, "top_terms_tfidf.png",
                "Highest TF-IDF terms per sentiment",
            )
        if "top_topics" in self.descriptive:
            plot_top_terms(
                self.descriptive["top_topics"], "beta", out, "topic_terms.png",
                "Top terms per LDA topic", group_col="topic",
            )
        if self.model_results:
            plot_confusion_matrices(self.model_results, out)
            plot_roc_curves(self.model_results, out)
            plot_model_performance(self.model_results, out)

        print(f"Visualizations saved to {out}/ directory")

    def save_results(self) -> Path:
        """Save all results to files."""
        _banner("STEP 6: Saving Results")
        out = self.results_dir

        for key, filename in (
            ("top_tf", "top_terms_tf.csv"),
            ("top_tfidf", "top_terms_tfidf.csv"),
            ("top_topics", "topic_terms.csv"),
        ):
            if key in self.descriptive:
                self.descriptive[key].to_csv(out / filename, index=False)

        results_path = out / f"experiment_results_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
        payload = {
            "config": {
                "csv_path": str(self.config.csv_path),
                "random_state": self.config.random_state,
                "n_per_class": self.config.n_per_class,
                "train_fraction": self.config.train_fraction,
                "n_topics": self.config.n_topics,
                "stem_features": self.config.stem_features,
            },
            "data": self.meta,
            "feature_matrix": (
                {
                    "rows": self.features.n_rows,
                    "vocabulary_size": len(self.features.vocabulary),
                }
                if self.features is not None
                else None
            ),
            "models": self.model_results,
        }
        with open(results_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False, default=_json_default)
        print(f"Results saved to: {results_path}")

        if self.model_results:
            self._print_summary_table()
            export_summary_table(self.model_results, out)
            print(f"[plots] Saved model_summary.(csv|md) into {out}")

        return results_path

    def _print_summary_table(self):
        _banner("MODEL SUMMARY (test set)")
        header = f"{'Model':20} | {'Acc':>6} | {'Kappa':>6} | {'Sens':>6} | {'Spec':>6} | {'AUC':>6}"
        print(header)
        print("-" * len(header))
        for model_name, res in self.model_results.items():
            m = res["metrics"]
            print(
                f"{model_name:20} | {m['accuracy']:.4f} | {m['kappa']:.4f} | "
                f"{m['sensitivity']:.4f} | {m['specificity']:.4f} | {m['auc']:.4f}"
            )
        print("=" * 60)

    def run_complete_pipeline(self):
        """Run the complete experimental pipeline."""
        self.load_and_prepare_data()
        self.run_descriptive_analysis()
        self.build_features()
        self.run_models()
        self.create_visualizations()
        return self.save_results()


def _json_default(obj):
    if isinstance(obj, np.generic):
        return obj.item()
    if isinstance(obj, (np.ndarray, tuple)):
        return list(obj)
    if isinstance(obj, Path):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def main():
    """Main function to run the complete experimental pipeline."""
    pipeline = ExperimentalPipeline(ExperimentConfig())
    pipeline.run_complete_pipeline()


if __name__ == "__main__":
    main()
