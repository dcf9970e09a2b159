import importlib.util
import json
from collections import Counter
from pathlib import Path

import pytest

from imdb_sentiment.config import ExperimentConfig
from imdb_sentiment.experiments.experimental_pipeline import ExperimentalPipeline
from imdb_sentiment.prepare_dataset import read_clean_tokens

ROOT = Path(__file__).resolve().parents[1]


def _load_script(name):
    spec = importlib.util.spec_from_file_location(name, ROOT / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def config(reviews_csv, tmp_path):
    return ExperimentConfig(
        csv_path=reviews_csv,
        out_dir=tmp_path / "data",
        results_dir=tmp_path / "results",
        random_state=4,
        n_per_class=20,
        n_topics=2,
        lda_passes=1,
        top_n=5,
        fast=True,
    )


def test_complete_pipeline(config, stop_config):
    pipeline = ExperimentalPipeline(config, normalizer=stop_config)
    results_path = pipeline.run_complete_pipeline()

    clean = read_clean_tokens(config.out_dir / "imdb_clean.csv")
    assert Counter(zip(clean["sentiment"], clean["word"])) == Counter(
        zip(pipeline.corpus.tokens["sentiment"], pipeline.corpus.tokens["word"])
    )

    assert pipeline.features.n_rows == 40
    assert len(pipeline.split.train_rows) == 32
    assert len(pipeline.split.test_rows) == 8
    # descriptive pass is stemmed, modeling pass is not by default
    assert pipeline.corpus.vocabulary != pipeline.features.vocabulary

    payload = json.loads(results_path.read_text(encoding="utf-8"))
    assert set(payload["models"]) == {"Random Forest", "Gradient Boosting"}
    for res in payload["models"].values():
        m = res["metrics"]
        assert 0.0 <= m["accuracy"] <= 1.0
        assert sum(m["counts"].values()) == 8

    for name in (
        "sentiment_distribution.png",
        "review_length_distribution.png",
        "top_terms_tf.png",
        "top_terms_tfidf.png",
        "topic_terms.png",
        "confusion_matrices.png",
        "roc_curves.png",
        "model_performance_bar.png",
        "model_summary.csv",
        "model_summary.md",
        "top_terms_tf.csv",
        "topic_terms.csv",
    ):
        assert (config.results_dir / name).exists(), name


def test_pipeline_steps_require_order(config, stop_config):
    pipeline = ExperimentalPipeline(config, normalizer=stop_config)
    with pytest.raises(AssertionError):
        pipeline.build_features()


def test_plot_results_replots_saved_json(config, stop_config, tmp_path):
    pipeline = ExperimentalPipeline(config, normalizer=stop_config)
    pipeline.load_and_prepare_data()
    pipeline.build_features()
    pipeline.run_models()
    results_path = pipeline.save_results()

    out_dir = tmp_path / "replot"
    plot_results = _load_script("plot_results")
    plot_results.main(["--results-dir", str(out_dir), "--results-file", str(results_path)])
    assert (out_dir / "roc_curves.png").exists()
    assert (out_dir / "model_summary.md").exists()


def test_cli_arguments_build_config(reviews_csv, tmp_path):
    run_experiment = _load_script("run_experiment")
    args = run_experiment.build_parser().parse_args(
        ["--csv", str(reviews_csv), "--model", "rf", "--stem-features", "--n-per-class", "10"]
    )
    cfg = run_experiment.config_from_args(args)
    assert cfg.models == ("rf",)
    assert cfg.stem_features
    assert cfg.n_per_class == 10
    assert cfg.csv_path == reviews_csv
