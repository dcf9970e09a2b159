# config.py
"""
Run configuration for the IMDB sentiment analysis.

Constants mirror the fixed choices of a single analysis run; ExperimentConfig
bundles them (plus paths) so the pipeline and the CLI share one value.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

DEFAULT_SEED = 1234
N_PER_CLASS = 200
TRAIN_FRACTION = 0.8
N_TOPICS = 8
TOP_N_TERMS = 10
LDA_PASSES = 10

# "<br />" tags tokenize into a bare "br"
ARTIFACT_TOKENS = ("br",)

LABELS = ("negative", "positive")
POSITIVE_LABEL = "positive"

# ---------------- Fixed classifier hyperparameters ----------------

MODEL_PARAMS: Dict[str, Dict[str, Any]] = {
    "rf": {
        "n_estimators": 500,
        "max_features": "sqrt",
        "n_jobs": None,
    },
    "gbm": {
        "n_estimators": 200,
        "learning_rate": 0.1,
        "max_depth": 3,
        "subsample": 1.0,
    },
}
MODEL_PARAMS_FAST: Dict[str, Dict[str, Any]] = {
    "rf": {
        "n_estimators": 100,
        "max_features": "sqrt",
        "n_jobs": None,
    },
    "gbm": {
        "n_estimators": 50,
        "learning_rate": 0.1,
        "max_depth": 3,
        "subsample": 1.0,
    },
}

MODEL_DISPLAY_NAMES = {
    "rf": "Random Forest",
    "gbm": "Gradient Boosting",
}


@dataclass(frozen=True)
class ExperimentConfig:
    csv_path: Path = Path("data") / "IMDB Dataset.csv"
    out_dir: Path = Path("data")
    results_dir: Path = Path("results")
    random_state: int = DEFAULT_SEED
    n_per_class: int = N_PER_CLASS
    train_fraction: float = TRAIN_FRACTION
    n_topics: int = N_TOPICS
    lda_passes: int = LDA_PASSES
    top_n: int = TOP_N_TERMS
    stem_features: bool = False
    skip_topics: bool = False
    fast: bool = False
    models: tuple = ("rf", "gbm")
    model_params: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def params_for(self, model_key: str) -> Dict[str, Any]:
        """Hyperparameters for ``model_key``: explicit overrides win over defaults."""
        base = MODEL_PARAMS_FAST if self.fast else MODEL_PARAMS
        if model_key not in base:
            raise ValueError(f"Unknown model: {model_key}")
        params = dict(base[model_key])
        params.update(self.model_params.get(model_key, {}))
        params["random_state"] = self.random_state
        return params
