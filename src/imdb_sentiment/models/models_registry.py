# models_registry.py
from typing import Any, Callable, Dict

from .tree_ensembles import create_gradient_boosting_factory, create_random_forest_factory

FACTORIES = {
    "rf": create_random_forest_factory,
    "gbm": create_gradient_boosting_factory,
}


def get_factory(model: str) -> Callable[[Dict[str, Any]], Any]:
    """
    factory: params(dict) -> estimator

    Hyperparameters (seed included) come from ExperimentConfig.params_for.
    """
    if model not in FACTORIES:
        raise ValueError(f"Unknown model: {model}")
    return FACTORIES[model]()
