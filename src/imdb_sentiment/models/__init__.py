# Model implementations for sentiment classification

from .tree_ensembles import (
    TreeEnsembleSentiment,
    create_random_forest_factory,
    create_gradient_boosting_factory,
)
from .models_registry import get_factory

__all__ = [
    "TreeEnsembleSentiment",
    "create_random_forest_factory",
    "create_gradient_boosting_factory",
    "get_factory",
]
