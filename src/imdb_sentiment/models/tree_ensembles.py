# tree_ensembles.py
from typing import Any, Dict

import numpy as np
from sklearn.ensemble import GradientBoostingClassifier, RandomForestClassifier


class TreeEnsembleSentiment:
    """Tree ensemble over document-feature counts, as an sklearn-style estimator.

    params:
      - kind: "rf" (RandomForestClassifier) or "gbm" (GradientBoostingClassifier)
      - random_state: seed passed to the ensemble
      - any other key is forwarded to the sklearn constructor
    """

    def __init__(self, kind: str = "rf", **params: Dict[str, Any]):
        if kind not in ENSEMBLES:
            raise ValueError(f"Unknown ensemble kind: {kind}")
        self.kind = kind
        self.p = params
        self.model = None

    def _build(self):
        cls = ENSEMBLES[self.kind]
        params = {k: v for k, v in self.p.items() if v is not None}
        return cls(**params)

    def fit(self, X, y):
        self.model = self._build()
        self.model.fit(np.asarray(X), np.asarray(y).astype(int))
        return self

    def _check_fitted(self):
        if self.model is None:
            raise RuntimeError("model is not fitted yet; call fit() first")

    def predict(self, X):
        self._check_fitted()
        return self.model.predict(np.asarray(X))

    def predict_proba(self, X):
        self._check_fitted()
        return self.model.predict_proba(np.asarray(X))

    def positive_proba(self, X) -> np.ndarray:
        """Probability of the positive class (label 1)."""
        proba = self.predict_proba(X)
        classes = list(self.model.classes_)
        if 1 not in classes:
            return np.zeros(proba.shape[0])
        return proba[:, classes.index(1)]


ENSEMBLES = {
    "rf": RandomForestClassifier,
    "gbm": GradientBoostingClassifier,
}


def create_random_forest_factory():
    def factory(params: Dict[str, Any]):
        return TreeEnsembleSentiment(kind="rf", **params)

    return factory


def create_gradient_boosting_factory():
    def factory(params: Dict[str, Any]):
        return TreeEnsembleSentiment(kind="gbm", **params)

    return factory
