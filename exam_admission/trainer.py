from __future__ import annotations

"""
Fit a logistic model on the training split, threshold it and score it on the test split.
"""

import warnings
from dataclasses import dataclass, replace

import numpy as np
from sklearn.exceptions import ConvergenceWarning
from sklearn.linear_model import LogisticRegression

from .constants import ALPHA, GRADIENT_TOLERANCE, NEGATIVE_LABEL, POSITIVE_LABEL
from .data_prep import Dataset
from .exceptions import FitError
from .logreg import LogisticRegressionGD
from .metrics import ConfusionMatrix

SOLVERS = ("lbfgs", "gd")


@dataclass(frozen=True, eq=False)
class TrainedModel:
    """Linear coefficients in raw feature units plus the decision threshold."""

    intercept: float
    coef: np.ndarray
    threshold: float = 0.5
    n_iter: int = 0

    def with_threshold(self, threshold: float) -> TrainedModel:
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be within [0, 1], got {threshold}")
        return replace(self, threshold=threshold)

    def predict_proba(self, records) -> np.ndarray:
        """Return P(accepted) for each row."""
        z = np.asarray(records, dtype=float) @ self.coef + self.intercept
        return 1.0 / (1.0 + np.exp(-np.clip(z, -500, 500)))

    def predict(self, records) -> np.ndarray:
        positive = self.predict_proba(records) >= self.threshold
        return np.where(positive, POSITIVE_LABEL, NEGATIVE_LABEL).astype(object)


def _fit_lbfgs(X: np.ndarray, y: np.ndarray, max_iterations: int) -> TrainedModel:
    model = LogisticRegression(
        C=1.0 / ALPHA,
        tol=GRADIENT_TOLERANCE,
        max_iter=max_iterations,
        solver="lbfgs",
    )
    # Stopping at the iteration cap is part of the search, not a failure.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", category=ConvergenceWarning)
        model.fit(X, y)
    return TrainedModel(
        intercept=float(model.intercept_[0]),
        coef=model.coef_[0].copy(),
        n_iter=int(model.n_iter_[0]),
    )


def _fit_gd(X: np.ndarray, y: np.ndarray, max_iterations: int) -> TrainedModel:
    if len(np.unique(y)) < 2:
        raise ValueError("training labels contain a single class")
    model = LogisticRegressionGD(
        max_iter=max_iterations, tol=GRADIENT_TOLERANCE, l2=ALPHA / len(y)
    )
    model.fit(X, y)
    intercept, coef = model.raw_coefficients()
    return TrainedModel(intercept=intercept, coef=coef, n_iter=model.n_iter_)


def fit_model(train: Dataset, max_iterations: int, solver: str = "lbfgs") -> TrainedModel:
    """
    Fit on the training split. Any solver failure, or coefficients that are not
    finite, raises FitError.
    """
    if solver not in SOLVERS:
        raise ValueError(f"Unknown solver: {solver}")

    X = train.records.to_numpy(dtype=float)
    y = train.positive_mask().astype(int)
    fit = _fit_lbfgs if solver == "lbfgs" else _fit_gd
    try:
        trained = fit(X, y, max_iterations)
    except ValueError as exc:
        raise FitError(f"cannot fit model (max_iterations={max_iterations}): {exc}") from exc

    if not (np.isfinite(trained.intercept) and np.all(np.isfinite(trained.coef))):
        raise FitError(f"solver produced non-finite coefficients (max_iterations={max_iterations})")
    return trained


def evaluate(
    train: Dataset,
    test: Dataset,
    threshold: float,
    max_iterations: int,
    solver: str = "lbfgs",
) -> ConfusionMatrix:
    """Fit, apply the threshold, predict the test split and compare with its labels."""
    model = fit_model(train, max_iterations, solver=solver).with_threshold(threshold)
    predictions = model.predict(test.records)
    return ConfusionMatrix.from_labels(test.targets.to_numpy(dtype=object), predictions)
