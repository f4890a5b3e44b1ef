from __future__ import annotations

"""
Minimal logistic regression with batch gradient descent and internal scaling.
Alternative to the scikit-learn solver, selected with --solver gd.
"""

import numpy as np

from .constants import GRADIENT_TOLERANCE


class LogisticRegressionGD:
    """
    Minimal logistic regression trained with batch gradient descent.
    Features are standardized internally for stability; raw_coefficients()
    maps the weights back to the original units.
    """

    def __init__(
        self,
        lr: float = 0.1,
        max_iter: int = 5000,
        tol: float = GRADIENT_TOLERANCE,
        l2: float = 0.0,
    ):
        self.lr = lr
        self.max_iter = max_iter
        self.tol = tol
        self.l2 = l2
        self.weights_: np.ndarray | None = None
        self.mean_: np.ndarray | None = None
        self.std_: np.ndarray | None = None
        self.n_iter_: int = 0
        self.converged_: bool = False

    @staticmethod
    def _sigmoid(z: np.ndarray) -> np.ndarray:
        z = np.clip(z, -500, 500)
        return 1.0 / (1.0 + np.exp(-z))

    @staticmethod
    def _add_bias(X: np.ndarray) -> np.ndarray:
        return np.hstack([np.ones((X.shape[0], 1)), X])

    def _standardize(self, X: np.ndarray) -> np.ndarray:
        if self.mean_ is None or self.std_ is None:
            self.mean_ = X.mean(axis=0)
            self.std_ = X.std(axis=0)
            self.std_[self.std_ == 0] = 1.0
        return (X - self.mean_) / self.std_

    def fit(self, X, y):
        """Train until the gradient norm drops below tol or max_iter steps are taken."""
        X_arr = np.asarray(X, dtype=float)
        y_arr = np.asarray(y, dtype=float)

        self.mean_ = self.std_ = None
        X_bias = self._add_bias(self._standardize(X_arr))
        self.weights_ = np.zeros(X_bias.shape[1])
        self.n_iter_ = 0
        self.converged_ = False

        for step in range(1, self.max_iter + 1):
            preds = self._sigmoid(X_bias @ self.weights_)
            grad = (X_bias.T @ (preds - y_arr)) / len(y_arr)
            if self.l2:
                grad[1:] += self.l2 * self.weights_[1:]

            if np.linalg.norm(grad) < self.tol:
                self.converged_ = True
                break

            self.weights_ = self.weights_ - self.lr * grad
            self.n_iter_ = step

        self.intercept_ = float(self.weights_[0])
        self.coef_ = self.weights_[1:]
        return self

    def raw_coefficients(self) -> tuple[float, np.ndarray]:
        """
        Convert intercept and coefficients from standardized space back to original units.
        """
        if self.weights_ is None:
            raise RuntimeError("Model is not fitted.")
        raw_coef = self.coef_ / self.std_
        intercept = self.intercept_ - np.sum((self.mean_ / self.std_) * self.coef_)
        return float(intercept), raw_coef

    def predict_proba(self, X) -> np.ndarray:
        """Return P(y=1) for each row in X."""
        if self.weights_ is None:
            raise RuntimeError("Model is not fitted.")
        X_arr = np.asarray(X, dtype=float)
        X_scaled = self._standardize(X_arr)
        return self._sigmoid(self._add_bias(X_scaled) @ self.weights_)
