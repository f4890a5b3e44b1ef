from __future__ import annotations

"""
Binary confusion matrix for accepted/denied predictions and the ratios derived from it.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from sklearn import metrics

from .constants import CLASS_LABELS, POSITIVE_LABEL
from .exceptions import EvaluationError


def _ratio(num: int, den: int) -> float:
    return num / den if den else float("nan")


@dataclass(frozen=True)
class ConfusionMatrix:
    """Counts of predictions against true labels, "accepted" being the positive class."""

    tp: int
    fp: int
    tn: int
    fn: int

    @classmethod
    def from_labels(cls, y_true: Sequence[str], y_pred: Sequence[str]) -> ConfusionMatrix:
        """
        Compare predicted to true labels. Both sides must only contain the two
        known class labels and have the same length.
        """
        y_true = np.asarray(y_true, dtype=object)
        y_pred = np.asarray(y_pred, dtype=object)
        if y_true.shape != y_pred.shape:
            raise EvaluationError(
                f"{len(y_pred)} predictions for {len(y_true)} true labels"
            )
        unseen = (set(y_true) | set(y_pred)) - set(CLASS_LABELS)
        if unseen:
            raise EvaluationError(f"unknown class labels: {sorted(map(str, unseen))}")

        cm = metrics.confusion_matrix(y_true, y_pred, labels=list(CLASS_LABELS))
        tn, fp, fn, tp = (int(v) for v in cm.ravel())
        return cls(tp=tp, fp=fp, tn=tn, fn=fn)

    @property
    def total(self) -> int:
        return self.tp + self.fp + self.tn + self.fn

    @property
    def accuracy(self) -> float:
        return _ratio(self.tp + self.tn, self.total)

    @property
    def precision(self) -> float:
        return _ratio(self.tp, self.tp + self.fp)

    @property
    def recall(self) -> float:
        return _ratio(self.tp, self.tp + self.fn)

    @property
    def f1(self) -> float:
        p, r = self.precision, self.recall
        if np.isnan(p) or np.isnan(r) or p + r == 0:
            return float("nan")
        return 2 * p * r / (p + r)

    def as_array(self) -> np.ndarray:
        """Same layout as sklearn: [[TN, FP], [FN, TP]]."""
        return np.array([[self.tn, self.fp], [self.fn, self.tp]])

    def __str__(self) -> str:
        width = max(len(label) for label in CLASS_LABELS) + 2
        header = " " * width + "".join(f"{label:>{width}}" for label in CLASS_LABELS)
        rows = [header]
        for label, counts in zip(CLASS_LABELS, self.as_array()):
            rows.append(f"{label:<{width}}" + "".join(f"{c:>{width}}" for c in counts))
        rows.append(f"(rows: actual, columns: predicted, positive: {POSITIVE_LABEL})")
        return "\n".join(rows)
