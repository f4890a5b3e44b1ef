from __future__ import annotations

"""
Grid search over (max_iterations, threshold) keeping the most accurate confusion matrix.
"""

import math
from dataclasses import dataclass
from functools import partial
from typing import Callable, Iterator

from .constants import (
    BASELINE_MAX_ITERATIONS,
    BASELINE_THRESHOLD,
    MAX_ITERATIONS_RANGE,
    THRESHOLD_SCALE,
    THRESHOLD_STEPS,
)
from .data_prep import Dataset
from .metrics import ConfusionMatrix
from .trainer import evaluate

EvaluateFn = Callable[[Dataset, Dataset, float, int], ConfusionMatrix]


@dataclass(frozen=True)
class SweepResult:
    confusion_matrix: ConfusionMatrix
    threshold: float
    max_iterations: int

    @property
    def accuracy(self) -> float:
        return self.confusion_matrix.accuracy

    def improves_on(self, other: SweepResult) -> bool:
        """Strictly higher accuracy only; ties keep the earlier result."""
        if math.isnan(self.accuracy):
            return False
        return math.isnan(other.accuracy) or self.accuracy > other.accuracy


def max_iterations_grid() -> list[int]:
    return list(MAX_ITERATIONS_RANGE)


def threshold_grid() -> list[float]:
    # Integer steps keep exactly len(THRESHOLD_STEPS) values with no float drift.
    return [step / THRESHOLD_SCALE for step in THRESHOLD_STEPS]


def sweep_grid() -> Iterator[tuple[int, float]]:
    """(max_iterations, threshold) pairs, max_iterations in the outer loop."""
    thresholds = threshold_grid()
    for max_iterations in max_iterations_grid():
        for threshold in thresholds:
            yield max_iterations, threshold


def run_sweep(
    train: Dataset,
    test: Dataset,
    evaluate_fn: EvaluateFn = evaluate,
    on_step: Callable[[SweepResult, SweepResult], None] | None = None,
    solver: str | None = None,
) -> SweepResult:
    """
    Evaluate the baseline point, then every grid point in order, and return
    the first result with the highest accuracy. Each grid point is a fresh fit.
    """
    if solver is not None:
        evaluate_fn = partial(evaluate_fn, solver=solver)

    best = SweepResult(
        confusion_matrix=evaluate_fn(train, test, BASELINE_THRESHOLD, BASELINE_MAX_ITERATIONS),
        threshold=BASELINE_THRESHOLD,
        max_iterations=BASELINE_MAX_ITERATIONS,
    )

    for max_iterations, threshold in sweep_grid():
        candidate = SweepResult(
            confusion_matrix=evaluate_fn(train, test, threshold, max_iterations),
            threshold=threshold,
            max_iterations=max_iterations,
        )
        if candidate.improves_on(best):
            best = candidate
        if on_step is not None:
            on_step(candidate, best)

    return best
