"""
Logistic-regression admission classifier for two exam scores.

This package contains the CSV loader, a scatter plot of the training split,
the trainer/evaluator built on scikit-learn (plus a lightweight gradient
descent solver) and the threshold/max-iterations sweep used by main.py.
"""

from .constants import FEATURE_NAMES, NEGATIVE_LABEL, PLOT_PATH, POSITIVE_LABEL, TEST_PATH, TRAIN_PATH
from .data_prep import Dataset, load_dataset, map_label
from .exceptions import DatasetError, EvaluationError, ExamAdmissionError, FitError, PlotError
from .logreg import LogisticRegressionGD
from .metrics import ConfusionMatrix
from .plotting import plot_dataset
from .sweep import SweepResult, run_sweep
from .trainer import TrainedModel, evaluate, fit_model

__all__ = [
    "FEATURE_NAMES",
    "NEGATIVE_LABEL",
    "PLOT_PATH",
    "POSITIVE_LABEL",
    "TEST_PATH",
    "TRAIN_PATH",
    "Dataset",
    "load_dataset",
    "map_label",
    "DatasetError",
    "EvaluationError",
    "ExamAdmissionError",
    "FitError",
    "PlotError",
    "LogisticRegressionGD",
    "ConfusionMatrix",
    "plot_dataset",
    "SweepResult",
    "run_sweep",
    "TrainedModel",
    "evaluate",
    "fit_model",
]
