from __future__ import annotations

"""
Fixed paths, labels and search ranges shared by the loader, trainer and sweep.
"""

from pathlib import Path

TRAIN_PATH = Path("data/train.csv")
TEST_PATH = Path("data/test.csv")
PLOT_PATH = Path("plot.svg")

FEATURE_NAMES = ("test 1", "test 2")
TARGET_NAME = "target"
LABEL_COLUMN = 2

POSITIVE_LABEL = "accepted"
NEGATIVE_LABEL = "denied"
CLASS_LABELS = (NEGATIVE_LABEL, POSITIVE_LABEL)

# Solver settings
GRADIENT_TOLERANCE = 1e-4
ALPHA = 1.0

# Hyperparameter search
BASELINE_THRESHOLD = 0.01
BASELINE_MAX_ITERATIONS = 100
MAX_ITERATIONS_RANGE = range(1000, 5000, 500)
THRESHOLD_STEPS = range(2, 100)
THRESHOLD_SCALE = 100
