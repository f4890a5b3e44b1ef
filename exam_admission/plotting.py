from __future__ import annotations

"""
SVG scatter plot of the training split, one marker style per class.
"""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from .constants import PLOT_PATH
from .data_prep import Dataset
from .exceptions import PlotError

AXIS_RANGE = (0.0, 120.0)
POSITIVE_STYLE = {"marker": "s", "color": "#00ff00", "label": "Exam Results"}
NEGATIVE_STYLE = {"marker": "o", "color": "#ff0000"}
MARKER_SIZE = 16


def split_by_label(dataset: Dataset) -> tuple[np.ndarray, np.ndarray]:
    """Return (accepted, everything else) as arrays of (test 1, test 2) points."""
    points = dataset.records.to_numpy(dtype=float)
    mask = dataset.positive_mask()
    return points[mask], points[~mask]


def draw_scatter(ax, dataset: Dataset):
    """Draw both classes on `ax`; returns the (accepted, denied) point collections."""
    positive, negative = split_by_label(dataset)
    positive_points = ax.scatter(positive[:, 0], positive[:, 1], s=MARKER_SIZE, **POSITIVE_STYLE)
    negative_points = ax.scatter(negative[:, 0], negative[:, 1], s=MARKER_SIZE, **NEGATIVE_STYLE)
    return positive_points, negative_points


def plot_dataset(dataset: Dataset, path: Path | str = PLOT_PATH) -> Path:
    """Write the scatter plot to `path`, replacing any existing file."""
    fig, ax = plt.subplots(figsize=(8, 6))
    draw_scatter(ax, dataset)
    ax.set_xlim(*AXIS_RANGE)
    ax.set_ylim(*AXIS_RANGE)
    ax.set_xlabel("Test 1")
    ax.set_ylabel("Test 2")
    ax.grid(True)
    ax.legend(loc="upper right")
    fig.tight_layout()

    path = Path(path)
    try:
        fig.savefig(path, format="svg")
    except OSError as exc:
        raise PlotError(f"cannot write plot to {path}: {exc}") from exc
    finally:
        plt.close(fig)
    return path
