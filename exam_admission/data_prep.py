from __future__ import annotations

"""
Loading of the headerless exam-score CSV files into immutable datasets.
"""

from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd

from .constants import (
    FEATURE_NAMES,
    LABEL_COLUMN,
    NEGATIVE_LABEL,
    POSITIVE_LABEL,
    TARGET_NAME,
)
from .exceptions import DatasetError


def map_label(value: float) -> str:
    """Numeric label 1 is an acceptance, every other value a denial."""
    # Exact match, no truncation: 1.5 is a denial.
    return POSITIVE_LABEL if value == 1 else NEGATIVE_LABEL


@dataclass(frozen=True, eq=False)
class Dataset:
    """
    Feature matrix plus symbolic target vector for one split (train or test).
    """

    records: pd.DataFrame
    targets: pd.Series

    def __post_init__(self):
        if len(self.records) != len(self.targets):
            raise DatasetError(
                f"{len(self.records)} feature rows but {len(self.targets)} targets"
            )
        if self.records.shape[1] != len(FEATURE_NAMES):
            raise DatasetError(
                f"expected {len(FEATURE_NAMES)} features, got {self.records.shape[1]}"
            )

    @property
    def nsamples(self) -> int:
        return len(self.records)

    @property
    def nfeatures(self) -> int:
        return self.records.shape[1]

    @property
    def ntargets(self) -> int:
        return 1

    @property
    def feature_names(self) -> list[str]:
        return list(self.records.columns)

    def positive_mask(self) -> np.ndarray:
        return (self.targets == POSITIVE_LABEL).to_numpy()

    def equals(self, other: Dataset) -> bool:
        return self.records.equals(other.records) and self.targets.equals(other.targets)


def load_dataset(csv_path: Path | str) -> Dataset:
    """
    Read `feature1,feature2,label` rows into a Dataset.

    The whole file must parse as a rectangular numeric matrix with at least
    three columns; anything else raises DatasetError and nothing is returned.
    """
    try:
        df = pd.read_csv(csv_path, header=None, sep=",", dtype=float)
    except (OSError, ValueError) as exc:
        raise DatasetError(f"cannot load {csv_path}: {exc}") from exc

    if df.shape[1] <= LABEL_COLUMN:
        raise DatasetError(
            f"{csv_path}: expected at least {LABEL_COLUMN + 1} columns, got {df.shape[1]}"
        )
    if df.empty:
        raise DatasetError(f"{csv_path}: no rows")
    if df.isna().to_numpy().any():
        raise DatasetError(f"{csv_path}: missing values (ragged or blank cells)")

    records = df.iloc[:, : len(FEATURE_NAMES)].copy()
    records.columns = list(FEATURE_NAMES)
    targets = df[LABEL_COLUMN].map(map_label).rename(TARGET_NAME)

    return Dataset(records=records, targets=targets)
