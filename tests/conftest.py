"""
Shared fixtures: small CSV files and two well separated exam-score clusters.
"""
import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from exam_admission.data_prep import load_dataset


def write_rows(path, rows):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(",".join(str(v) for v in row) + "\n" for row in rows))
    return path


def make_clusters(seed, n_per_class=50):
    rng = np.random.RandomState(seed)
    denied = rng.normal(loc=30.0, scale=5.0, size=(n_per_class, 2))
    accepted = rng.normal(loc=80.0, scale=5.0, size=(n_per_class, 2))
    rows = [(x, y, 0) for x, y in denied] + [(x, y, 1) for x, y in accepted]
    order = rng.permutation(len(rows))
    return [rows[i] for i in order]


@pytest.fixture
def csv_writer(tmp_path):
    def _write(name, rows):
        return write_rows(tmp_path / name, rows)

    return _write


@pytest.fixture
def separable_train(tmp_path):
    return load_dataset(write_rows(tmp_path / "train.csv", make_clusters(seed=0)))


@pytest.fixture
def separable_test(tmp_path):
    return load_dataset(write_rows(tmp_path / "test.csv", make_clusters(seed=1, n_per_class=20)))
