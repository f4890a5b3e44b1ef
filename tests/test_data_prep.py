import pytest

from exam_admission.constants import FEATURE_NAMES
from exam_admission.data_prep import Dataset, load_dataset, map_label
from exam_admission.exceptions import DatasetError


def test_load_counts(csv_writer):
    path = csv_writer("train.csv", [(34.6, 78.0, 0), (60.2, 86.3, 1), (79.0, 75.3, 1)])
    dataset = load_dataset(path)

    assert dataset.nsamples == 3
    assert dataset.nfeatures == 2
    assert dataset.ntargets == 1
    assert dataset.feature_names == list(FEATURE_NAMES)


def test_label_mapping_is_exact(csv_writer):
    path = csv_writer("train.csv", [(1, 2, 1), (3, 4, 0), (5, 6, 2), (7, 8, 1.0), (9, 10, -1)])
    dataset = load_dataset(path)

    assert list(dataset.targets) == ["accepted", "denied", "denied", "accepted", "denied"]
    assert list(dataset.positive_mask()) == [True, False, False, True, False]


def test_map_label():
    assert map_label(1) == "accepted"
    assert map_label(1.0) == "accepted"
    assert map_label(0) == "denied"
    assert map_label(0.5) == "denied"


def test_extra_columns_are_ignored(csv_writer):
    path = csv_writer("train.csv", [(1, 2, 1, 99), (3, 4, 0, 98)])
    dataset = load_dataset(path)

    assert dataset.nfeatures == 2
    assert list(dataset.targets) == ["accepted", "denied"]


def test_loading_twice_gives_equal_datasets(csv_writer):
    path = csv_writer("train.csv", [(34.6, 78.0, 0), (60.2, 86.3, 1)])

    assert load_dataset(path).equals(load_dataset(path))


def test_missing_file(tmp_path):
    with pytest.raises(DatasetError):
        load_dataset(tmp_path / "nope.csv")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    with pytest.raises(DatasetError):
        load_dataset(path)


def test_too_few_columns(csv_writer):
    path = csv_writer("train.csv", [(1, 2), (3, 4)])
    with pytest.raises(DatasetError, match="at least 3 columns"):
        load_dataset(path)


def test_non_numeric_cell(tmp_path):
    path = tmp_path / "train.csv"
    path.write_text("1,2,1\nabc,4,0\n")
    with pytest.raises(DatasetError):
        load_dataset(path)


@pytest.mark.parametrize("content", ["1,2,1\n3,4\n", "1,2,1\n3,4,0,5\n", "1,,1\n"])
def test_ragged_rows(tmp_path, content):
    path = tmp_path / "train.csv"
    path.write_text(content)
    with pytest.raises(DatasetError):
        load_dataset(path)


def test_dataset_rejects_mismatched_lengths(csv_writer):
    dataset = load_dataset(csv_writer("train.csv", [(1, 2, 1), (3, 4, 0)]))
    with pytest.raises(DatasetError):
        Dataset(records=dataset.records, targets=dataset.targets.iloc[:1])


def test_fractional_label_near_one_is_denied_not_truncated(csv_writer):
    path = csv_writer("train.csv", [(1, 2, 1.5), (3, 4, 1.9), (5, 6, 1)])
    dataset = load_dataset(path)

    assert list(dataset.targets) == ["denied", "denied", "accepted"]
