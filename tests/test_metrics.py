import math

import pytest

from exam_admission.exceptions import EvaluationError
from exam_admission.metrics import ConfusionMatrix


def test_counts_from_labels():
    y_true = ["accepted", "accepted", "denied", "denied", "accepted"]
    y_pred = ["accepted", "denied", "denied", "accepted", "accepted"]
    cm = ConfusionMatrix.from_labels(y_true, y_pred)

    assert (cm.tp, cm.fp, cm.tn, cm.fn) == (2, 1, 1, 1)
    assert cm.as_array().tolist() == [[1, 1], [1, 2]]


def test_derived_ratios():
    cm = ConfusionMatrix(tp=6, fp=2, tn=10, fn=2)

    assert cm.accuracy == pytest.approx(16 / 20)
    assert cm.precision == pytest.approx(6 / 8)
    assert cm.recall == pytest.approx(6 / 8)
    assert cm.f1 == pytest.approx(0.75)


def test_no_positive_predictions_is_nan_guarded():
    cm = ConfusionMatrix.from_labels(["accepted", "denied"], ["denied", "denied"])

    assert cm.accuracy == pytest.approx(0.5)
    assert math.isnan(cm.precision)
    assert cm.recall == 0.0
    assert math.isnan(cm.f1)


def test_no_actual_positives_is_nan_guarded():
    cm = ConfusionMatrix(tp=0, fp=0, tn=3, fn=0)

    assert cm.accuracy == 1.0
    assert math.isnan(cm.precision)
    assert math.isnan(cm.recall)


def test_unknown_label_is_rejected():
    with pytest.raises(EvaluationError, match="unknown class labels"):
        ConfusionMatrix.from_labels(["accepted", "denied"], ["accepted", "maybe"])


def test_length_mismatch_is_rejected():
    with pytest.raises(EvaluationError):
        ConfusionMatrix.from_labels(["accepted", "denied"], ["accepted"])


def test_str_shows_both_classes():
    text = str(ConfusionMatrix(tp=1, fp=2, tn=3, fn=4))

    assert "accepted" in text
    assert "denied" in text
