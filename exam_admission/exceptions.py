"""Exceptions raised by the loading, training, evaluation and plotting steps."""


class ExamAdmissionError(Exception):
    """Base class for every fatal error in the analysis run."""

    exit_code = 1


class DatasetError(ExamAdmissionError):
    """Raised when a data file is missing, unreadable or malformed."""

    exit_code = 2


class FitError(ExamAdmissionError):
    """Raised when the solver cannot produce a usable model."""

    exit_code = 3


class EvaluationError(ExamAdmissionError):
    """Raised when predictions cannot be compared to the true labels."""

    exit_code = 4


class PlotError(ExamAdmissionError):
    """Raised when the scatter plot cannot be written."""

    exit_code = 5
