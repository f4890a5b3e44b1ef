from __future__ import annotations

"""
CLI entrypoint: load the exam-score splits, plot the training data, then sweep
threshold and max_iterations for the most accurate logistic model.
"""

import argparse
import sys

from exam_admission import (
    PLOT_PATH,
    TEST_PATH,
    TRAIN_PATH,
    ExamAdmissionError,
    SweepResult,
    evaluate,
    load_dataset,
    plot_dataset,
    run_sweep,
)
from exam_admission.sweep import threshold_grid
from exam_admission.trainer import SOLVERS


def build_arg_parser():
    """Optional knobs only; data and plot paths are fixed."""
    parser = argparse.ArgumentParser(
        description="Find the logistic-regression threshold and max_iterations with the best test accuracy."
    )
    parser.add_argument(
        "--solver",
        choices=SOLVERS,
        default="lbfgs",
        help="lbfgs: scikit-learn LogisticRegression; gd: custom batch gradient descent.",
    )
    parser.add_argument("--verbose", action="store_true", help="Print every grid point.")
    return parser


def make_progress_printer(verbose: bool = False):
    """Print a line at the end of each max_iterations block (every point when verbose)."""
    last_threshold = threshold_grid()[-1]

    def on_step(result: SweepResult, best: SweepResult):
        if verbose:
            print(
                f"    max_iterations={result.max_iterations} threshold={result.threshold:.2f} "
                f"accuracy={result.accuracy:.4f}"
            )
        if result.threshold == last_threshold:
            print(
                f"  max_iterations={result.max_iterations} done, best accuracy so far "
                f"{best.accuracy:.4f} (threshold={best.threshold:.2f}, "
                f"max_iterations={best.max_iterations})"
            )

    return on_step


def print_result(best: SweepResult):
    cm = best.confusion_matrix
    print(f"most accurate confusion matrix:\n{cm}")
    print(f"with max_iterations: {best.max_iterations}, threshold: {best.threshold}")
    print(f"accuracy {cm.accuracy}")
    print(f"precision {cm.precision}")
    print(f"recall {cm.recall}")
    print(f"f1 {cm.f1}")


def run(args: argparse.Namespace) -> SweepResult:
    train = load_dataset(TRAIN_PATH)
    test = load_dataset(TEST_PATH)

    print(
        f"training with {train.nsamples} samples, testing with {test.nsamples} samples, "
        f"{train.nfeatures} features and {train.ntargets} target"
    )

    print("plotting data...")
    plot_dataset(train, PLOT_PATH)

    print("training and testing model...")
    best = run_sweep(
        train,
        test,
        evaluate_fn=evaluate,
        on_step=make_progress_printer(args.verbose),
        solver=args.solver,
    )

    print_result(best)
    return best


def main(args: argparse.Namespace | None = None) -> None:
    """Console-script entry point; the sweep result is only printed."""
    args = args or build_arg_parser().parse_args()
    try:
        run(args)
    except ExamAdmissionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(exc.exit_code) from exc


if __name__ == "__main__":
    main()
