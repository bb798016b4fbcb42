"""Command-line demonstration: basic algebra and a linear regression on a data file."""

from __future__ import annotations

import argparse
import random
import sys

from tinylinalg.dataloader import load_data_from_file
from tinylinalg.evaluator import compute_rmse, split_train_test
from tinylinalg.matrix import Matrix
from tinylinalg.nonsquare import NonSquareSystem
from tinylinalg.vector import Vector


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinylinalg",
        description="Demonstrate the vector and matrix types and fit a linear model.",
    )
    parser.add_argument(
        "data_file",
        nargs="?",
        default="machine.data",
        help="comma-separated data file (default: machine.data)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the train/test split")
    parser.add_argument(
        "--train-ratio", type=float, default=0.8, help="fraction of samples used for training"
    )
    return parser


def _demo_basics() -> None:
    print("Testing Vector and Matrix classes:")
    print(Vector.from_values([1.0, 2.0, 3.0]))
    print(Matrix.from_rows([[i * j for j in range(1, 4)] for i in range(1, 4)]))


def _demo_overdetermined() -> None:
    print("\nSolving Overdetermined System using Pseudo-Inverse:")
    b = Matrix.from_rows([[k, k + 1, k + 2] for k in range(1, 6)])
    c = Vector.from_values([1, 2, 3, 4, 5])
    try:
        print(NonSquareSystem(b, c).solve())
    except ValueError as exc:
        print(f"tinylinalg: cannot solve system: {exc}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    _demo_basics()
    _demo_overdetermined()

    print("\nLoading UCI CPU dataset and evaluating regression model:")
    try:
        features, targets = load_data_from_file(args.data_file)
        train_a, train_b, test_a, test_b = split_train_test(
            features, targets, args.train_ratio, random.Random(args.seed)
        )
        coefficients = NonSquareSystem(train_a, train_b).solve()
        predicted = test_a * coefficients
        rmse = compute_rmse(predicted, test_b)
    except (OSError, ValueError) as exc:
        print(f"tinylinalg: {exc}", file=sys.stderr)
        return 1

    print(f"\nRMSE on test set: {rmse:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())