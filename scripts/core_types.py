#!/usr/bin/env python3

"""Create small fixed-size matrices and print them in different styles."""

import sys

import numpy as np

from cvtutorials import core_types
from cvtutorials.cli import make_parser, parse_args
from cvtutorials.core_types import MatrixFormat, format_matrix
from cvtutorials.utils import create_rng_from_rng


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Instantiate and print small matrices", display=False)
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parsed = parse_args(parser, args)
    rng = np.random.default_rng(parsed.seed)

    default_m1 = core_types.zeros(1, 2)
    m2 = core_types.matx([1.2, 2.2], 2, 1, dtype=np.float32)
    m3 = core_types.matx([1, 2, 3, 4], 2, 2)
    m4 = m3.copy()
    m5 = core_types.full(3, 3, 2, dtype=np.float32)
    m6 = core_types.zeros(2, 3)
    m7 = core_types.ones(2, 2)
    m8 = core_types.eye(3, dtype=np.float32)
    mean, stddev = 2.3, 1.2
    m9 = core_types.randn(2, 2, mean, stddev, create_rng_from_rng(rng))
    low, high = 10.0, 20.0
    m10 = core_types.randu(3, 3, low, high, create_rng_from_rng(rng))

    sections = [
        (
            "default_m1 (1 x 2) matrix (Default format)",
            default_m1,
            MatrixFormat.DEFAULT,
        ),
        ("m2 (2 x 1) matrix (Python format)", m2, MatrixFormat.PYTHON),
        ("m3 (2 x 2) matrix (CSV format)", m3, MatrixFormat.CSV),
        ("m4 (2 x 2) matrix (MATLAB format)", m4, MatrixFormat.MATLAB),
        (
            "m5 (3 x 3) matrix with identical elements (NumPy format)",
            m5,
            MatrixFormat.NUMPY,
        ),
        ("m6 (2 x 3) matrix of Zeros (C format)", m6, MatrixFormat.C),
        ("m7 (2 x 2) matrix of Ones", m7, MatrixFormat.DEFAULT),
        ("m8 (3 x 3) unit matrix", m8, MatrixFormat.DEFAULT),
        (
            f"m9 (2 x 2) matrix with normally distributed values given the "
            f"mean = {mean} & standard deviation = {stddev}",
            m9,
            MatrixFormat.DEFAULT,
        ),
        (
            f"m10 (3 x 3) matrix with uniformly distributed values within the "
            f"range defined by min = {low} and max = {high}",
            m10,
            MatrixFormat.DEFAULT,
        ),
    ]
    print("\n****************** Printing matrices ******************")
    for title, matrix, fmt in sections:
        print(f"\n{title} :\n{format_matrix(matrix, fmt)}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(_main())
