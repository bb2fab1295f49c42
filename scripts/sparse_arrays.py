#!/usr/bin/env python3

"""Create sparse arrays and fill them from flat lists of values."""

import math
import sys

import numpy as np

from cvtutorials.cli import make_parser, parse_args, print_error
from cvtutorials.sparse_arrays import (
    SparseArray,
    fill_sparse_array,
    format_sparse_elements,
)


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Create and fill sparse arrays", display=False)
    parser.add_argument(
        "--shape",
        type=int,
        nargs="+",
        default=[4, 4],
        help="Size of each dimension of the filled sparse array",
    )
    parsed = parse_args(parser, args)

    # 1. An empty 10 x 10 sparse array, and a copy of it.
    sm1 = SparseArray((10, 10), np.float32)
    sm2 = sm1.copy()
    print(f"\nsm1 = {sm1}\nsm2 (copy of sm1) = {sm2}")

    # 2. A sparse array made from a dense array.
    dense = np.zeros((10, 10), dtype=np.float32)
    dense[2, 3] = 1.5
    dense[7, 1] = -4.0
    sm3 = SparseArray.from_dense(dense)
    print(f"\nsm3 (from a dense array) = {sm3}")
    print(f"sm3 elements: {format_sparse_elements(sm3)}")

    # 3. A sparse array filled from a flat list, where every third value is 0.
    shape = tuple(parsed.shape)
    try:
        values = [float(i % 3) for i in range(math.prod(shape))]
        filled = fill_sparse_array(shape, np.float32, values)
    except ValueError as e:
        return print_error(e)
    print(f"\nFilled sparse array = {filled}")
    print(f"Stored elements: {format_sparse_elements(filled)}")
    print(f"All elements: {format_sparse_elements(filled, include_zeros=True)}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(_main())
