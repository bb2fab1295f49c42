#!/usr/bin/env python3

"""Print the attributes of a dense array."""

import sys

import numpy as np

from cvtutorials.cli import make_parser, parse_args
from cvtutorials.data_types import array_attributes, describe_data_type


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Print the attributes of a dense array", display=False)
    parse_args(parser, args)

    test_mat = np.arange(1, 10, dtype=np.float32).reshape(3, 3)
    attributes = array_attributes(test_mat)

    print("\ntestMat array has the following attributes:")
    print(f"\tNo. of dimensions = {attributes.dims}")
    print(f"\tNo. of rows     = {attributes.rows}")
    print(f"\tNo. of columns  = {attributes.cols}")
    print(f"\tNo. of channels = {attributes.channels}")
    print(f"\tNo. of elements = {attributes.total}")
    print(f"\tData type       = {describe_data_type(attributes.type_code)}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(_main())
