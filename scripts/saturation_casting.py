#!/usr/bin/env python3

"""Show how saturation casting clamps overflow and underflow."""

import sys

import cv2
import numpy as np

from cvtutorials.cli import make_parser, parse_args
from cvtutorials.core_types import format_matrix
from cvtutorials.data_types import CV_8U, describe_data_type, make_array, type_code_of
from cvtutorials.saturation import saturate_cast


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Saturation casting of arrays and values", display=False)
    parse_args(parser, args)

    # Arrays of 8-bit unsigned integers (0 to 255).
    m1 = make_array(2, 2, CV_8U, 15)
    m2 = make_array(2, 2, CV_8U, 245)
    m3 = make_array(2, 2, CV_8U, 10)
    for name, m in [("m1", m1), ("m2", m2), ("m3", m3)]:
        print(f"\n{name} = \n{format_matrix(m)}")

    m4 = cv2.add(m1, m2)
    print(
        "\n(m1 + m2) shows saturation casting applied to 'overflow' = \n"
        f"{format_matrix(m4)}"
    )
    m5 = cv2.subtract(m3, m1)
    print(
        "\n(m3 - m1) shows saturation casting applied to 'underflow' = \n"
        f"{format_matrix(m5)}"
    )

    # 8-bit signed integers (-128 to 127).
    m6 = np.array([-36, -125, -48, 52, -75, 78, 109, -119, 54], dtype=np.int8)
    m6 = m6.reshape(3, 3)
    print(f"\nm6 = \n{format_matrix(m6)}")
    print(f"\nm6 data type = {describe_data_type(type_code_of(m6))}")
    m7 = cv2.multiply(m6, np.full_like(m6, 2))
    print(
        "\n(m6 x 2) shows saturation casting applied to both 'underflow' and "
        f"'overflow' = \n{format_matrix(m7)}"
    )

    a, b, c = -36, 360, 33333
    d = float(np.float32(23456.89765))
    e = -33789.000023451234
    casts = [
        ("Integer", a, np.uint8, "unsigned char"),
        ("Integer", b, np.uint8, "unsigned char"),
        ("Integer", a, np.int8, "signed char"),
        ("Integer", b, np.int8, "signed char"),
        ("Integer", c, np.int16, "short integer"),
        ("Float", d, np.int32, "32-bit integer"),
        ("Float", e, np.int16, "short integer"),
    ]
    for kind, value, dtype, type_name in casts:
        cast = saturate_cast(value, dtype)
        print(f"\n{kind} value {value} cast to {type_name} = {cast}")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(_main())
