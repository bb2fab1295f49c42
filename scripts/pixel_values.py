#!/usr/bin/env python3

"""Print the value of a single pixel of an image."""

import sys

import cv2

from cvtutorials.cli import TUTORIAL_ERRORS, make_parser, parse_args, print_error
from cvtutorials.image_io import read_image
from cvtutorials.pixels import format_pixel_value


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Get the value of a pixel", display=False)
    parser.add_argument("--image", required=True, help="Full path to image file")
    parser.add_argument(
        "--row", type=int, default=0, help="Row of pixel. Top row is 0."
    )
    parser.add_argument(
        "--column", type=int, default=0, help="Column of pixel. Left column is 0."
    )
    parsed = parse_args(parser, args)

    try:
        image = read_image(parsed.image, cv2.IMREAD_ANYCOLOR | cv2.IMREAD_ANYDEPTH)
        print(f"\n{format_pixel_value(image, parsed.row, parsed.column)}\n")
    except TUTORIAL_ERRORS as e:
        return print_error(e)
    return 0


if __name__ == "__main__":
    sys.exit(_main())
