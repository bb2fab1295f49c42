#!/usr/bin/env python3

"""Read an image file and display it without alterations."""

import sys

import cv2

from cvtutorials.cli import TUTORIAL_ERRORS, make_parser, parse_args, print_error
from cvtutorials.display import close_window, show_image
from cvtutorials.image_io import describe_image, read_image


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Read and Display Images v1.0.0")
    parser.add_argument("--image", required=True, help="Full path to image")
    parser.add_argument("--title", default="", help="Short text describing the image")
    parsed = parse_args(parser, args)

    try:
        image = read_image(parsed.image)
    except TUTORIAL_ERRORS as e:
        return print_error(e)

    print(f"\n{describe_image(image)}")
    title = parsed.title or "Image"
    if not parsed.no_display:
        show_image(title, image, window_flags=cv2.WINDOW_NORMAL)
        close_window(title)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(_main())
