#!/usr/bin/env python3

"""Read every image in a directory and display them one at a time."""

import sys

import cv2

from cvtutorials.cli import TUTORIAL_ERRORS, make_parser, parse_args, print_error
from cvtutorials.display import close_all, show_image
from cvtutorials.image_io import describe_image, iter_directory_images


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Read and Display Multiple Images v1.0.0")
    parser.add_argument(
        "--dir", required=True, help="Full path to directory/folder with image files"
    )
    parsed = parse_args(parser, args)

    num_images = 0
    try:
        for path, image in iter_directory_images(parsed.dir):
            num_images += 1
            print(f"\nImage file: {path.name}\n{describe_image(image)}")
            if not parsed.no_display:
                show_image(path.name, image, window_flags=cv2.WINDOW_NORMAL)
    except TUTORIAL_ERRORS as e:
        return print_error(e)

    if not parsed.no_display:
        close_all()
    print(f"\nRead {num_images} images.\n")
    return 0


if __name__ == "__main__":
    sys.exit(_main())
