#!/usr/bin/env python3

"""Save an image as a jpeg, jpg, png or webp file.

jpeg has compression quality values 0 to 100 (the higher the better), png has
compression levels 0 to 9 and webp has quality values 1 to 100.
"""

import sys

from cvtutorials.cli import TUTORIAL_ERRORS, make_parser, parse_args, print_error
from cvtutorials.image_io import read_image, save_image


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Save an image file", display=False)
    parser.add_argument("image", help="Full path to image file")
    parser.add_argument(
        "path",
        help="Full path to save image to. Should include file name and extension.",
    )
    parser.add_argument(
        "quality", type=int, nargs="?", default=1, help="Quality of compression"
    )
    parsed = parse_args(parser, args)

    try:
        image = read_image(parsed.image)
        save_image(image, parsed.path, parsed.quality)
    except TUTORIAL_ERRORS as e:
        return print_error(e)

    print(f"\nSuccessfully saved image file to {parsed.path}\n")
    return 0


if __name__ == "__main__":
    sys.exit(_main())
