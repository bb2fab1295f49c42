#!/usr/bin/env python3

"""Read the pages of a multi-page image file and display them.

You can choose which image to read first by providing a start index. Most
multi-page image files are TIFF files. Press any key to view the next image.
"""

import sys

from cvtutorials.cli import TUTORIAL_ERRORS, make_parser, parse_args, print_error
from cvtutorials.display import close_all, show_images
from cvtutorials.image_io import read_multipage


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Read multiple images from a single multi-page file")
    parser.add_argument("--path", required=True, help="Full path to multi-page file")
    parser.add_argument(
        "--start",
        type=int,
        default=0,
        help="Start index of image to read. First image has index 0.",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=0,
        help="Number of images to read from the start index (0 reads all)",
    )
    parsed = parse_args(parser, args)

    try:
        images = read_multipage(parsed.path, parsed.start, parsed.count)
    except TUTORIAL_ERRORS as e:
        return print_error(e)

    print(f"\nSuccessfully read {len(images)} images")
    if not parsed.no_display:
        show_images(images, start=parsed.start)
        close_all()
    print()
    return 0


if __name__ == "__main__":
    sys.exit(_main())
