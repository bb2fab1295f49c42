#!/usr/bin/env python3

"""De-compress an image file, then display it in a window."""

import sys

from cvtutorials.cli import TUTORIAL_ERRORS, make_parser, parse_args, print_error
from cvtutorials.display import close_window, show_image
from cvtutorials.image_io import decompress_image, describe_image
from cvtutorials.utils import read_file_bytes


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("De-compress an image file")
    parser.add_argument(
        "--compressed-image", required=True, help="Full path to compressed image file"
    )
    parsed = parse_args(parser, args)

    try:
        image = decompress_image(read_file_bytes(parsed.compressed_image))
    except OSError as e:
        return print_error(f"Could not read {parsed.compressed_image}: {e}")
    except TUTORIAL_ERRORS as e:
        return print_error(e)

    print(f"\n{describe_image(image)}")
    title = "De-compressed image"
    if not parsed.no_display:
        show_image(title, image)
        close_window(title)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(_main())
