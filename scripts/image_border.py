#!/usr/bin/env python3

"""Create a border around a region of interest of an image.

The image path, region of interest, border sizes, border type and constant
value are read from an XML/YAML/JSON settings file.
"""

import sys
from pathlib import Path

from cvtutorials.borders import add_border, describe_border, draw_roi, extract_roi
from cvtutorials.cli import TUTORIAL_ERRORS, make_parser, parse_args, print_error
from cvtutorials.display import close_all, show_image
from cvtutorials.image_io import read_image, write_image
from cvtutorials.persistence import read_border_settings


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Create a border around a region of interest")
    parser.add_argument("--path", required=True, help="Full path to settings file")
    parser.add_argument(
        "--output",
        default=None,
        help="Directory to save the outlined and bordered images",
    )
    parsed = parse_args(parser, args)

    try:
        settings = read_border_settings(parsed.path)
        image = read_image(settings.image_path)
        roi = extract_roi(image, settings.top_left, settings.bottom_right)
        outlined = draw_roi(image, settings.top_left, settings.bottom_right)
        bordered = add_border(roi, settings)
        if parsed.output:
            write_image(Path(parsed.output) / "roi.png", outlined)
            write_image(Path(parsed.output) / "border.png", bordered)
    except TUTORIAL_ERRORS as e:
        return print_error(e)

    print(f"\n{describe_border(settings.border_type)}")
    print(f"ROI size: {roi.shape[1]} x {roi.shape[0]}")
    print(f"Bordered size: {bordered.shape[1]} x {bordered.shape[0]}\n")
    if not parsed.no_display:
        show_image("Region of interest", outlined, wait=False)
        show_image("Border", bordered)
        close_all()
    return 0


if __name__ == "__main__":
    sys.exit(_main())
