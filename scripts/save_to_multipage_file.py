#!/usr/bin/env python3

"""Save every image in a directory as one multi-page TIFF file."""

import sys
from pathlib import Path

from cvtutorials.cli import TUTORIAL_ERRORS, make_parser, parse_args, print_error
from cvtutorials.image_io import (
    MULTIPAGE_EXTENSIONS,
    iter_directory_images,
    save_multipage,
)
from cvtutorials.utils import check_file_extension


def _main(args: list[str] | None = None) -> int:
    parser = make_parser(
        "Save multiple images as a TIFF multi-page single file", display=False
    )
    parser.add_argument("images_dir", help="Full path to directory with images")
    parser.add_argument("save_dir", help="Full path to directory to save file to")
    parser.add_argument(
        "file_name", help="Name of multi-page image file with extension .tiff"
    )
    parsed = parse_args(parser, args)

    try:
        check_file_extension(parsed.file_name, MULTIPAGE_EXTENSIONS)
        images = [image for _, image in iter_directory_images(parsed.images_dir)]
        print(f"\nFound {len(images)} images.")
        save_path = Path(parsed.save_dir) / parsed.file_name
        save_multipage(images, save_path)
    except TUTORIAL_ERRORS as e:
        return print_error(e)

    print(f"\nSaved multiple images to single file: {save_path}\n")
    return 0


if __name__ == "__main__":
    sys.exit(_main())
