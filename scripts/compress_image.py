#!/usr/bin/env python3

"""Compress an image into a buffer and save the buffer to a file.

The codec used depends on the file extension. Acceptable file extensions are
png, jpeg, jpg, jp2, webp or tiff.
"""

import sys
from pathlib import Path

from cvtutorials.cli import TUTORIAL_ERRORS, make_parser, parse_args, print_error
from cvtutorials.image_io import COMPRESSION_EXTENSIONS, compress_image, read_image
from cvtutorials.utils import check_file_extension, write_file_bytes


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Compress an image into a character buffer", display=False)
    parser.add_argument("--image", required=True, help="Full path to image")
    parser.add_argument(
        "--dir-path", required=True, help="Full path to directory to save file to"
    )
    parser.add_argument(
        "--file-name",
        required=True,
        help="Name of compressed file (including file extension)",
    )
    parsed = parse_args(parser, args)

    try:
        ext = check_file_extension(parsed.file_name, COMPRESSION_EXTENSIONS)
        image = read_image(parsed.image)
        data = compress_image(image, ext)
        print("\nImage successfully compressed.")
        save_path = Path(parsed.dir_path) / parsed.file_name
        write_file_bytes(save_path, data)
    except TUTORIAL_ERRORS as e:
        return print_error(e)

    print(f"Wrote {len(data)} bytes to {save_path}\n")
    return 0


if __name__ == "__main__":
    sys.exit(_main())
