#!/usr/bin/env python3

"""Blend two images and display the resulting image in a window."""

import sys

from cvtutorials.blending import blend_images, clamp_alpha
from cvtutorials.cli import TUTORIAL_ERRORS, make_parser, parse_args, print_error
from cvtutorials.display import close_all, show_image
from cvtutorials.image_io import read_image, write_image


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Blend/Combine two images v1.0.0")
    parser.add_argument("--image1", required=True, help="Full path to first image")
    parser.add_argument(
        "--image2",
        required=True,
        help="Full path to second image. Image should have same data type as image1.",
    )
    parser.add_argument(
        "--alpha", type=float, default=0.5, help="Blending value between 0 and 1"
    )
    parser.add_argument("--output", help="Save the blended image to this path")
    parsed = parse_args(parser, args)

    alpha = clamp_alpha(parsed.alpha)
    try:
        image1 = read_image(parsed.image1)
        image2 = read_image(parsed.image2)
        blended = blend_images(image1, image2, alpha)
        if parsed.output:
            write_image(parsed.output, blended)
            print(f"\nSaved blended image to {parsed.output}")
    except TUTORIAL_ERRORS as e:
        return print_error(e)

    if not parsed.no_display:
        show_image("Blended Image", blended)
        close_all()
    print()
    return 0


if __name__ == "__main__":
    sys.exit(_main())
