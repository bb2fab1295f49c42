#!/usr/bin/env python3

"""Write text in every Hershey font on a gray canvas and box each line."""

import sys

from cvtutorials.cli import TUTORIAL_ERRORS, make_parser, parse_args, print_error
from cvtutorials.display import close_window, show_image
from cvtutorials.drawing import annotate_fonts, create_canvas, draw_caption
from cvtutorials.image_io import write_image


def _main(args: list[str] | None = None) -> int:
    parser = make_parser("Draw and annotate text on an image")
    parser.add_argument("--text", default="0penCV", help="Text to write")
    parser.add_argument(
        "--caption", default=None, help="Optional unicode caption drawn with Pillow"
    )
    parser.add_argument("--output", default=None, help="Where to save the image")
    parsed = parse_args(parser, args)

    try:
        canvas = create_canvas()
        boxes = annotate_fonts(canvas, parsed.text)
        if parsed.caption:
            canvas = draw_caption(canvas, parsed.caption)
        if parsed.output:
            write_image(parsed.output, canvas)
    except TUTORIAL_ERRORS as e:
        return print_error(e)

    for box in boxes:
        print(
            f"{box.font_name}: top-left {box.top_left.as_tuple()}, "
            f"bottom-right {box.bottom_right.as_tuple()}"
        )
    title = "Fonts"
    if not parsed.no_display:
        show_image(title, canvas)
        close_window(title)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(_main())
