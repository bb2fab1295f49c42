"""Drawing and annotating images."""

import textwrap
from dataclasses import dataclass

import cv2
import numpy as np
from PIL import Image as PILImage
from PIL import ImageDraw, ImageFont

from cvtutorials.structs import Image, Point

HERSHEY_FONTS: tuple[tuple[str, int], ...] = (
    ("FONT_HERSHEY_SIMPLEX", cv2.FONT_HERSHEY_SIMPLEX),
    ("FONT_HERSHEY_PLAIN", cv2.FONT_HERSHEY_PLAIN),
    ("FONT_HERSHEY_DUPLEX", cv2.FONT_HERSHEY_DUPLEX),
    ("FONT_HERSHEY_COMPLEX", cv2.FONT_HERSHEY_COMPLEX),
    ("FONT_HERSHEY_TRIPLEX", cv2.FONT_HERSHEY_TRIPLEX),
    ("FONT_HERSHEY_COMPLEX_SMALL", cv2.FONT_HERSHEY_COMPLEX_SMALL),
    ("FONT_HERSHEY_SCRIPT_SIMPLEX", cv2.FONT_HERSHEY_SCRIPT_SIMPLEX),
    ("FONT_HERSHEY_SCRIPT_COMPLEX", cv2.FONT_HERSHEY_SCRIPT_COMPLEX),
    ("FONT_ITALIC", cv2.FONT_ITALIC),
)

BOX_COLOR = (0, 0, 255)  # red in BGR
TEXT_COLOR = (0, 0, 0)


@dataclass(frozen=True)
class TextBox:
    """Where a string of text was drawn."""

    font_name: str
    origin: Point
    top_left: Point
    bottom_right: Point
    baseline: int


def create_canvas(
    width: int = 600,
    height: int = 600,
    color: tuple[int, int, int] = (125, 125, 125),
) -> Image:
    """Create a 3-channel image filled with one (BGR) color."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Could not create canvas of size {width} x {height}.")
    canvas = np.empty((height, width, 3), dtype=np.uint8)
    canvas[:] = color
    return canvas


def annotate_fonts(
    canvas: Image,
    text: str = "0penCV",
    font_scale: float = 1.0,
    thickness: int = 1,
    start_y: int = 50,
    step: int = 50,
    x: int = 10,
) -> list[TextBox]:
    """Write text once per Hershey font, one line below the other, each in a
    bounding box.

    The box runs from the bottom of the text's baseline to the top of its
    tallest glyph.
    """
    boxes = []
    y = start_y
    for font_name, font in HERSHEY_FONTS:
        (width, height), baseline = cv2.getTextSize(text, font, font_scale, thickness)
        top_left = Point(x, y - height)
        bottom_right = Point(x + width, y + baseline)
        cv2.rectangle(
            canvas, top_left.as_tuple(), bottom_right.as_tuple(), BOX_COLOR
        )
        cv2.putText(
            canvas,
            text,
            (x, y),
            font,
            font_scale,
            TEXT_COLOR,
            thickness,
            cv2.LINE_AA,
        )
        boxes.append(TextBox(font_name, Point(x, y), top_left, bottom_right, baseline))
        y += step
    return boxes


def draw_caption(
    canvas: Image,
    text: str,
    band_fraction: float = 0.1,
    text_color: tuple[int, int, int] = TEXT_COLOR,
    band_color: tuple[int, int, int] = (255, 255, 255),
    max_chars_per_line: int | None = None,
    margin: int = 4,
) -> Image:
    """Get a copy of a BGR canvas with a caption band along its bottom edge.

    The Hershey fonts only cover ASCII, so the caption is rendered with
    Pillow and can hold any unicode text. The font size is the largest that
    fits inside the band. Colors are BGR, like the rest of the lesson.
    """
    if canvas.ndim != 3 or canvas.shape[2] != 3:
        raise ValueError(f"Expected a 3-channel BGR canvas, got shape {canvas.shape}")
    if not 0 < band_fraction <= 1:
        raise ValueError(f"band_fraction must be in (0, 1], got {band_fraction}")
    if max_chars_per_line is not None:
        text = "\n".join(textwrap.wrap(text, width=max_chars_per_line))

    height, width = canvas.shape[:2]
    band_top = min(int(round(height * (1 - band_fraction))), height - 1)
    center = (width / 2, (band_top + height) / 2)

    pil_img = PILImage.fromarray(cv2.cvtColor(canvas, cv2.COLOR_BGR2RGB))
    draw = ImageDraw.Draw(pil_img)
    draw.rectangle([(0, band_top), (width - 1, height - 1)], fill=band_color[::-1])

    for font_size in range(max(height - band_top, 1), 0, -1):
        font = ImageFont.load_default(font_size)
        left, top, right, bottom = draw.multiline_textbbox(
            center, text, font=font, anchor="mm", align="center"
        )
        if (
            left >= margin
            and right <= width - margin
            and top >= band_top
            and bottom <= height
        ):
            break
    draw.multiline_text(
        center, text, font=font, fill=text_color[::-1], anchor="mm", align="center"
    )
    return cv2.cvtColor(np.array(pil_img), cv2.COLOR_RGB2BGR)
