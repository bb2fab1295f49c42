"""Regions of interest and the borders around them."""

import cv2

from cvtutorials.structs import Array, BorderSettings, Point

_BORDER_DESCRIPTIONS = {
    cv2.BORDER_CONSTANT: "Border with a constant pixel value",
    cv2.BORDER_REPLICATE: "Border with replicated pixels",
    cv2.BORDER_REFLECT: "Border with mirror reflected pixel values",
    cv2.BORDER_WRAP: "Border with wrapped pixel values",
    cv2.BORDER_REFLECT_101: "Border with reflected pixel values (edge pixels not used)",
    cv2.BORDER_ISOLATED: (
        "Border created without using any pixels outside input image or ROI"
    ),
}

INVALID_BORDER_TYPE = "Invalid border type"


def describe_border(border_type: int) -> str:
    """Describe how a border type creates its pixels."""
    return _BORDER_DESCRIPTIONS.get(border_type, INVALID_BORDER_TYPE)


def _normalise_roi(image: Array, corner1: Point, corner2: Point) -> tuple[Point, Point]:
    """Order two opposite corners as (top-left, bottom-right), like cv::Rect,
    and make sure the region is non-empty and inside the image."""
    top_left = Point(min(corner1.x, corner2.x), min(corner1.y, corner2.y))
    bottom_right = Point(max(corner1.x, corner2.x), max(corner1.y, corner2.y))
    rows, cols = image.shape[:2]
    if not (
        0 <= top_left.x < bottom_right.x <= cols
        and 0 <= top_left.y < bottom_right.y <= rows
    ):
        raise ValueError(
            f"Region of interest {top_left.as_tuple()} to "
            f"{bottom_right.as_tuple()} is empty or outside the {cols} x {rows} "
            "image."
        )
    return top_left, bottom_right


def extract_roi(image: Array, top_left: Point, bottom_right: Point) -> Array:
    """Get a region of interest as a view of the image.

    Like cv::Rect, the bottom-right corner is exclusive and swapped corners
    are put in order.
    """
    top_left, bottom_right = _normalise_roi(image, top_left, bottom_right)
    return image[top_left.y : bottom_right.y, top_left.x : bottom_right.x]


def draw_roi(image: Array, top_left: Point, bottom_right: Point) -> Array:
    """Get a copy of the image with the region of interest outlined."""
    top_left, bottom_right = _normalise_roi(image, top_left, bottom_right)
    outlined = image.copy()
    cv2.rectangle(
        outlined,
        top_left.as_tuple(),
        bottom_right.as_tuple(),
        (0, 0, 0),
        2,
        cv2.LINE_AA,
    )
    return outlined


def add_border(roi: Array, settings: BorderSettings) -> Array:
    """Create a border around a region of interest.

    The border only uses pixels of the region itself, never pixels of the
    parent image around it.
    """
    sizes = (settings.top, settings.bottom, settings.left, settings.right)
    if any(size < 0 for size in sizes):
        raise ValueError(f"Border sizes must be non-negative, got {sizes}")
    if settings.border_type not in _BORDER_DESCRIPTIONS:
        raise ValueError(f"{INVALID_BORDER_TYPE}: {settings.border_type}")
    value = settings.constant_value
    return cv2.copyMakeBorder(
        roi,
        settings.top,
        settings.bottom,
        settings.left,
        settings.right,
        settings.border_type | cv2.BORDER_ISOLATED,
        value=(value, value, value, 0),
    )
