"""Accessing pixel values."""

from cvtutorials.data_types import array_attributes
from cvtutorials.structs import Array

# Channel count -> how the channel order of a pixel is described.
_CHANNEL_FORMATS = {1: "", 2: "", 3: " (BGR format)", 4: " (BGRA format)"}


class PixelOutOfBoundsError(ValueError):
    """A row/column lies outside the image."""


def check_pixel_location(image: Array, row: int, column: int) -> None:
    """Make sure (row, column) is inside the image."""
    rows, cols = image.shape[:2]
    if not (0 <= row < rows and 0 <= column < cols):
        raise PixelOutOfBoundsError(
            f"Row/Column ({row}, {column}) of pixel is outside image boundary "
            f"({rows} rows x {cols} columns)."
        )


def pixel_value(image: Array, row: int, column: int) -> tuple[int | float, ...]:
    """Get the value of every channel of a pixel as Python numbers.

    Rows count from the top of the image and columns from the left, both
    starting at 0.
    """
    channels = array_attributes(image).channels
    if channels not in _CHANNEL_FORMATS:
        raise ValueError(f"Images with {channels} channels are not supported.")
    check_pixel_location(image, row, column)
    if channels == 1:
        return (image[row, column].item(),)
    return tuple(v.item() for v in image[row, column])


def format_pixel_value(image: Array, row: int, column: int) -> str:
    """Describe the value of a pixel in a sentence."""
    values = pixel_value(image, row, column)
    channel_format = _CHANNEL_FORMATS[len(values)]
    location = f"at location (row, column) ({row}, {column})"
    if len(values) == 1:
        return f"Pixel value {location} = {values[0]}"
    joined = ", ".join(str(v) for v in values)
    return f"Pixel values{channel_format} {location} = ({joined})"
