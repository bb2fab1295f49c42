"""Showing images in windows.

Windows are skipped when the CVTUTORIALS_HEADLESS environment variable is set
to a truthy value (1, true, yes), e.g. on a machine without a display.
CVTUTORIALS_WAIT_MS sets how long each window waits for a key press (0, the
default, waits forever).
"""

import logging
import os
from typing import Callable, Iterable

import cv2

from cvtutorials.structs import Array

_TRUTHY = ("1", "true", "yes")


def is_headless() -> bool:
    """Whether windows should be skipped."""
    return os.environ.get("CVTUTORIALS_HEADLESS", "").strip().lower() in _TRUTHY


def get_wait_ms() -> int:
    """How many milliseconds to wait for a key press after showing a window."""
    value = os.environ.get("CVTUTORIALS_WAIT_MS", "0")
    try:
        wait_ms = int(value)
    except ValueError as e:
        raise ValueError(f"CVTUTORIALS_WAIT_MS must be an integer, got {value}") from e
    return max(wait_ms, 0)


def show_image(
    title: str,
    image: Array,
    wait: bool = True,
    window_flags: int = cv2.WINDOW_AUTOSIZE,
) -> bool:
    """Show an image in a window, returning whether a window was shown.

    With wait, block until a key is pressed (or CVTUTORIALS_WAIT_MS passes).
    """
    if is_headless():
        logging.debug(f"Headless, not showing window '{title}'.")
        return False
    cv2.namedWindow(title, window_flags)
    cv2.imshow(title, image)
    if wait:
        cv2.waitKey(get_wait_ms())
    return True


def show_images(
    images: Iterable[Array],
    title_fn: Callable[[int], str] = lambda i: f"Image at index {i}",
    start: int = 0,
) -> int:
    """Show images one at a time, waiting for a key press between them.

    Returns the number of windows shown.
    """
    num_shown = 0
    for i, image in enumerate(images, start=start):
        num_shown += show_image(title_fn(i), image)
    return num_shown


def close_window(title: str) -> None:
    """Destroy one window."""
    if not is_headless():
        cv2.destroyWindow(title)


def close_all() -> None:
    """Destroy every window."""
    if not is_headless():
        cv2.destroyAllWindows()
