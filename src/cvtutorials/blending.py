"""Blending two images together."""

import logging

import cv2

from cvtutorials.structs import Array


def clamp_alpha(alpha: float) -> float:
    """Use alpha if it is in [0, 1], otherwise fall back to 0.5."""
    if 0 <= alpha <= 1:
        return alpha
    logging.warning(f"Blending value {alpha} is outside [0, 1], using 0.5.")
    return 0.5


def blend_images(image1: Array, image2: Array, alpha: float) -> Array:
    """Blend two images as alpha * image1 + (1 - alpha) * image2.

    The second image is first resized to the size of the first. Both images
    must have the same number of channels and data type.
    """
    if image1.dtype != image2.dtype:
        raise ValueError(
            f"Images must have the same data type, got {image1.dtype} and "
            f"{image2.dtype}"
        )
    if image1.shape[2:] != image2.shape[2:]:
        raise ValueError(
            f"Images must have the same number of channels, got shapes "
            f"{image1.shape} and {image2.shape}"
        )
    height, width = image1.shape[:2]
    resized = cv2.resize(image2, (width, height))
    # cv2.resize drops a trailing single-channel axis.
    resized = resized.reshape(image1.shape)
    return cv2.addWeighted(image1, alpha, resized, 1.0 - alpha, 0.0)
