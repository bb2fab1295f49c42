"""Reading, writing, compressing and decompressing images.

All codecs belong to OpenCV. These helpers choose the codec parameters for a
file extension, check that OpenCV has a reader/writer for a file, and turn
OpenCV's empty results and exceptions into ImageReadError/ImageWriteError.
"""

import logging
from pathlib import Path
from typing import Iterator, Sequence

import cv2
import numpy as np

from cvtutorials.data_types import array_attributes, describe_data_type
from cvtutorials.structs import Array
from cvtutorials.utils import check_file_extension

SAVE_AS_EXTENSIONS = ("jpeg", "jpg", "png", "webp")
MULTIPAGE_EXTENSIONS = ("tiff", "tif")
COMPRESSION_EXTENSIONS = ("jpeg", "jpg", "jp2", "png", "webp", "tiff")

# Extension -> (codec parameter, default value) used when compressing.
_COMPRESSION_PARAMS = {
    "jpeg": (cv2.IMWRITE_JPEG_QUALITY, 95),
    "jpg": (cv2.IMWRITE_JPEG_QUALITY, 95),
    "png": (cv2.IMWRITE_PNG_COMPRESSION, 5),
    "jp2": (cv2.IMWRITE_JPEG2000_COMPRESSION_X1000, 1000),
    "webp": (cv2.IMWRITE_WEBP_QUALITY, 45),
    "tiff": (cv2.IMWRITE_TIFF_COMPRESSION, 5),
}


class ImageReadError(RuntimeError):
    """Image data could not be read or decoded."""


class ImageWriteError(RuntimeError):
    """Image data could not be written or encoded."""


def _is_empty(image: Array | None) -> bool:
    return image is None or image.size == 0


def read_image(path: str | Path, flags: int = cv2.IMREAD_UNCHANGED) -> Array:
    """Read an image file."""
    if not cv2.haveImageReader(str(path)):
        raise ImageReadError(
            f"Your system does not have a suitable image reader for the file: {path}"
        )
    image = cv2.imread(str(path), flags)
    if _is_empty(image):
        raise ImageReadError(f"Could not read data from image file: {path}")
    logging.debug(f"Read image {path} with shape {image.shape}.")
    return image


def describe_image(image: Array) -> str:
    """Describe the size, channels and data type of an image."""
    attributes = array_attributes(image)
    return (
        f"Image size (width x height): {attributes.cols} x {attributes.rows}\n"
        f"No. of channels: {attributes.channels}\n"
        f"Data type: {describe_data_type(attributes.type_code)}"
    )


def image_write_flag(ext: str) -> int:
    """Get the quality/compression parameter for a save-as extension."""
    ext = ext.lower().lstrip(".")
    if ext not in SAVE_AS_EXTENSIONS:
        raise ValueError(f"Cannot save image to file with extension: {ext}")
    return _COMPRESSION_PARAMS[ext][0]


def save_image(image: Array, path: str | Path, quality: int) -> None:
    """Save an image as a jpeg, jpg, png or webp file.

    The quality ranges are 0 to 100 for jpeg (higher is better), 0 to 9 for
    png (compression level) and 1 to 100 for webp.
    """
    ext = check_file_extension(path, SAVE_AS_EXTENSIONS)
    if not cv2.haveImageWriter(str(path)):
        raise ImageWriteError(
            f"Your system does not have a suitable image writer for the file: {path}"
        )
    params = [image_write_flag(ext), int(quality)]
    try:
        result = cv2.imwrite(str(path), image, params)
    except cv2.error as e:
        raise ImageWriteError(f"Error converting image to {ext} format: {e}") from e
    if not result:
        raise ImageWriteError(f"Could not save image file to {path}")
    logging.info(f"Saved image file to {path}.")


def write_image(path: str | Path, image: Array) -> None:
    """Write an image with the codec's default parameters, creating parent
    directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        result = cv2.imwrite(str(path), image)
    except cv2.error as e:
        raise ImageWriteError(f"Could not save image file to {path}: {e}") from e
    if not result:
        raise ImageWriteError(f"Could not save image file to {path}")


def iter_directory_images(directory: str | Path) -> Iterator[tuple[Path, Array]]:
    """Yield (path, image) for every readable image file in a directory.

    Files are visited in sorted order. Files that are not images, or whose
    data cannot be read, are logged and skipped.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise ImageReadError(f"Not a directory: {directory}")
    for path in sorted(directory.iterdir()):
        if not path.is_file():
            continue
        if not cv2.haveImageReader(str(path)):
            logging.warning(f"Cannot read the file {path} as an image file.")
            continue
        image = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        if _is_empty(image):
            logging.warning(f"Could not read data from image file: {path}")
            continue
        yield path, image


def save_multipage(images: Sequence[Array], path: str | Path) -> None:
    """Save several images as the pages of a single TIFF file."""
    check_file_extension(path, MULTIPAGE_EXTENSIONS)
    if not images:
        raise ImageWriteError("There are no images to save.")
    try:
        result = cv2.imwritemulti(str(path), list(images))
    except cv2.error as e:
        raise ImageWriteError(f"Could not save multiple images to {path}: {e}") from e
    if not result:
        raise ImageWriteError(f"Could not save multiple images to {path}")
    logging.info(f"Saved {len(images)} images to {path}.")


def read_multipage(
    path: str | Path,
    start: int = 0,
    count: int = 0,
    flags: int = cv2.IMREAD_UNCHANGED,
) -> list[Array]:
    """Read the pages of a multi-page image file.

    Reading begins at the page with index start. A count of 0 reads every
    page from start onwards.
    """
    if start < 0 or count < 0:
        raise ValueError(f"start and count must be non-negative, got {start}, {count}")
    try:
        if start == 0 and count == 0:
            result, pages = cv2.imreadmulti(str(path), flags=flags)
        else:
            if count == 0:
                count = cv2.imcount(str(path), flags) - start
            if count <= 0:
                raise ImageReadError(f"There are no images at index {start} in {path}")
            result, pages = cv2.imreadmulti(str(path), start, count, flags=flags)
    except cv2.error as e:
        raise ImageReadError(f"Could not read multiple images from {path}: {e}") from e
    if not result or not pages:
        raise ImageReadError(f"Could not read multiple images from {path}")
    return list(pages)


def compression_params(ext: str) -> tuple[int, int]:
    """Get the (codec parameter, value) pair used to compress to ext."""
    ext = ext.lower().lstrip(".")
    if ext not in _COMPRESSION_PARAMS:
        raise ValueError(
            f"Cannot compress to '{ext}'. Acceptable file extensions are "
            f"{', '.join(COMPRESSION_EXTENSIONS)}."
        )
    return _COMPRESSION_PARAMS[ext]


def compress_image(image: Array, ext: str) -> bytes:
    """Encode an image into an in-memory buffer with the codec for ext."""
    ext = ext.lower().lstrip(".")
    flag, value = compression_params(ext)
    try:
        result, buffer = cv2.imencode(f".{ext}", image, [flag, value])
    except cv2.error as e:
        raise ImageWriteError(f"Error compressing image: {e}") from e
    if not result:
        raise ImageWriteError(f"Could not compress image to {ext}.")
    assert buffer.dtype == np.uint8
    data = buffer.tobytes()
    logging.debug(f"Compressed image of shape {image.shape} to {len(data)} bytes.")
    return data


def decompress_image(data: bytes, flags: int = cv2.IMREAD_UNCHANGED) -> Array:
    """Decode an image from an in-memory buffer."""
    buffer = np.frombuffer(data, dtype=np.uint8)
    if buffer.size == 0:
        raise ImageReadError("Compressed image buffer is empty.")
    try:
        image = cv2.imdecode(buffer, flags)
    except cv2.error as e:
        raise ImageReadError(f"Could not decompress image: {e}") from e
    if _is_empty(image):
        raise ImageReadError("Decompressed image array is empty.")
    return image
