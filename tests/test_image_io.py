"""Tests for image_io.py."""

import tempfile
from pathlib import Path

import cv2
import numpy as np
import pytest

from cvtutorials.image_io import (
    ImageReadError,
    ImageWriteError,
    compress_image,
    compression_params,
    decompress_image,
    describe_image,
    image_write_flag,
    iter_directory_images,
    read_image,
    read_multipage,
    save_image,
    save_multipage,
    write_image,
)
from cvtutorials.utils import InvalidFileExtensionError


def _make_image(height=32, width=48, value=0):
    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[:, :, 0] = value
    image[: height // 2, :, 1] = 200
    image[:, : width // 2, 2] = 50
    return image


def test_read_write_image():
    """Tests for write_image(), read_image() and describe_image()."""
    image = _make_image()
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "sub" / "image.png"
        write_image(path, image)
        loaded = read_image(path)
        assert np.array_equal(loaded, image)
        gray = read_image(path, cv2.IMREAD_GRAYSCALE)
        assert gray.shape == (32, 48)
        with pytest.raises(ImageReadError):
            read_image(Path(tmp) / "missing.png")
        not_image = Path(tmp) / "notes.png"
        not_image.write_text("not an image")
        with pytest.raises(ImageReadError):
            read_image(not_image)
        with pytest.raises(ImageWriteError):
            write_image(Path(tmp) / "image.unknown", image)
    assert describe_image(image) == (
        "Image size (width x height): 48 x 32\n"
        "No. of channels: 3\n"
        "Data type: CV_8UC3 -> Array with 3 channels and primitive data type "
        "8-bit unsigned integers with range (0 to 255)"
    )


def test_save_image():
    """Tests for save_image() and image_write_flag()."""
    assert image_write_flag("JPG") == cv2.IMWRITE_JPEG_QUALITY
    assert image_write_flag(".png") == cv2.IMWRITE_PNG_COMPRESSION
    assert image_write_flag("webp") == cv2.IMWRITE_WEBP_QUALITY
    with pytest.raises(ValueError):
        image_write_flag("tiff")
    image = _make_image()
    with tempfile.TemporaryDirectory() as tmp:
        for file_name, quality in [("a.jpg", 90), ("b.png", 9), ("c.webp", 80)]:
            path = Path(tmp) / file_name
            save_image(image, path, quality)
            assert read_image(path).shape == image.shape
        # png is lossless whatever the compression level.
        assert np.array_equal(read_image(Path(tmp) / "b.png"), image)
        with pytest.raises(InvalidFileExtensionError):
            save_image(image, Path(tmp) / "d.bmp", 1)


def test_iter_directory_images():
    """Tests for iter_directory_images()."""
    with tempfile.TemporaryDirectory() as tmp:
        write_image(Path(tmp) / "b.png", _make_image(value=2))
        write_image(Path(tmp) / "a.png", _make_image(value=1))
        (Path(tmp) / "readme.txt").write_text("not an image")
        (Path(tmp) / "subdir").mkdir()
        found = list(iter_directory_images(tmp))
        assert [path.name for path, _ in found] == ["a.png", "b.png"]
        assert found[1][1][0, 0, 0] == 2
        with pytest.raises(ImageReadError):
            list(iter_directory_images(Path(tmp) / "readme.txt"))


def test_multipage():
    """Tests for save_multipage() and read_multipage()."""
    images = [_make_image(value=v) for v in (10, 20, 30)]
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "pages.tiff"
        save_multipage(images, path)
        pages = read_multipage(path)
        assert len(pages) == 3
        assert all(np.array_equal(p, i) for p, i in zip(pages, images))
        pages = read_multipage(path, start=1)
        assert [p[0, 0, 0] for p in pages] == [20, 30]
        pages = read_multipage(path, start=1, count=1)
        assert len(pages) == 1
        assert pages[0][0, 0, 0] == 20
        with pytest.raises(ImageReadError):
            read_multipage(path, start=3)
        with pytest.raises(ValueError):
            read_multipage(path, start=-1)
        with pytest.raises(ImageWriteError):
            save_multipage([], path)
        with pytest.raises(InvalidFileExtensionError):
            save_multipage(images, Path(tmp) / "pages.png")


def test_compress_decompress_image():
    """Tests for compress_image() and decompress_image()."""
    assert compression_params("PNG") == (cv2.IMWRITE_PNG_COMPRESSION, 5)
    assert compression_params("jpeg") == (cv2.IMWRITE_JPEG_QUALITY, 95)
    with pytest.raises(ValueError):
        compression_params("bmp")
    image = _make_image()
    data = compress_image(image, "png")
    assert isinstance(data, bytes)
    assert data[:4] == b"\x89PNG"
    assert np.array_equal(decompress_image(data), image)
    data = compress_image(image, ".jpg")
    assert data[:2] == b"\xff\xd8"
    assert decompress_image(data).shape == image.shape
    assert decompress_image(data, cv2.IMREAD_GRAYSCALE).shape == (32, 48)
    with pytest.raises(ImageReadError):
        decompress_image(b"")
    with pytest.raises(ImageReadError):
        decompress_image(b"definitely not an image")
