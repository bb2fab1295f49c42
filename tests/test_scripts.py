"""Tests for the tutorial programs in scripts/."""

import importlib.util
import tempfile
from pathlib import Path

import cv2
import numpy as np
import pytest

from cvtutorials.image_io import read_image, write_image
from cvtutorials.persistence import write_border_settings
from cvtutorials.structs import BorderSettings, Point
from cvtutorials.utils import read_file_bytes

_SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


def _run(script_name, args):
    path = _SCRIPTS_DIR / f"{script_name}.py"
    spec = importlib.util.spec_from_file_location(script_name, path)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module._main(args)  # pylint: disable=protected-access


def _make_image(value=0, height=40, width=60):
    image = np.full((height, width, 3), value, dtype=np.uint8)
    image[: height // 2, : width // 3] = (255, 0, 0)
    return image


@pytest.fixture(autouse=True)
def _headless(monkeypatch):
    monkeypatch.setenv("CVTUTORIALS_HEADLESS", "1")


def test_matrix_lessons(capsys):
    """Tests for the core_types, dense_array and saturation_casting lessons."""
    assert _run("core_types", ["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "m3 (2 x 2) matrix (CSV format) :\n1, 2\n3, 4" in out
    assert "m6 (2 x 3) matrix of Zeros (C format) :\n{0, 0, 0, 0, 0, 0}" in out

    assert _run("dense_array", []) == 0
    out = capsys.readouterr().out
    assert "No. of rows     = 3" in out
    assert "Data type       = CV_32F or CV_32FC1" in out

    assert _run("saturation_casting", []) == 0
    out = capsys.readouterr().out
    assert "applied to 'overflow' = \n[255, 255;" in out
    assert "applied to 'underflow' = \n[0, 0;" in out
    assert "Integer value -36 cast to unsigned char = 0" in out
    assert "Integer value 360 cast to signed char = 127" in out
    assert "Integer value 33333 cast to short integer = 32767" in out
    assert "cast to short integer = -32768" in out


def test_sparse_and_helper_lessons(capsys):
    """Tests for the sparse_arrays and helper_objects lessons."""
    assert _run("sparse_arrays", ["--shape", "2", "3"]) == 0
    out = capsys.readouterr().out
    assert "SparseArray(shape=(2, 3), dtype=float32, nnz=4)" in out
    assert "All elements: 0.0 1.0 2.0 0.0 1.0 2.0" in out

    assert _run("helper_objects", ["--seed", "3", "--max-clusters", "3"]) == 0
    out = capsys.readouterr().out
    assert "Termination criteria: (3, 10, 1.0)" in out
    assert "Compactness:" in out
    assert _run("helper_objects", ["--max-clusters", "1"]) == 1


def test_blend_images(capsys):
    """Tests for the blend_images lesson."""
    with tempfile.TemporaryDirectory() as tmp:
        image1 = Path(tmp) / "one.png"
        image2 = Path(tmp) / "two.png"
        output = Path(tmp) / "out" / "blended.png"
        write_image(image1, np.full((20, 30, 3), 100, dtype=np.uint8))
        write_image(image2, np.full((10, 10, 3), 200, dtype=np.uint8))
        args = ["--image1", str(image1), "--image2", str(image2)]
        args += ["--alpha", "3", "--output", str(output)]
        assert _run("blend_images", args) == 0
        blended = read_image(output)
        assert blended.shape == (20, 30, 3)
        assert np.all(blended == 150)
        missing = ["--image1", str(Path(tmp) / "missing.png"), "--image2", str(image2)]
        assert _run("blend_images", missing) == 1
    assert "ERROR:" in capsys.readouterr().err


def test_write_file_storage(capsys):
    """Tests for the write_file_storage lesson."""
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "data.yaml"
        assert _run("write_file_storage", ["--path", str(path)]) == 0
        assert path.exists()
        out = capsys.readouterr().out
        assert "Name_of_Developer: Rodney" in out
        assert "Point_Cordinates: Point(x=23, y=78)" in out
        assert _run("write_file_storage", ["--path", str(Path(tmp) / "a.txt")]) == 1
    assert "File extension should be one of" in capsys.readouterr().err


def test_read_display_lessons(capsys):
    """Tests for the read_display_image and read_display_multiple_images
    lessons."""
    with tempfile.TemporaryDirectory() as tmp:
        write_image(Path(tmp) / "a.png", _make_image())
        write_image(Path(tmp) / "b.jpg", _make_image(50))
        (Path(tmp) / "notes.txt").write_text("not an image")
        image = str(Path(tmp) / "a.png")
        assert _run("read_display_image", ["--image", image]) == 0
        out = capsys.readouterr().out
        assert "Image size (width x height): 60 x 40" in out
        assert "No. of channels: 3" in out
        assert _run("read_display_image", ["--image", image, "--no-display"]) == 0
        assert _run("read_display_multiple_images", ["--dir", tmp]) == 0
        out = capsys.readouterr().out
        assert "Image file: a.png" in out
        assert "Read 2 images." in out
        assert _run("read_display_multiple_images", ["--dir", image]) == 1


def test_multipage_lessons(capsys):
    """Tests for the save_to_multipage_file and read_multipage_image lessons."""
    with tempfile.TemporaryDirectory() as tmp:
        images_dir = Path(tmp) / "images"
        for i in range(3):
            write_image(images_dir / f"{i}.png", _make_image(i * 10))
        save_dir = Path(tmp) / "saved"
        save_dir.mkdir()
        args = [str(images_dir), str(save_dir), "pages.tiff"]
        assert _run("save_to_multipage_file", args) == 0
        assert "Found 3 images." in capsys.readouterr().out
        path = str(save_dir / "pages.tiff")
        assert _run("read_multipage_image", ["--path", path, "--start", "1"]) == 0
        assert "Successfully read 2 images" in capsys.readouterr().out
        args = ["--path", path, "--start", "0", "--count", "1"]
        assert _run("read_multipage_image", args) == 0
        assert "Successfully read 1 images" in capsys.readouterr().out
        args = [str(images_dir), str(save_dir), "pages.png"]
        assert _run("save_to_multipage_file", args) == 1


def test_save_compress_decompress(capsys):
    """Tests for the save_image_as, compress_image and decompress_image
    lessons."""
    with tempfile.TemporaryDirectory() as tmp:
        image = Path(tmp) / "image.png"
        write_image(image, _make_image())
        saved = Path(tmp) / "image.jpg"
        assert _run("save_image_as", [str(image), str(saved), "90"]) == 0
        assert read_image(saved).shape == (40, 60, 3)
        assert _run("save_image_as", [str(image), str(Path(tmp) / "x.bmp")]) == 1

        args = ["--image", str(image), "--dir-path", tmp, "--file-name", "c.png"]
        assert _run("compress_image", args) == 0
        data = read_file_bytes(Path(tmp) / "c.png")
        assert data[:4] == b"\x89PNG"
        args = ["--compressed-image", str(Path(tmp) / "c.png")]
        assert _run("decompress_image", args) == 0
        assert "Image size (width x height): 60 x 40" in capsys.readouterr().out
        args = ["--image", str(image), "--dir-path", tmp, "--file-name", "c.gif"]
        assert _run("compress_image", args) == 1
        args = ["--compressed-image", str(Path(tmp) / "missing.png")]
        assert _run("decompress_image", args) == 1


def test_draw_annotate(capsys):
    """Tests for the draw_annotate lesson."""
    with tempfile.TemporaryDirectory() as tmp:
        output = Path(tmp) / "fonts.png"
        args = ["--caption", "Grüße", "--output", str(output)]
        assert _run("draw_annotate", args) == 0
        assert read_image(output).shape == (600, 600, 3)
    out = capsys.readouterr().out
    assert "FONT_HERSHEY_SIMPLEX: top-left (10, " in out
    assert "FONT_ITALIC: " in out


def test_pixel_values(capsys):
    """Tests for the pixel_values lesson."""
    with tempfile.TemporaryDirectory() as tmp:
        color = Path(tmp) / "color.png"
        write_image(color, _make_image())
        args = ["--image", str(color), "--row", "0", "--column", "0"]
        assert _run("pixel_values", args) == 0
        expected = "Pixel values (BGR format) at location (row, column) (0, 0) = "
        assert expected + "(255, 0, 0)" in capsys.readouterr().out
        gray = Path(tmp) / "gray.png"
        write_image(gray, np.full((5, 5), 7, dtype=np.uint8))
        assert _run("pixel_values", ["--image", str(gray), "--row", "4"]) == 0
        assert "Pixel value at location (row, column) (4, 0) = 7" in (
            capsys.readouterr().out
        )
        assert _run("pixel_values", ["--image", str(gray), "--row", "5"]) == 1
    assert "outside image boundary" in capsys.readouterr().err


def test_image_border(capsys):
    """Tests for the image_border lesson."""
    with tempfile.TemporaryDirectory() as tmp:
        image = Path(tmp) / "image.png"
        write_image(image, _make_image(80))
        settings = BorderSettings(
            image_path=str(image),
            top_left=Point(5, 5),
            bottom_right=Point(25, 15),
            top=3,
            bottom=3,
            left=4,
            right=4,
            border_type=cv2.BORDER_REFLECT,
            constant_value=0.0,
        )
        settings_path = Path(tmp) / "border.json"
        write_border_settings(settings_path, settings)
        output = Path(tmp) / "out"
        args = ["--path", str(settings_path), "--output", str(output)]
        assert _run("image_border", args) == 0
        out = capsys.readouterr().out
        assert "Border with mirror reflected pixel values" in out
        assert "Bordered size: 28 x 16" in out
        assert read_image(output / "border.png").shape == (16, 28, 3)
        assert read_image(output / "roi.png").shape == (40, 60, 3)
        assert _run("image_border", ["--path", str(Path(tmp) / "missing.yml")]) == 1


def test_output_path_errors(capsys):
    """Tests that programs report unwritable output paths and exit with 1."""
    with tempfile.TemporaryDirectory() as tmp:
        blocker = Path(tmp) / "afile"
        blocker.write_text("a regular file where a directory is expected")
        image = Path(tmp) / "image.png"
        write_image(image, _make_image())

        args = ["--image", str(image), "--dir-path", str(blocker)]
        assert _run("compress_image", args + ["--file-name", "c.png"]) == 1
        assert "ERROR:" in capsys.readouterr().err

        args = ["--image1", str(image), "--image2", str(image)]
        assert _run("blend_images", args + ["--output", str(blocker / "b.png")]) == 1
        assert "ERROR:" in capsys.readouterr().err

        settings = BorderSettings(
            image_path=str(image),
            top_left=Point(5, 5),
            bottom_right=Point(25, 15),
            top=1,
            bottom=1,
            left=1,
            right=1,
            border_type=cv2.BORDER_REPLICATE,
            constant_value=0.0,
        )
        settings_path = Path(tmp) / "border.yml"
        write_border_settings(settings_path, settings)
        args = ["--path", str(settings_path), "--output", str(blocker)]
        assert _run("image_border", args) == 1
        assert "ERROR:" in capsys.readouterr().err

        args = ["--output", str(blocker / "fonts.png")]
        assert _run("draw_annotate", args) == 1
        assert "ERROR:" in capsys.readouterr().err
