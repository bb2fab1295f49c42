"""Tests for display.py."""

import cv2
import numpy as np
import pytest

from cvtutorials import display


def test_environment_settings(monkeypatch):
    """Tests for is_headless() and get_wait_ms()."""
    monkeypatch.delenv("CVTUTORIALS_HEADLESS", raising=False)
    monkeypatch.delenv("CVTUTORIALS_WAIT_MS", raising=False)
    assert not display.is_headless()
    assert display.get_wait_ms() == 0
    for value in ("1", "true", "YES", " yes "):
        monkeypatch.setenv("CVTUTORIALS_HEADLESS", value)
        assert display.is_headless()
    monkeypatch.setenv("CVTUTORIALS_HEADLESS", "0")
    assert not display.is_headless()
    monkeypatch.setenv("CVTUTORIALS_WAIT_MS", "250")
    assert display.get_wait_ms() == 250
    monkeypatch.setenv("CVTUTORIALS_WAIT_MS", "-5")
    assert display.get_wait_ms() == 0
    monkeypatch.setenv("CVTUTORIALS_WAIT_MS", "soon")
    with pytest.raises(ValueError):
        display.get_wait_ms()


def test_headless_display(monkeypatch):
    """Tests that no windows are opened when headless."""
    monkeypatch.setenv("CVTUTORIALS_HEADLESS", "1")

    def _fail(*args, **kwargs):
        raise AssertionError("No window should be opened.")

    monkeypatch.setattr(cv2, "imshow", _fail)
    monkeypatch.setattr(cv2, "destroyAllWindows", _fail)
    image = np.zeros((4, 4), dtype=np.uint8)
    assert not display.show_image("Image", image)
    assert display.show_images([image, image]) == 0
    display.close_window("Image")
    display.close_all()


def test_show_images(monkeypatch):
    """Tests for show_image() and show_images() with windows."""
    monkeypatch.delenv("CVTUTORIALS_HEADLESS", raising=False)
    monkeypatch.setenv("CVTUTORIALS_WAIT_MS", "10")
    calls = []
    monkeypatch.setattr(cv2, "namedWindow", lambda title, flags: None)
    monkeypatch.setattr(cv2, "imshow", lambda title, image: calls.append(title))
    monkeypatch.setattr(cv2, "waitKey", lambda ms: calls.append(ms) or -1)
    image = np.zeros((4, 4, 3), dtype=np.uint8)
    assert display.show_image("Image", image)
    assert calls == ["Image", 10]
    calls.clear()
    assert display.show_image("No wait", image, wait=False)
    assert calls == ["No wait"]
    calls.clear()
    assert display.show_images([image, image], start=2) == 2
    assert calls == ["Image at index 2", 10, "Image at index 3", 10]
