"""Data structures."""

from dataclasses import dataclass
from typing import Any, TypeAlias

import numpy as np
from numpy.typing import NDArray

Image: TypeAlias = NDArray[np.uint8]
Array: TypeAlias = NDArray[Any]


@dataclass(frozen=True)
class Point:
    """An integer pixel coordinate (x is the column, y is the row)."""

    x: int
    y: int

    def as_tuple(self) -> tuple[int, int]:
        """Get the point in the (x, y) form that OpenCV expects."""
        return (self.x, self.y)


@dataclass(frozen=True)
class ArrayAttributes:
    """The attributes that cv::Mat reports about a dense array."""

    dims: int
    rows: int
    cols: int
    channels: int
    total: int
    type_code: int


@dataclass(frozen=True)
class BorderSettings:
    """Inputs for creating a border around a region of interest."""

    image_path: str
    top_left: Point
    bottom_right: Point
    top: int
    bottom: int
    left: int
    right: int
    border_type: int
    constant_value: float
