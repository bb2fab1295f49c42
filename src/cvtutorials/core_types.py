"""Small fixed-size matrices and the ways OpenCV can print them.

In C++ these are cv::Matx<> objects. From Python they are plain 2-D numpy
arrays, so this module only provides the named constructors and the printing
styles of cv::Formatter (which the Python bindings do not expose).
"""

from enum import Enum
from typing import Any, Callable, Sequence, TypeAlias

import numpy as np
from numpy.typing import DTypeLike

from cvtutorials.structs import Array


class MatrixFormat(Enum):
    """Styles for printing a matrix."""

    DEFAULT = "default"
    PYTHON = "python"
    CSV = "csv"
    MATLAB = "matlab"
    NUMPY = "numpy"
    C = "c"


def matx(
    values: Sequence[float], rows: int, cols: int, dtype: DTypeLike = np.float64
) -> Array:
    """Create a rows x cols matrix from values given in row-major order."""
    arr = np.asarray(values, dtype=dtype)
    if arr.size != rows * cols:
        raise ValueError(
            f"Cannot make a {rows} x {cols} matrix from {arr.size} values."
        )
    return arr.reshape(rows, cols)


def zeros(rows: int, cols: int, dtype: DTypeLike = np.float64) -> Array:
    """A matrix of zeros."""
    return np.zeros((rows, cols), dtype=dtype)


def ones(rows: int, cols: int, dtype: DTypeLike = np.float64) -> Array:
    """A matrix of ones."""
    return np.ones((rows, cols), dtype=dtype)


def full(rows: int, cols: int, value: float, dtype: DTypeLike = np.float64) -> Array:
    """A matrix whose elements all equal value."""
    return np.full((rows, cols), value, dtype=dtype)


def eye(rows: int, cols: int | None = None, dtype: DTypeLike = np.float64) -> Array:
    """A unit matrix."""
    return np.eye(rows, cols, dtype=dtype)


def randn(
    rows: int,
    cols: int,
    mean: float,
    stddev: float,
    rng: np.random.Generator,
    dtype: DTypeLike = np.float32,
) -> Array:
    """A matrix of normally distributed values."""
    if stddev < 0:
        raise ValueError(f"Standard deviation must be non-negative, got {stddev}")
    return rng.normal(mean, stddev, size=(rows, cols)).astype(dtype)


def randu(
    rows: int,
    cols: int,
    low: float,
    high: float,
    rng: np.random.Generator,
    dtype: DTypeLike = np.float32,
) -> Array:
    """A matrix of values uniformly distributed in [low, high)."""
    if low >= high:
        raise ValueError(f"Expected low < high, got low={low}, high={high}")
    return rng.uniform(low, high, size=(rows, cols)).astype(dtype)


def _format_number(value: Any, dtype: np.dtype) -> str:
    if dtype.kind in "iub":
        return str(int(value))
    precision = 8 if dtype.itemsize <= 4 else 16
    return f"{float(value):.{precision}g}"


Rows: TypeAlias = list[list[str]]


def _format_numpy(rows: Rows, dtype: np.dtype) -> str:
    body = ",\n       ".join("[" + ", ".join(r) + "]" for r in rows)
    return f"array([{body}], dtype='{dtype}')"


_FORMATTERS: dict[MatrixFormat, Callable[[Rows, np.dtype], str]] = {
    MatrixFormat.DEFAULT: lambda rows, _: (
        "[" + ";\n ".join(", ".join(r) for r in rows) + "]"
    ),
    MatrixFormat.PYTHON: lambda rows, _: (
        "[" + ",\n ".join("[" + ", ".join(r) + "]" for r in rows) + "]"
    ),
    MatrixFormat.CSV: lambda rows, _: "\n".join(", ".join(r) for r in rows),
    MatrixFormat.MATLAB: lambda rows, _: (
        "[" + ";\n ".join(" ".join(r) for r in rows) + "]"
    ),
    MatrixFormat.NUMPY: _format_numpy,
    MatrixFormat.C: lambda rows, _: "{" + ", ".join(v for r in rows for v in r) + "}",
}


def format_matrix(m: Array, fmt: MatrixFormat = MatrixFormat.DEFAULT) -> str:
    """Render a 2-D matrix as text in one of the cv::Formatter styles."""
    arr = np.asarray(m)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got {arr.ndim} dimensions")
    rows = [[_format_number(v, arr.dtype) for v in row] for row in arr]
    return _FORMATTERS[fmt](rows, arr.dtype)
