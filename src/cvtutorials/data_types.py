"""OpenCV data type codes and their descriptions.

OpenCV reports the type of an array (e.g. ``cv::Mat::type()``) as a bare
integer that packs the element depth and the number of channels together.
The helpers here translate between those codes, numpy dtypes and a
human-readable description.
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import DTypeLike

from cvtutorials.saturation import saturate_cast_array
from cvtutorials.structs import Array, ArrayAttributes

CV_8U = 0
CV_8S = 1
CV_16U = 2
CV_16S = 3
CV_32S = 4
CV_32F = 5
CV_64F = 6

CV_CN_MAX = 512
_CN_SHIFT = 3
_DEPTH_MASK = (1 << _CN_SHIFT) - 1

UNKNOWN_DATA_TYPE = "Unknown data type!"

# depth -> (name, numpy dtype, description of the primitive type)
_DEPTHS: dict[int, tuple[str, np.dtype, str]] = {
    CV_8U: (
        "CV_8U",
        np.dtype(np.uint8),
        "8-bit unsigned integers with range (0 to 255)",
    ),
    CV_8S: (
        "CV_8S",
        np.dtype(np.int8),
        "8-bit signed integers with range (-128 to 127)",
    ),
    CV_16U: (
        "CV_16U",
        np.dtype(np.uint16),
        "16-bit unsigned integers with range (0 to 65,535)",
    ),
    CV_16S: (
        "CV_16S",
        np.dtype(np.int16),
        "16-bit signed integers with range (-32,768 to 32,767)",
    ),
    CV_32S: (
        "CV_32S",
        np.dtype(np.int32),
        "32-bit signed integers with range (-2,147,483,648 to 2,147,483,647)",
    ),
    CV_32F: (
        "CV_32F",
        np.dtype(np.float32),
        "32-bit decimal values of type float with range "
        "(-3.40282347E+38 to 3.40282347E+38)",
    ),
    CV_64F: (
        "CV_64F",
        np.dtype(np.float64),
        "64-bit decimal values of type float with range "
        "(-1.797693134862315E+308 to 1.797693134862315E+308)",
    ),
}

_DTYPE_TO_DEPTH = {dtype: depth for depth, (_, dtype, _) in _DEPTHS.items()}


def make_type(depth: int, channels: int = 1) -> int:
    """Pack a depth and a channel count into an OpenCV type code."""
    if depth not in _DEPTHS:
        raise ValueError(f"Unknown depth: {depth}")
    if not 1 <= channels <= CV_CN_MAX:
        raise ValueError(f"Channel count must be in [1, {CV_CN_MAX}], got {channels}")
    return depth + ((channels - 1) << _CN_SHIFT)


def type_depth(type_code: int) -> int:
    """Get the depth part of a type code."""
    return type_code & _DEPTH_MASK


def type_channels(type_code: int) -> int:
    """Get the channel count of a type code."""
    return (type_code >> _CN_SHIFT) + 1


def _type_name(depth: int, channels: int) -> str:
    name = _DEPTHS[depth][0]
    if channels == 1:
        return f"{name} or {name}C1"
    return f"{name}C{channels}"


def _build_descriptions() -> dict[int, str]:
    descriptions = {}
    for depth, (_, _, primitive) in _DEPTHS.items():
        for channels in range(1, 5):
            plural = "channel" if channels == 1 else "channels"
            descriptions[make_type(depth, channels)] = (
                f"{_type_name(depth, channels)} -> Array with {channels} {plural} "
                f"and primitive data type {primitive}"
            )
    return descriptions


_DESCRIPTIONS = _build_descriptions()


def describe_data_type(type_code: int) -> str:
    """Get a descriptive string for an OpenCV integer data type.

    OpenCV only reports the type of its arrays as an integer, which says
    nothing about what the integer refers to. Codes for one to four channels
    of the seven classic depths are known; anything else is unknown.
    """
    return _DESCRIPTIONS.get(type_code, UNKNOWN_DATA_TYPE)


def dtype_for_depth(depth: int) -> np.dtype:
    """Get the numpy dtype that stores elements of an OpenCV depth."""
    if depth not in _DEPTHS:
        raise ValueError(f"Unknown depth: {depth}")
    return _DEPTHS[depth][1]


def depth_for_dtype(dtype: DTypeLike) -> int:
    """Get the OpenCV depth of a numpy dtype."""
    dt = np.dtype(dtype)
    if dt not in _DTYPE_TO_DEPTH:
        raise ValueError(f"No OpenCV depth for dtype {dt}")
    return _DTYPE_TO_DEPTH[dt]


def _channels_of(array: Array) -> int:
    if array.ndim <= 2:
        return 1
    if array.ndim == 3:
        return int(array.shape[2])
    raise ValueError(f"Expected an array with at most 3 dimensions, got {array.ndim}")


def type_code_of(array: Array) -> int:
    """Get the OpenCV type code of a dense array."""
    return make_type(depth_for_dtype(array.dtype), _channels_of(array))


def array_attributes(array: Array) -> ArrayAttributes:
    """Get the attributes cv::Mat would report for a dense array.

    A one-dimensional array is treated as a single column, the way the
    OpenCV bindings convert it.
    """
    channels = _channels_of(array)
    rows = int(array.shape[0])
    cols = int(array.shape[1]) if array.ndim >= 2 else 1
    return ArrayAttributes(
        dims=2,
        rows=rows,
        cols=cols,
        channels=channels,
        total=rows * cols,
        type_code=type_code_of(array),
    )


def make_array(
    rows: int,
    cols: int,
    type_code: int,
    fill: float | Sequence[float] = 0,
) -> Array:
    """Create a dense array of an OpenCV type filled with a scalar.

    Like cv::Scalar, a sequence fill gives one value per channel (missing
    channels are zero and extra values are ignored). Values are saturated to
    the element type.
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Array size must be positive, got {rows} x {cols}")
    channels = type_channels(type_code)
    dtype = dtype_for_depth(type_depth(type_code))
    values: list[Any]
    if isinstance(fill, (int, float, np.number)):
        values = [fill] + [0] * (channels - 1)
    else:
        values = (list(fill) + [0] * channels)[:channels]
    shape: tuple[int, ...] = (rows, cols) if channels == 1 else (rows, cols, channels)
    filled = np.empty(shape, dtype=np.float64)
    filled[...] = values if channels > 1 else values[0]
    return saturate_cast_array(filled, dtype)
