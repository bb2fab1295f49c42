"""Saturation casting.

Converting a value to a narrower numeric type clamps it to the destination
type's minimum/maximum instead of wrapping around. Floating-point input is
first rounded to the nearest integer (ties go to the even neighbour, like
OpenCV's cvRound).
"""

import math
from typing import Any

import numpy as np
from numpy.typing import DTypeLike

from cvtutorials.structs import Array

_to_int = np.frompyfunc(int, 1, 1)


def dtype_range(dtype: DTypeLike) -> tuple[int | float, int | float]:
    """Get the (min, max) values representable by a numeric dtype."""
    dt = np.dtype(dtype)
    if dt.kind in "iu":
        info = np.iinfo(dt)
        return int(info.min), int(info.max)
    if dt.kind == "f":
        finfo = np.finfo(dt)
        return float(finfo.min), float(finfo.max)
    raise ValueError(f"Unsupported dtype for saturation casting: {dt}")


def saturate_cast(value: Any, dtype: DTypeLike) -> int | float:
    """Cast a single value to dtype, clamping out-of-range results."""
    dt = np.dtype(dtype)
    lo, hi = dtype_range(dt)
    if dt.kind in "iu":
        if isinstance(value, (float, np.floating)):
            if math.isnan(value):
                return 0
            if math.isinf(value):
                return int(lo) if value < 0 else int(hi)
            # Python's round() breaks ties to the even neighbour.
            value = round(float(value))
        return int(min(max(int(value), lo), hi))
    value = float(value)
    if math.isnan(value):
        return value
    return float(dt.type(min(max(value, lo), hi)))


def saturate_cast_array(array: Any, dtype: DTypeLike) -> Array:
    """Cast every element of an array to dtype, clamping out-of-range
    results."""
    dt = np.dtype(dtype)
    arr = np.asarray(array)
    lo, hi = dtype_range(dt)
    if dt.kind in "iu":
        if arr.dtype.kind == "f":
            wide = np.nan_to_num(np.rint(arr.astype(np.float64)), nan=0.0)
        else:
            wide = arr
        if dt.itemsize < 8:
            # float64 holds every value of a 32-bit (or narrower) target exactly.
            return np.clip(wide.astype(np.float64), lo, hi).astype(dt)
        # 64-bit targets are clipped as Python ints to keep every digit.
        exact = np.asarray(_to_int(wide), dtype=object)
        return np.asarray(np.minimum(np.maximum(exact, lo), hi), dtype=dt)
    return np.clip(arr.astype(np.float64), lo, hi).astype(dt)
