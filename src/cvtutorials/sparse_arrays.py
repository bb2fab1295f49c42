"""Sparse n-dimensional arrays.

The OpenCV Python bindings do not expose cv::SparseMat, so this module
provides a hash-backed equivalent: only non-zero elements are stored, and
reading an element that was never stored gives zero.
"""

from __future__ import annotations

import math
from typing import Any, Iterator, Sequence

import numpy as np
from numpy.typing import DTypeLike

from cvtutorials.data_types import depth_for_dtype, make_type
from cvtutorials.saturation import saturate_cast
from cvtutorials.structs import Array

MAX_DIMS = 32

Index = tuple[int, ...]


class SparseArray:
    """An n-dimensional array that stores only its non-zero elements."""

    def __init__(self, shape: Sequence[int], dtype: DTypeLike = np.float32) -> None:
        shape = tuple(int(s) for s in shape)
        if not 1 <= len(shape) <= MAX_DIMS:
            raise ValueError(
                f"Sparse arrays have 1 to {MAX_DIMS} dimensions, got {len(shape)}"
            )
        if any(s <= 0 for s in shape):
            raise ValueError(f"Every dimension must be positive, got {shape}")
        self.shape = shape
        self.dtype = np.dtype(dtype)
        # Fails early for dtypes that OpenCV has no depth for.
        self.type_code = make_type(depth_for_dtype(self.dtype))
        self._elements: dict[Index, int | float] = {}

    @property
    def ndim(self) -> int:
        """The number of dimensions."""
        return len(self.shape)

    @property
    def nnz(self) -> int:
        """The number of stored (non-zero) elements."""
        return len(self._elements)

    def _check_index(self, idx: int | Sequence[int]) -> Index:
        if isinstance(idx, (int, np.integer)):
            idx = (int(idx),)
        idx = tuple(int(i) for i in idx)
        if len(idx) != self.ndim:
            raise IndexError(
                f"Expected an index with {self.ndim} values, got {len(idx)}"
            )
        for i, size in zip(idx, self.shape):
            if not 0 <= i < size:
                raise IndexError(f"Index {idx} is out of range for shape {self.shape}")
        return idx

    def __getitem__(self, idx: int | Sequence[int]) -> int | float:
        key = self._check_index(idx)
        return self._elements.get(key, saturate_cast(0, self.dtype))

    def __setitem__(self, idx: int | Sequence[int], value: Any) -> None:
        key = self._check_index(idx)
        value = saturate_cast(value, self.dtype)
        if value == 0:
            self._elements.pop(key, None)
        else:
            self._elements[key] = value

    def add(self, idx: int | Sequence[int], value: Any) -> int | float:
        """Add value to the element at idx in place and return the result.

        Elements that become zero are erased.
        """
        self[idx] = self[idx] + value
        return self[idx]

    def erase(self, idx: int | Sequence[int]) -> None:
        """Remove the element at idx (a no-op if it is not stored)."""
        self._elements.pop(self._check_index(idx), None)

    def items(self) -> Iterator[tuple[Index, int | float]]:
        """Iterate over the stored elements in no particular order."""
        return iter(list(self._elements.items()))

    def copy(self) -> SparseArray:
        """Create an independent copy."""
        other = SparseArray(self.shape, self.dtype)
        other._elements = dict(self._elements)  # pylint: disable=protected-access
        return other

    def to_dense(self) -> Array:
        """Create a dense numpy array with the same contents."""
        dense = np.zeros(self.shape, dtype=self.dtype)
        for idx, value in self._elements.items():
            dense[idx] = value
        return dense

    @classmethod
    def from_dense(cls, array: Array) -> SparseArray:
        """Create a sparse array from the non-zero elements of a dense one."""
        arr = np.asarray(array)
        sparse = cls(arr.shape, arr.dtype)
        for idx in zip(*np.nonzero(arr)):
            sparse[idx] = arr[idx].item()
        return sparse

    def __len__(self) -> int:
        return self.nnz

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseArray):
            return NotImplemented
        return (
            self.shape == other.shape
            and self.dtype == other.dtype
            and self._elements == other._elements
        )

    def __repr__(self) -> str:
        return f"SparseArray(shape={self.shape}, dtype={self.dtype}, nnz={self.nnz})"


def fill_sparse_array(
    shape: Sequence[int], dtype: DTypeLike, values: Sequence[Any]
) -> SparseArray:
    """Create a sparse array and fill it in row-major order from a flat
    sequence of values.

    For example, 16 values can fill a 2x8, 4x4 or 2x2x4 array.
    """
    sparse = SparseArray(shape, dtype)
    expected = math.prod(sparse.shape)
    if len(values) != expected:
        raise ValueError(
            f"A sparse array of shape {sparse.shape} needs {expected} values, "
            f"got {len(values)}"
        )
    for idx, value in zip(np.ndindex(*sparse.shape), values):
        sparse.add(idx, value)
    return sparse


def format_sparse_elements(sparse: SparseArray, include_zeros: bool = False) -> str:
    """Space-separated values of a sparse array.

    By default only the stored elements are printed, in no particular order.
    With include_zeros, every element is printed in row-major order.
    """
    if include_zeros:
        values = [sparse[idx] for idx in np.ndindex(*sparse.shape)]
    else:
        values = [value for _, value in sparse.items()]
    return " ".join(str(v) for v in values)
