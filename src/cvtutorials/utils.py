"""Utilities."""

import os
from pathlib import Path
from typing import Collection

import numpy as np


class InvalidFileExtensionError(ValueError):
    """A file path does not have one of the accepted extensions."""


def get_file_extension(path: str | Path) -> str:
    """Get the extension of a file path without the leading dot.

    For example, `Example-Code/temporary-files/write.xml` gives `xml`.
    Returns an empty string if there is no file extension.
    """
    suffix = Path(path).suffix
    if not suffix:
        return ""
    return suffix[1:]


def check_file_extension(path: str | Path, allowed: Collection[str]) -> str:
    """Return the lower-cased extension of path if it is one of allowed."""
    ext = get_file_extension(path).lower()
    if ext not in allowed:
        raise InvalidFileExtensionError(
            f"File extension should be one of: {', '.join(allowed)} "
            f"(got '{ext}' from {path})."
        )
    return ext


def read_file_bytes(path: str | Path) -> bytes:
    """Read the raw contents of a file."""
    with open(path, "rb") as f:
        return f.read()


def write_file_bytes(path: str | Path, data: bytes) -> None:
    """Write raw bytes to a file, creating parent directories as needed."""
    path = Path(path)
    if not path.parent.exists():
        os.makedirs(path.parent)
    with open(path, "wb") as f:
        f.write(data)


def sample_seed_from_rng(rng: np.random.Generator) -> int:
    """Sample a random seed that can be used to seed another rng."""
    return int(rng.integers(0, 2**31 - 1))


def create_rng_from_rng(rng: np.random.Generator) -> np.random.Generator:
    """Create another RNG by sampling a seed from a current rng.

    Example use case: several lesson steps draw random matrices and we want
    each step to be reproducible on its own, no matter how many values the
    steps before it consumed.
    """
    seed = sample_seed_from_rng(rng)
    return np.random.default_rng(seed)
