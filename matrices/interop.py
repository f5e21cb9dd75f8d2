"""Conversion between matrices and numpy arrays.

numpy lays 2-D arrays out as ``(rows, cols)`` while matrices here are indexed
``(x, y)`` = (column, row), so ``array[y, x] == matrix.get(x, y)``.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .base import Matrix
from .storage import ListMatrix, MutableListMatrix
from .transform import to_rows

logger = logging.getLogger(__name__)


def to_numpy(matrix: Matrix, dtype: Optional[np.dtype] = None) -> np.ndarray:
    """Copy a matrix into a new array of shape ``(rows, cols)``.

    Args:
        matrix: Source matrix
        dtype: Optional array dtype; inferred from the elements if omitted

    Returns:
        2-D numpy array
    """
    array = np.array(to_rows(matrix), dtype=dtype)
    logger.debug(f"Converted {matrix.cols}x{matrix.rows} matrix to array {array.shape}")
    return array


def from_numpy(array: np.ndarray, mutable: bool = False) -> Matrix:
    """Copy a 2-D array into a new list-backed matrix.

    Args:
        array: Array of shape ``(rows, cols)``
        mutable: Return a MutableListMatrix instead of a read-only one

    Returns:
        Matrix with ``array.shape[1]`` columns and ``array.shape[0]`` rows.
        Elements are plain Python scalars.
    """
    array = np.asarray(array)
    if array.ndim != 2:
        raise ValueError(f"Expected a 2-D array, got shape {array.shape}")

    rows, cols = array.shape
    elements = np.ascontiguousarray(array).ravel().tolist()
    cls = MutableListMatrix if mutable else ListMatrix
    return cls(int(cols), int(rows), elements)
