"""Traversal and transform utilities.

All functions accept any :class:`~matrices.base.Matrix` and visit cells in
row-major order: the outer loop walks rows, the inner loop walks columns.
Mutating a matrix while it is being traversed is undefined behaviour.
"""

from __future__ import annotations

from typing import Any, Callable, List, TypeVar

from .base import Matrix
from .storage import create_matrix

T = TypeVar("T")
U = TypeVar("U")


def for_each_indexed(matrix: Matrix[T], action: Callable[[int, int, T], Any]) -> None:
    """Call ``action(x, y, value)`` once for every cell."""
    for y in range(matrix.rows):
        for x in range(matrix.cols):
            action(x, y, matrix.get(x, y))


def for_each(matrix: Matrix[T], action: Callable[[T], Any]) -> None:
    """Call ``action(value)`` once for every cell."""
    for_each_indexed(matrix, lambda x, y, value: action(value))


def map_indexed(matrix: Matrix[T], transform: Callable[[int, int, T], U]) -> Matrix[U]:
    """Build a new matrix from ``transform(x, y, value)`` of every source cell.

    Args:
        matrix: Source matrix, left untouched
        transform: Function of the coordinates and the source value

    Returns:
        New list-backed matrix with the same dimensions as ``matrix``
    """
    return create_matrix(
        matrix.cols, matrix.rows, lambda x, y: transform(x, y, matrix.get(x, y))
    )


def map(matrix: Matrix[T], transform: Callable[[T], U]) -> Matrix[U]:
    """Build a new matrix from ``transform(value)`` of every source cell."""
    return map_indexed(matrix, lambda x, y, value: transform(value))


def to_list(matrix: Matrix[T]) -> List[T]:
    """Return a fresh flat row-major list of the elements."""
    return [matrix.get(x, y) for y in range(matrix.rows) for x in range(matrix.cols)]


def to_mutable_list(matrix: Matrix[T]) -> List[T]:
    """Same as :func:`to_list`; the returned list is the caller's to modify."""
    return to_list(matrix)


def to_rows(matrix: Matrix[T]) -> List[List[T]]:
    """Return a fresh nested list holding one list per row."""
    return [[matrix.get(x, y) for x in range(matrix.cols)] for y in range(matrix.rows)]
