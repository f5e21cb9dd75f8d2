"""Zero-copy transposed views.

A transposed view holds a reference to another matrix and swaps coordinates on
every access. Nothing is copied or cached, so changes made through either side
are visible through the other. The view stays valid only as long as the
original does.
"""

from __future__ import annotations

from typing import TypeVar

from .base import Matrix, MutableMatrix, check_index

T = TypeVar("T")


class TransposedMatrix(Matrix[T]):
    """Read-only transposed view over another matrix."""

    __slots__ = ("_original",)

    def __init__(self, original: Matrix[T]):
        self._original = original

    @property
    def original(self) -> Matrix[T]:
        """The matrix this view reads from."""
        return self._original

    @property
    def cols(self) -> int:
        return self._original.rows

    @property
    def rows(self) -> int:
        return self._original.cols

    def get(self, x: int, y: int) -> T:
        check_index(self, x, y)
        return self._original.get(y, x)


class TransposedMutableMatrix(TransposedMatrix[T], MutableMatrix[T]):
    """Transposed view whose writes go through to the original."""

    __slots__ = ()

    def __init__(self, original: MutableMatrix[T]):
        super().__init__(original)

    def set(self, x: int, y: int, value: T) -> None:
        check_index(self, x, y)
        self._original.set(y, x, value)


def as_transposed(matrix: Matrix[T]) -> Matrix[T]:
    """Wrap ``matrix`` in a read-only transposed view."""
    return TransposedMatrix(matrix)


def as_transposed_mutable(matrix: MutableMatrix[T]) -> MutableMatrix[T]:
    """Wrap ``matrix`` in a transposed view that supports ``set``."""
    return TransposedMutableMatrix(matrix)
