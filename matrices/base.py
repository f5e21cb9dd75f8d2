"""Matrix capabilities.

This module defines the two interfaces every matrix in the package implements:
:class:`Matrix`, a read-only view exposing dimensions and element lookup, and
:class:`MutableMatrix`, which adds in-place element replacement.

Coordinates are always written ``(x, y)`` meaning (column, row). ``x`` ranges
over ``[0, cols)`` and ``y`` over ``[0, rows)``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterator, List, Tuple, TypeVar

from .errors import MatrixIndexError

T = TypeVar("T")
U = TypeVar("U")

HASH_SEED = 17
HASH_MASK = 0xFFFFFFFF


def check_index(matrix: "Matrix", x: int, y: int) -> None:
    """Raise MatrixIndexError unless (x, y) addresses a cell of ``matrix``."""
    if not (0 <= x < matrix.cols and 0 <= y < matrix.rows):
        raise MatrixIndexError(x, y, matrix.cols, matrix.rows)


def _split_key(key: Any) -> Tuple[int, int]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(f"Matrix indices must be an (x, y) pair, got {key!r}")
    return key


class Matrix(ABC, Generic[T]):
    """Read-only two-dimensional view.

    Subclasses provide ``cols``, ``rows`` and ``get``. Everything else
    (equality, hashing, rendering, traversal and the arithmetic operators) is
    built on those three.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def cols(self) -> int:
        """Number of columns."""

    @property
    @abstractmethod
    def rows(self) -> int:
        """Number of rows."""

    @abstractmethod
    def get(self, x: int, y: int) -> T:
        """Return the element at column ``x``, row ``y``."""

    def __getitem__(self, key: Tuple[int, int]) -> T:
        x, y = _split_key(key)
        return self.get(x, y)

    def __iter__(self) -> Iterator[T]:
        for y in range(self.rows):
            for x in range(self.cols):
                yield self.get(x, y)

    def for_each_indexed(self, action: Callable[[int, int, T], Any]) -> None:
        """Call ``action(x, y, value)`` for every cell in row-major order."""
        for y in range(self.rows):
            for x in range(self.cols):
                action(x, y, self.get(x, y))

    def for_each(self, action: Callable[[T], Any]) -> None:
        """Call ``action(value)`` for every cell in row-major order."""
        self.for_each_indexed(lambda x, y, value: action(value))

    def map_indexed(self, transform: Callable[[int, int, T], U]) -> "Matrix[U]":
        from .transform import map_indexed

        return map_indexed(self, transform)

    def map(self, transform: Callable[[T], U]) -> "Matrix[U]":
        from .transform import map as map_matrix

        return map_matrix(self, transform)

    def to_list(self) -> List[T]:
        from .transform import to_list

        return to_list(self)

    def to_rows(self) -> List[List[T]]:
        from .transform import to_rows

        return to_rows(self)

    def transpose(self) -> "Matrix[T]":
        """Return a zero-copy transposed view of this matrix."""
        from .transpose import as_transposed

        return as_transposed(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.cols or self.rows != other.rows:
            return False
        for y in range(self.rows):
            for x in range(self.cols):
                if self.get(x, y) != other.get(x, y):
                    return False
        return True

    def __hash__(self) -> int:
        h = HASH_SEED
        h = (h * 39 + self.cols) & HASH_MASK
        h = (h * 39 + self.rows) & HASH_MASK
        for value in self:
            h = (h * 37 + (1 if value is None else hash(value))) & HASH_MASK
        return h

    def __str__(self) -> str:
        rows = ", ".join(
            "[" + ", ".join(str(self.get(x, y)) for x in range(self.cols)) + "]"
            for y in range(self.rows)
        )
        return f"[{rows}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cols={self.cols}, rows={self.rows}, {self})"

    # Numeric operators. Elements must support +, unary - and *.

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        from .numeric import plus

        return plus(self, other)

    def __neg__(self) -> "Matrix":
        from .numeric import unary_minus

        return unary_minus(self)

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        from .numeric import minus

        return minus(self, other)

    def __mul__(self, other: Any) -> "Matrix":
        from . import numeric

        # Matrix * Matrix is element-wise; use @ for the matrix product
        if isinstance(other, Matrix):
            return numeric.times(self, other)
        return numeric.times_scalar(self, other)

    def __rmul__(self, other: Any) -> "Matrix":
        from .numeric import scalar_times

        return scalar_times(other, self)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        from .numeric import x

        return x(self, other)


class MutableMatrix(Matrix[T]):
    """Matrix whose elements can be replaced in place. It cannot be resized."""

    __slots__ = ()

    @abstractmethod
    def set(self, x: int, y: int, value: T) -> None:
        """Replace the element at column ``x``, row ``y``."""

    def __setitem__(self, key: Tuple[int, int], value: T) -> None:
        x, y = _split_key(key)
        self.set(x, y, value)

    def transpose(self) -> "MutableMatrix[T]":
        """Return a zero-copy transposed view that writes through to this matrix."""
        from .transpose import as_transposed_mutable

        return as_transposed_mutable(self)
