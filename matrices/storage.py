"""List-backed matrix storage and construction entry points.

:class:`ListMatrix` is the only concrete storage in the package. It owns a flat
list of ``cols * rows`` elements laid out in row-major order, so the element at
``(x, y)`` lives at index ``y * cols + x``. Every other matrix type is a view
over a ListMatrix or over another view.
"""

from __future__ import annotations

import itertools
from typing import Callable, Iterable, List, Sequence, Tuple, TypeVar

from .base import Matrix, MutableMatrix, check_index
from .errors import InsufficientElementsError, InvalidDimensionsError, LengthError

T = TypeVar("T")


def _check_dimensions(cols: int, rows: int) -> None:
    for name, value in (("cols", cols), ("rows", rows)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise InvalidDimensionsError(f"{name} must be a positive integer, got {value!r}")


class ListMatrix(Matrix[T]):
    """Read-only matrix backed by a private flat list."""

    __slots__ = ("_cols", "_rows", "_elements")

    def __init__(self, cols: int, rows: int, elements: Iterable[T]):
        """Initialize from a flat row-major sequence.

        Args:
            cols: Number of columns
            rows: Number of rows
            elements: Exactly ``cols * rows`` elements in row-major order.
                The sequence is copied; the matrix never aliases it.

        Raises:
            InvalidDimensionsError: If cols or rows is not a positive integer
            LengthError: If the number of elements is not ``cols * rows``
        """
        _check_dimensions(cols, rows)
        elements = list(elements)
        if len(elements) != cols * rows:
            raise LengthError(cols * rows, len(elements))

        self._cols = cols
        self._rows = rows
        self._elements: List[T] = elements

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    def get(self, x: int, y: int) -> T:
        check_index(self, x, y)
        return self._elements[y * self._cols + x]


class MutableListMatrix(ListMatrix[T], MutableMatrix[T]):
    """List-backed matrix with in-place element replacement."""

    __slots__ = ()

    def set(self, x: int, y: int, value: T) -> None:
        check_index(self, x, y)
        self._elements[y * self._cols + x] = value


def _prepare_elements(cols: int, rows: int, init: Callable[[int, int], T]) -> List[T]:
    """Call ``init(x, y)`` once per cell in row-major order."""
    _check_dimensions(cols, rows)
    return [init(x, y) for y in range(rows) for x in range(cols)]


def _take_elements(iterable: Iterable[T], cols: int, rows: int) -> List[T]:
    """Consume exactly ``cols * rows`` items, leaving the rest of the iterator alone."""
    _check_dimensions(cols, rows)
    size = cols * rows
    elements = list(itertools.islice(iter(iterable), size))
    if len(elements) < size:
        raise InsufficientElementsError(size, len(elements))
    return elements


def _flatten_rows(rows: Sequence[Sequence[T]]) -> Tuple[int, int, List[T]]:
    rows = [list(row) for row in rows]
    if not rows or not rows[0]:
        raise InvalidDimensionsError("Cannot build a matrix from empty rows")

    cols = len(rows[0])
    for row in rows:
        if len(row) != cols:
            raise LengthError(cols, len(row))

    return cols, len(rows), [value for row in rows for value in row]


def matrix_of(cols: int, rows: int, *elements: T) -> Matrix[T]:
    """Build a read-only matrix from explicit row-major values."""
    return ListMatrix(cols, rows, elements)


def mutable_matrix_of(cols: int, rows: int, *elements: T) -> MutableMatrix[T]:
    """Build a mutable matrix from explicit row-major values."""
    return MutableListMatrix(cols, rows, elements)


def create_matrix(cols: int, rows: int, init: Callable[[int, int], T]) -> Matrix[T]:
    """Build a read-only matrix whose element at (x, y) is ``init(x, y)``."""
    return ListMatrix(cols, rows, _prepare_elements(cols, rows, init))


def create_mutable_matrix(
    cols: int, rows: int, init: Callable[[int, int], T]
) -> MutableMatrix[T]:
    """Build a mutable matrix whose element at (x, y) is ``init(x, y)``."""
    return MutableListMatrix(cols, rows, _prepare_elements(cols, rows, init))


def to_matrix(iterable: Iterable[T], cols: int, rows: int) -> Matrix[T]:
    """Build a read-only matrix from the first ``cols * rows`` items of an iterable.

    Args:
        iterable: Source of elements in row-major order; it may be longer than
            needed, in which case the remaining items are not consumed
        cols: Number of columns
        rows: Number of rows

    Returns:
        New list-backed matrix

    Raises:
        InsufficientElementsError: If the iterable is exhausted early
    """
    return ListMatrix(cols, rows, _take_elements(iterable, cols, rows))


def to_mutable_matrix(iterable: Iterable[T], cols: int, rows: int) -> MutableMatrix[T]:
    """Mutable counterpart of :func:`to_matrix`."""
    return MutableListMatrix(cols, rows, _take_elements(iterable, cols, rows))


def matrix_from_rows(rows: Sequence[Sequence[T]]) -> Matrix[T]:
    """Build a read-only matrix from nested rows, e.g. ``[[1, 2, 3], [4, 5, 6]]``.

    Raises:
        InvalidDimensionsError: If there are no rows or the rows are empty
        LengthError: If the rows have different lengths
    """
    cols, n_rows, elements = _flatten_rows(rows)
    return ListMatrix(cols, n_rows, elements)


def mutable_matrix_from_rows(rows: Sequence[Sequence[T]]) -> MutableMatrix[T]:
    """Mutable counterpart of :func:`matrix_from_rows`."""
    cols, n_rows, elements = _flatten_rows(rows)
    return MutableListMatrix(cols, n_rows, elements)
