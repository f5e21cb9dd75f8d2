"""Numeric operators over matrices.

Elements must support ``+``, unary ``-`` and ``*``. Every operator returns a new
list-backed matrix and checks operand dimensions before building anything, so a
failing call never produces a partial result.

Two products are provided and they are easy to confuse:

- :func:`times` is the element-wise (Hadamard) product. Both operands must have
  the same dimensions.
- :func:`x` is the matrix (dot) product. For ``a`` with ``cols = n`` and
  ``b`` with ``rows = n`` the result has ``b.cols`` columns and ``a.rows``
  rows, and the cell at column ``x``, row ``y`` is
  ``sum(a.get(i, y) * b.get(x, i) for i in range(n))``.

Coordinates are (column, row) throughout, see :mod:`matrices.base`.
"""

from __future__ import annotations

import logging
from typing import Any

from .base import Matrix
from .errors import DimensionMismatchError
from .storage import create_matrix
from .transform import map as map_matrix
from .transform import map_indexed

logger = logging.getLogger(__name__)


def _check_same_dimensions(a: Matrix, b: Matrix, operation: str) -> None:
    if a.rows != b.rows or a.cols != b.cols:
        raise DimensionMismatchError(
            f"Cannot {operation} a {a.cols}x{a.rows} matrix and a "
            f"{b.cols}x{b.rows} matrix (cols x rows)"
        )


def plus(a: Matrix, b: Matrix) -> Matrix:
    """Element-wise sum.

    Raises:
        DimensionMismatchError: If the operands differ in cols or rows
    """
    _check_same_dimensions(a, b, "add")
    return map_indexed(a, lambda x, y, value: value + b.get(x, y))


def unary_minus(a: Matrix) -> Matrix:
    """Element-wise negation."""
    return map_matrix(a, lambda value: -value)


def minus(a: Matrix, b: Matrix) -> Matrix:
    """Element-wise difference, defined as ``plus(a, unary_minus(b))``."""
    _check_same_dimensions(a, b, "subtract")
    return plus(a, unary_minus(b))


def times(a: Matrix, b: Matrix) -> Matrix:
    """Element-wise (Hadamard) product. Use :func:`x` for the matrix product.

    Raises:
        DimensionMismatchError: If the operands differ in cols or rows
    """
    _check_same_dimensions(a, b, "multiply element-wise")
    return map_indexed(a, lambda x, y, value: value * b.get(x, y))


def times_scalar(a: Matrix, k: Any) -> Matrix:
    """Multiply every element by the scalar ``k``."""
    return map_matrix(a, lambda value: value * k)


def scalar_times(k: Any, a: Matrix) -> Matrix:
    """Same as :func:`times_scalar` with the operands swapped."""
    return times_scalar(a, k)


def x(a: Matrix, b: Matrix) -> Matrix:
    """Matrix (dot) product of ``a`` and ``b``.

    Args:
        a: Left operand, ``n`` columns
        b: Right operand, ``n`` rows

    Returns:
        New matrix with ``b.cols`` columns and ``a.rows`` rows

    Raises:
        DimensionMismatchError: If ``a.cols != b.rows``
    """
    if a.cols != b.rows:
        raise DimensionMismatchError(
            f"Cannot multiply a {a.cols}x{a.rows} matrix by a {b.cols}x{b.rows} "
            f"matrix (cols x rows): left cols {a.cols} != right rows {b.rows}"
        )

    logger.debug(
        f"Dot product: {a.cols}x{a.rows} @ {b.cols}x{b.rows} -> {b.cols}x{a.rows}"
    )

    n = a.cols

    def cell(col: int, row: int) -> Any:
        value = a.get(0, row) * b.get(col, 0)
        for i in range(1, n):
            value = value + a.get(i, row) * b.get(col, i)
        return value

    return create_matrix(b.cols, a.rows, cell)


dot = x
