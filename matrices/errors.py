"""Exceptions raised by the matrix abstraction.

Every error derives from :class:`MatrixError` and from the builtin exception
that best describes it, so callers can catch either.
"""

from __future__ import annotations


class MatrixError(Exception):
    """Base class for all matrix errors."""


class MatrixIndexError(MatrixError, IndexError):
    """Coordinates outside ``0 <= x < cols``, ``0 <= y < rows``."""

    def __init__(self, x: int, y: int, cols: int, rows: int):
        self.x = x
        self.y = y
        self.cols = cols
        self.rows = rows
        super().__init__(
            f"Index ({x}, {y}) out of range for {cols}x{rows} matrix"
        )


class LengthError(MatrixError, ValueError):
    """A flat element sequence does not hold exactly ``cols * rows`` items."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} elements, got {actual}")


class InsufficientElementsError(MatrixError, ValueError):
    """An iterable ran out before ``cols * rows`` items were collected."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Not enough elements: needed {expected}, got {actual}")


class DimensionMismatchError(MatrixError, ValueError):
    """Operand dimensions violate an operator's contract."""


class InvalidDimensionsError(MatrixError, ValueError):
    """``cols`` or ``rows`` is not a positive integer."""
