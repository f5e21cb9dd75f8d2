"""Tests for transposed views.

This module checks that transposition swaps coordinates without copying and
that writes through a mutable view reach the original and vice versa.
"""

import sys
import unittest
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from matrices import (
    MatrixIndexError,
    MutableMatrix,
    TransposedMatrix,
    TransposedMutableMatrix,
    as_transposed,
    as_transposed_mutable,
    matrix_of,
    mutable_matrix_of,
)


class TestTransposedMatrix(unittest.TestCase):
    """Test the read-only transposed view."""

    def setUp(self):
        """Set up a 3x2 matrix (cols=3, rows=2)."""
        self.m = matrix_of(3, 2, 1, 2, 3, 4, 5, 6)
        self.t = as_transposed(self.m)

    def test_dimensions_swapped(self):
        """Test that cols and rows are swapped."""
        self.assertEqual(self.t.cols, 2)
        self.assertEqual(self.t.rows, 3)

    def test_coordinates_swapped(self):
        """Test that get(x, y) reads original get(y, x) for every cell."""
        for y in range(self.t.rows):
            for x in range(self.t.cols):
                self.assertEqual(self.t.get(x, y), self.m.get(y, x))

        self.assertEqual(str(self.t), "[[1, 4], [2, 5], [3, 6]]")

    def test_holds_reference(self):
        """Test that the view keeps a reference rather than a copy."""
        self.assertIsInstance(self.t, TransposedMatrix)
        self.assertIs(self.t.original, self.m)

    def test_involution(self):
        """Test that transposing twice gives back the original elements."""
        self.assertEqual(as_transposed(self.t), self.m)
        self.assertEqual(self.m.transpose().transpose(), self.m)

    def test_independent_views_equal(self):
        """Test that two views over equal originals are equal."""
        other = as_transposed(matrix_of(3, 2, 1, 2, 3, 4, 5, 6))
        self.assertEqual(self.t, other)
        self.assertEqual(hash(self.t), hash(other))

    def test_out_of_range(self):
        """Test that the view checks its own dimensions."""
        with self.assertRaises(MatrixIndexError):
            self.t.get(2, 0)
        with self.assertRaises(MatrixIndexError):
            self.t.get(0, 3)

    def test_read_only_view(self):
        """Test that the read-only view cannot be written."""
        self.assertNotIsInstance(self.t, MutableMatrix)
        with self.assertRaises(TypeError):
            self.t[0, 0] = 1


class TestTransposedMutableMatrix(unittest.TestCase):
    """Test write-through behaviour of the mutable transposed view."""

    def setUp(self):
        """Set up a mutable 2x3 matrix (cols=2, rows=3)."""
        self.m = mutable_matrix_of(2, 3, 1, 2, 3, 4, 5, 6)
        self.t = as_transposed_mutable(self.m)

    def test_set_through_view(self):
        """Test that set(x, y) on the view is get(y, x) on the original."""
        self.t.set(2, 1, 60)
        self.assertEqual(self.m.get(1, 2), 60)
        self.assertEqual(self.t.get(2, 1), 60)

    def test_original_changes_visible(self):
        """Test that writes to the original show through the view."""
        self.m.set(0, 1, 30)
        self.assertEqual(self.t.get(1, 0), 30)

    def test_transpose_method_returns_mutable_view(self):
        """Test that transpose() on a mutable matrix writes through."""
        t = self.m.transpose()
        self.assertIsInstance(t, TransposedMutableMatrix)

        t[0, 1] = 20
        self.assertEqual(self.m.get(1, 0), 20)

    def test_set_out_of_range(self):
        """Test that the view rejects coordinates outside its own shape."""
        with self.assertRaises(MatrixIndexError):
            self.t.set(0, 2, 0)


if __name__ == "__main__":
    unittest.main()
