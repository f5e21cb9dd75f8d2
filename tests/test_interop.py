"""Tests for numpy conversion."""

import sys
import unittest
from pathlib import Path

import numpy as np
import pytest

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from matrices import (
    ListMatrix,
    MutableListMatrix,
    as_transposed,
    from_numpy,
    matrix_of,
    to_numpy,
)


class TestInterop(unittest.TestCase):
    """Test conversion between matrices and numpy arrays."""

    def setUp(self):
        """Set up a 3x2 matrix (cols=3, rows=2)."""
        self.m = matrix_of(3, 2, 1, 2, 3, 4, 5, 6)

    def test_to_numpy_shape(self):
        """Test that arrays are laid out (rows, cols)."""
        array = to_numpy(self.m)

        self.assertEqual(array.shape, (2, 3))
        np.testing.assert_array_equal(array, np.array([[1, 2, 3], [4, 5, 6]]))
        self.assertEqual(array[1, 2], self.m.get(2, 1))

    def test_to_numpy_dtype(self):
        """Test an explicit dtype."""
        array = to_numpy(self.m, dtype=np.float64)
        self.assertEqual(array.dtype, np.float64)

    def test_to_numpy_view(self):
        """Test converting a transposed view."""
        np.testing.assert_array_equal(to_numpy(as_transposed(self.m)), to_numpy(self.m).T)

    def test_from_numpy(self):
        """Test that from_numpy(to_numpy(m)) == m."""
        result = from_numpy(to_numpy(self.m))

        self.assertIsInstance(result, ListMatrix)
        self.assertEqual(result, self.m)
        self.assertIsInstance(result.get(0, 0), int)

    def test_from_numpy_mutable(self):
        """Test the mutable variant copies the array."""
        array = np.arange(6).reshape(2, 3)
        result = from_numpy(array, mutable=True)

        self.assertIsInstance(result, MutableListMatrix)
        result.set(0, 0, 100)
        self.assertEqual(array[0, 0], 0)

    def test_from_numpy_non_contiguous(self):
        """Test a transposed (Fortran-ordered) array keeps its logical layout."""
        array = np.arange(6).reshape(3, 2).T
        result = from_numpy(array)

        self.assertEqual(result.cols, 3)
        self.assertEqual(result.rows, 2)
        self.assertEqual(result.to_rows(), array.tolist())

    def test_from_numpy_rejects_other_ranks(self):
        """Test that only 2-D arrays are accepted."""
        with self.assertRaises(ValueError):
            from_numpy(np.arange(4))
        with self.assertRaises(ValueError):
            from_numpy(np.zeros((2, 2, 2)))


if __name__ == "__main__":
    unittest.main()
