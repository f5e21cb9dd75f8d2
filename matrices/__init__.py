"""Generic matrices with zero-copy views.

A small matrix abstraction over two-dimensional data: list-backed storage,
transposed views that never copy, element-wise transforms and the usual
arithmetic operators.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .base import Matrix, MutableMatrix
from .errors import (
    DimensionMismatchError,
    InsufficientElementsError,
    InvalidDimensionsError,
    LengthError,
    MatrixError,
    MatrixIndexError,
)
from .interop import from_numpy, to_numpy
from .numeric import dot, minus, plus, scalar_times, times, times_scalar, unary_minus, x
from .storage import (
    ListMatrix,
    MutableListMatrix,
    create_matrix,
    create_mutable_matrix,
    matrix_from_rows,
    matrix_of,
    mutable_matrix_from_rows,
    mutable_matrix_of,
    to_matrix,
    to_mutable_matrix,
)
from .transform import map as map_matrix
from .transform import (
    for_each,
    for_each_indexed,
    map_indexed,
    to_list,
    to_mutable_list,
    to_rows,
)
from .transpose import (
    TransposedMatrix,
    TransposedMutableMatrix,
    as_transposed,
    as_transposed_mutable,
)
