# matrix.py
"""
The 2-D affine transform engine.

This module defines a small dense Matrix value type and the three
transforms particles are moved with: rotation, uniform scaling and
translation. Points are stored as a 2 x N table, one column per point.
"""
import logging
import math
import operator
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
from numba import jit

from constants import EPSILON

# --- Data Contracts ---
#
# class Matrix:
#   - __init__(self, rows: int, cols: int):
#     - Inputs: rows >= 1, cols >= 1.
#     - Side Effects: Allocates a zero-filled float64 table.
#   - get/set/__getitem__/__setitem__:
#     - Invariants: 0 <= row < rows and 0 <= col < cols, otherwise
#       MatrixIndexError is raised.
#   - __add__(other) -> Matrix: shapes must be identical.
#   - __mul__(other) -> Matrix: self.cols must equal other.rows.
#     - Invariants: Operators never mutate an operand; each returns a
#       new, independent Matrix.
#
# RotationMatrix / ScalingMatrix / TranslationMatrix:
#   - Frozen values built from a single parameter.
#   - as_matrix() -> Matrix, apply(points: Matrix) -> Matrix.


class DimensionMismatchError(ValueError):
    """Raised when operand shapes are incompatible for an operator."""


class MatrixIndexError(IndexError):
    """Raised on element access outside the declared dimensions."""


@jit(nopython=True)
def _matmul_numba(left, right):
    """
    Numba-jitted dense matrix product.

    Plain dot-product rule. The operands here are at most 2 x N with a
    small N, so there is nothing to gain from blocking.
    """
    rows = left.shape[0]
    inner = left.shape[1]
    cols = right.shape[1]
    result = np.zeros((rows, cols), dtype=np.float64)
    for i in range(rows):
        for j in range(cols):
            total = 0.0
            for k in range(inner):
                total += left[i, k] * right[k, j]
            result[i, j] = total
    return result


class Matrix:
    """
    A rows x cols table of real numbers with value semantics.
    """
    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            msg = f"Matrix dimensions must be positive, got {rows}x{cols}."
            logging.error(msg)
            raise ValueError(msg)
        self._data = np.zeros((rows, cols), dtype=np.float64)

    @classmethod
    def from_array(cls, array) -> "Matrix":
        """Builds a Matrix from a 2-D array-like. The data is copied."""
        data = np.array(array, dtype=np.float64)
        if data.ndim != 2:
            msg = f"Matrix data must be 2-D, got {data.ndim} dimension(s)."
            logging.error(msg)
            raise ValueError(msg)
        matrix = cls(data.shape[0], data.shape[1])
        matrix._data[:, :] = data
        return matrix

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        return cls.from_array(rows)

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._data.shape

    def _check_bounds(self, row: int, col: int) -> None:
        try:
            row, col = operator.index(row), operator.index(col)
        except TypeError:
            msg = f"Matrix indices must be integers, got ({row!r}, {col!r})."
            logging.error(msg)
            raise MatrixIndexError(msg) from None
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            msg = (
                f"Index ({row}, {col}) is out of bounds for a "
                f"{self.rows}x{self.cols} matrix."
            )
            logging.error(msg)
            raise MatrixIndexError(msg)

    def get(self, row: int, col: int) -> float:
        self._check_bounds(row, col)
        return float(self._data[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        self._check_bounds(row, col)
        self._data[row, col] = value

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = index
        return self.get(row, col)

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        row, col = index
        self.set(row, col, value)

    def __add__(self, other: "Matrix") -> "Matrix":
        if self.shape != other.shape:
            msg = (
                f"Cannot add a {self.rows}x{self.cols} matrix to a "
                f"{other.rows}x{other.cols} matrix. Dimensions must match."
            )
            logging.critical(msg)
            raise DimensionMismatchError(msg)
        return Matrix.from_array(self._data + other._data)

    def __mul__(self, other: "Matrix") -> "Matrix":
        if self.cols != other.rows:
            msg = (
                f"Cannot multiply a {self.rows}x{self.cols} matrix by a "
                f"{other.rows}x{other.cols} matrix. Left columns must "
                f"equal right rows."
            )
            logging.critical(msg)
            raise DimensionMismatchError(msg)
        return Matrix.from_array(_matmul_numba(self._data, other._data))

    def to_array(self) -> np.ndarray:
        """Returns a copy of the underlying data."""
        return self._data.copy()

    def almost_equal(self, other: "Matrix", eps: float = EPSILON) -> bool:
        """Same shape and every element within eps. eps=0 means exact equality."""
        if self.shape != other.shape:
            return False
        return bool(np.all(np.abs(self._data - other._data) <= eps))

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"


@dataclass(frozen=True)
class RotationMatrix:
    """Counter-clockwise rotation about the origin by theta radians."""
    theta: float

    def as_matrix(self) -> Matrix:
        c = math.cos(self.theta)
        s = math.sin(self.theta)
        return Matrix.from_rows([[c, -s], [s, c]])

    def apply(self, points: Matrix) -> Matrix:
        return self.as_matrix() * points


@dataclass(frozen=True)
class ScalingMatrix:
    """Uniform scaling about the origin."""
    factor: float

    def as_matrix(self) -> Matrix:
        return Matrix.from_rows([[self.factor, 0.0], [0.0, self.factor]])

    def apply(self, points: Matrix) -> Matrix:
        return self.as_matrix() * points


@dataclass(frozen=True)
class TranslationMatrix:
    """
    A 2 x n table whose every column is (dx, dy).

    Translation is applied by addition, so n must equal the number of
    columns of the point table it is added to.
    """
    dx: float
    dy: float
    n: int

    def as_matrix(self) -> Matrix:
        matrix = Matrix(2, self.n)
        matrix._data[0, :] = self.dx
        matrix._data[1, :] = self.dy
        return matrix

    def apply(self, points: Matrix) -> Matrix:
        return self.as_matrix() + points

