"""Integer matrices and exact Gauss-Jordan elimination.

Rows are stored as numpy ``int64`` vectors. Every row operation checks its
result against :data:`chembalancer.arithmetic.INT_LIMIT`, so values never wrap.
"""

from __future__ import annotations

import logging

import numpy as np

from chembalancer.arithmetic import check_range, checked_multiply, gcd
from chembalancer.models import Equation

logger = logging.getLogger(__name__)


def multiply_row(row: np.ndarray, factor: int) -> np.ndarray:
    """Return ``row * factor``, e.g. ``[0, 1, 3] * 4 == [0, 4, 12]``."""
    if row.size:
        checked_multiply(int(np.abs(row).max()), factor)
    return row * factor


def add_rows(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    total = x + y
    if total.size:
        check_range(int(np.abs(total).max()))
    return total


def gcd_row(row: np.ndarray) -> int:
    """GCD of every entry; 0 for an all-zero row."""
    return int(np.gcd.reduce(row)) if row.size else 0


def simplify_row(row: np.ndarray) -> np.ndarray:
    """Divide out the row GCD and make the leading non-zero entry positive.

    For example ``[0, -2, 2, 4]`` becomes ``[0, 1, -1, -2]``.
    """
    nonzero = np.flatnonzero(row)
    if nonzero.size == 0:
        return row.copy()
    divisor = gcd_row(row)
    if row[nonzero[0]] < 0:
        divisor = -divisor
    return row // divisor


def _combine(row: np.ndarray, pivot_row: np.ndarray, column: int) -> np.ndarray:
    # Cancel row[column] against the pivot, scaled by their gcd to keep values small.
    pivot = int(pivot_row[column])
    value = int(row[column])
    g = gcd(pivot, value)
    return simplify_row(
        add_rows(multiply_row(row, pivot // g), multiply_row(pivot_row, -value // g))
    )


class Matrix:
    """A rectangular grid of integers with bounds-checked access."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("Matrix dimensions must be non-negative")
        self._cells = np.zeros((rows, cols), dtype=np.int64)

    def row_count(self) -> int:
        return self._cells.shape[0]

    def column_count(self) -> int:
        return self._cells.shape[1]

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.row_count() and 0 <= col < self.column_count()):
            raise IndexError(f"Cell ({row}, {col}) out of bounds")

    def get(self, row: int, col: int) -> int:
        self._check_index(row, col)
        return int(self._cells[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        self._check_index(row, col)
        self._cells[row, col] = check_range(value)

    def count_nonzero(self, row: int) -> int:
        if not 0 <= row < self.row_count():
            raise IndexError(f"Row {row} out of bounds")
        return int(np.count_nonzero(self._cells[row]))

    def rows(self) -> list[list[int]]:
        return self._cells.tolist()

    def swap_rows(self, i: int, j: int) -> None:
        if not (0 <= i < self.row_count() and 0 <= j < self.row_count()):
            raise IndexError(f"Rows ({i}, {j}) out of bounds")
        self._cells[[i, j]] = self._cells[[j, i]]

    def gauss_jordan_eliminate(self) -> None:
        """Reduce to row echelon form in place, leaving pivots unnormalized."""
        rows, cols = self._cells.shape
        cells = self._cells
        for i in range(rows):
            cells[i] = simplify_row(cells[i])

        # Forward phase: row echelon form.
        num_pivots = 0
        for col in range(cols):
            pivot_row = num_pivots
            while pivot_row < rows and cells[pivot_row, col] == 0:
                pivot_row += 1
            if pivot_row == rows:
                continue
            self.swap_rows(num_pivots, pivot_row)
            for j in range(num_pivots + 1, rows):
                cells[j] = _combine(cells[j], cells[num_pivots], col)
            num_pivots += 1

        # Backward phase: clear each leading column above its pivot.
        for i in range(rows - 1, -1, -1):
            nonzero = np.flatnonzero(cells[i])
            if nonzero.size == 0:
                continue
            pivot_col = int(nonzero[0])
            for j in range(i - 1, -1, -1):
                cells[j] = _combine(cells[j], cells[i], pivot_col)

    def __str__(self) -> str:
        return "\n".join(str(row) for row in self.rows())


def build_matrix(equation: Equation) -> Matrix:
    """Build the stoichiometry matrix of ``equation``.

    One row per element plus a spare row for the inhomogeneous constraint, one
    column per term plus the augmented column. Right-hand counts are negated so
    a balanced equation is a solution of ``A x = 0``.
    """
    elements = equation.elements()
    lhs_count = len(equation.lhs)
    matrix = Matrix(len(elements) + 1, len(equation.terms()) + 1)
    for i, name in enumerate(elements):
        for j, term in enumerate(equation.terms()):
            count = term.count_element(name)
            matrix.set(i, j, count if j < lhs_count else -count)
    logger.debug("Stoichiometry matrix for %s:\n%s", elements, matrix)
    return matrix
