"""Balancing pipeline: matrix construction, solving and self-verification."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from chembalancer.arithmetic import checked_add, checked_multiply, lcm
from chembalancer.errors import (
    AllZeroSolutionError,
    BalanceError,
    InternalConsistencyError,
    MultipleIndependentSolutionsError,
)
from chembalancer.matrix import Matrix, build_matrix
from chembalancer.models import Equation
from chembalancer.parser import parse

logger = logging.getLogger(__name__)


def solve(matrix: Matrix) -> None:
    """Reduce ``matrix`` and pin one free variable so the solution is unique.

    The homogeneous system is eliminated once. The first row with more than one
    non-zero coefficient names a free variable; the spare last row is set to
    fix that variable to 1 and the system is eliminated again.
    """
    matrix.gauss_jordan_eliminate()

    last_row = matrix.row_count() - 1
    for i in range(last_row):
        if matrix.count_nonzero(i) > 1:
            break
    else:
        raise AllZeroSolutionError()

    logger.debug("Pinning column %d to 1", i)
    matrix.set(last_row, i, 1)
    matrix.set(last_row, matrix.column_count() - 1, 1)
    matrix.gauss_jordan_eliminate()
    logger.debug("Reduced matrix:\n%s", matrix)


def extract_coefficients(matrix: Matrix) -> tuple[int, ...]:
    rows = matrix.row_count()
    cols = matrix.column_count()

    if cols - 1 > rows or matrix.get(cols - 2, cols - 2) == 0:
        raise MultipleIndependentSolutionsError()

    multiple = 1
    for i in range(cols - 1):
        multiple = lcm(multiple, matrix.get(i, i))

    coefficients = tuple(
        checked_multiply(multiple // matrix.get(i, i), matrix.get(i, cols - 1))
        for i in range(cols - 1)
    )
    if all(c == 0 for c in coefficients):
        raise InternalConsistencyError("All-zero solution")
    return coefficients


def check_answer(equation: Equation, coefficients: Sequence[int]) -> None:
    """Raise :class:`InternalConsistencyError` unless ``coefficients`` balance ``equation``."""
    terms = equation.terms()
    if len(coefficients) != len(terms):
        raise InternalConsistencyError("Mismatched length")
    if all(c == 0 for c in coefficients):
        raise InternalConsistencyError("All-zero solution")

    lhs_count = len(equation.lhs)
    for name in equation.elements():
        total = 0
        for j, (term, coefficient) in enumerate(zip(terms, coefficients)):
            signed = coefficient if j < lhs_count else -coefficient
            total = checked_add(total, checked_multiply(term.count_element(name), signed))
        if total != 0:
            raise InternalConsistencyError("Incorrect balance")


def balance(equation: Equation) -> tuple[int, ...]:
    """Return the minimal integer coefficients for ``equation``.

    Coefficients follow the left-hand terms and then the right-hand terms.

    Raises:
        AllZeroSolutionError: Only the trivial solution exists.
        MultipleIndependentSolutionsError: The equation is underdetermined.
        ArithmeticOverflowError: An intermediate value left the checked range.
        InternalConsistencyError: The result failed verification.
    """
    matrix = build_matrix(equation)
    solve(matrix)
    coefficients = extract_coefficients(matrix)
    check_answer(equation, coefficients)
    logger.debug("Coefficients: %s", coefficients)
    return coefficients


def balance_formula(formula: str) -> tuple[Equation, tuple[int, ...]]:
    """Parse and balance ``formula``; returns the equation with its coefficients."""
    equation = parse(formula)
    return equation, balance(equation)


@dataclass(frozen=True)
class BalanceOutcome:
    """Result of :func:`try_balance`: either coefficients or the error that stopped it."""

    formula: str
    equation: Equation | None = None
    coefficients: tuple[int, ...] | None = None
    error: BalanceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def try_balance(formula: str) -> BalanceOutcome:
    """Balance ``formula`` without raising the errors in :mod:`chembalancer.errors`."""
    try:
        equation, coefficients = balance_formula(formula)
    except BalanceError as exc:
        logger.debug("Balancing %r failed: %s", formula, exc)
        return BalanceOutcome(formula=formula, error=exc)
    return BalanceOutcome(formula=formula, equation=equation, coefficients=coefficients)
