"""Exceptions raised while parsing and balancing equations."""

from __future__ import annotations


class BalanceError(Exception):
    """Base class for every failure of a single balance call."""

    status = "error"


class FormulaSyntaxError(BalanceError):
    """Malformed formula input.

    Attributes:
        message: Human-readable description.
        start: Offset of the first offending character.
        end: Offset one past the offending range. Defaults to ``start``.
    """

    status = "syntax_error"

    def __init__(self, message: str, start: int, end: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.start = start
        self.end = start if end is None else end

    def span_in(self, formula: str) -> tuple[int, int]:
        """Map the error range onto ``formula`` for highlighting.

        Trailing spaces and tabs are dropped from the range, and an empty range
        is widened to one character (which may lie just past the end).
        """
        start, end = self.start, self.end
        while end > start and formula[end - 1] in " \t":
            end -= 1
        if start == end:
            end += 1
        return start, end


class ArithmeticOverflowError(BalanceError):
    status = "overflow"

    def __init__(self) -> None:
        super().__init__("Arithmetic overflow")


class AllZeroSolutionError(BalanceError):
    status = "no_solution"

    def __init__(self) -> None:
        super().__init__("All-zero solution")


class MultipleIndependentSolutionsError(BalanceError):
    status = "underdetermined"

    def __init__(self) -> None:
        super().__init__("Multiple independent solutions")


class InternalConsistencyError(BalanceError):
    """A broken invariant inside the balancer. Never caused by user input."""

    status = "internal_error"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Assertion error: {detail}")
        self.detail = detail
