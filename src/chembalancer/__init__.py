"""chembalancer core package."""

from chembalancer.balancer import BalanceOutcome, balance, balance_formula, try_balance
from chembalancer.errors import (
    AllZeroSolutionError,
    ArithmeticOverflowError,
    BalanceError,
    FormulaSyntaxError,
    InternalConsistencyError,
    MultipleIndependentSolutionsError,
)
from chembalancer.models import Element, Equation, Group, Term
from chembalancer.parser import parse

__all__ = [
    "AllZeroSolutionError",
    "ArithmeticOverflowError",
    "BalanceError",
    "BalanceOutcome",
    "Element",
    "Equation",
    "FormulaSyntaxError",
    "Group",
    "InternalConsistencyError",
    "MultipleIndependentSolutionsError",
    "Term",
    "balance",
    "balance_formula",
    "parse",
    "try_balance",
]
