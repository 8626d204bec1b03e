"""Plain-text rendering of equations and syntax errors."""

from __future__ import annotations

from typing import Sequence

from chembalancer.config import RenderOptions
from chembalancer.errors import FormulaSyntaxError
from chembalancer.models import AtomNode, Element, Equation, Term
from chembalancer.tokenizer import UNICODE_MINUS


def format_element(element: Element) -> str:
    return element.name if element.count == 1 else f"{element.name}{element.count}"


def format_node(node: AtomNode) -> str:
    if isinstance(node, Element):
        return format_element(node)
    inner = "".join(format_node(item) for item in node.items)
    return f"({inner})" if node.count == 1 else f"({inner}){node.count}"


def format_charge(charge: int, options: RenderOptions = RenderOptions()) -> str:
    if charge == 0:
        return ""
    minus = UNICODE_MINUS if options.unicode_minus else "-"
    magnitude = "" if abs(charge) == 1 else str(abs(charge))
    return f"^{magnitude}{'+' if charge > 0 else minus}"


def format_term(term: Term, options: RenderOptions = RenderOptions()) -> str:
    if term.is_electron:
        return "e" + format_charge(-1, options)
    return "".join(format_node(item) for item in term.items) + format_charge(term.charge, options)


def format_equation(
    equation: Equation,
    coefficients: Sequence[int] | None = None,
    options: RenderOptions = RenderOptions(),
) -> str:
    """Render ``equation``, optionally prefixed with coefficients.

    Terms with a zero coefficient are left out.
    """
    terms = equation.terms()
    if coefficients is None:
        coefficients = [1] * len(terms)
    if len(coefficients) != len(terms):
        raise ValueError("Mismatched number of coefficients")

    minus = UNICODE_MINUS if options.unicode_minus else "-"

    def side(pairs) -> str:
        parts = []
        for term, coefficient in pairs:
            if coefficient == 0:
                continue
            prefix = ""
            if coefficient != 1 or options.show_ones:
                prefix = str(coefficient).replace("-", minus)
            parts.append(prefix + format_term(term, options))
        return " + ".join(parts)

    split = len(equation.lhs)
    pairs = list(zip(terms, coefficients))
    return f"{side(pairs[:split])} {options.arrow} {side(pairs[split:])}"


def highlight_error(formula: str, error: FormulaSyntaxError) -> str:
    """Return ``formula`` with a caret line marking the span of ``error``."""
    start, end = error.span_in(formula)
    return f"{formula}\n{' ' * start}{'^' * (end - start)}"
