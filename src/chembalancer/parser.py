"""Recursive-descent parser turning formula strings into :class:`Equation` objects.

Grammar::

    Equation := Term ('+' Term)* '=' Term ('+' Term)*
    Term     := (Group | Element)+ ('^' Number? ('+' | '-'))?
    Group    := '(' (Group | Element)+ ')' Number?
    Element  := Name Number?
    Number   := [0-9]+

The element name ``e`` on its own denotes an electron.
"""

from __future__ import annotations

from chembalancer.arithmetic import checked_parse_int
from chembalancer.errors import FormulaSyntaxError, InternalConsistencyError
from chembalancer.models import ELECTRON, AtomNode, Element, Equation, Group, Term, element_names
from chembalancer.tokenizer import NAME_PATTERN, NUMBER_PATTERN, Tokenizer

MAX_NESTING = 100


def parse(formula: str) -> Equation:
    """Parse ``formula`` or raise :class:`FormulaSyntaxError`."""
    return parse_equation(Tokenizer(formula))


def parse_equation(tok: Tokenizer) -> Equation:
    lhs = [parse_term(tok)]
    while True:
        token = tok.peek()
        if token == "=":
            tok.consume("=")
            break
        if token is None:
            raise FormulaSyntaxError("Plus or equal sign expected", start=tok.position())
        if token != "+":
            raise FormulaSyntaxError("Plus expected", start=tok.position())
        tok.consume("+")
        lhs.append(parse_term(tok))

    rhs = [parse_term(tok)]
    while True:
        token = tok.peek()
        if token is None:
            break
        if token != "+":
            raise FormulaSyntaxError("Plus or end expected", start=tok.position())
        tok.consume("+")
        rhs.append(parse_term(tok))

    return Equation(lhs=tuple(lhs), rhs=tuple(rhs))


def _is_name(token: str | None) -> bool:
    return token is not None and NAME_PATTERN.fullmatch(token) is not None


def parse_term(tok: Tokenizer) -> Term:
    start = tok.position()

    items: list[AtomNode] = []
    while True:
        token = tok.peek()
        if token == "(":
            items.append(parse_group(tok))
        elif _is_name(token):
            items.append(parse_element(tok))
        else:
            break

    charge = 0
    if tok.peek() == "^":
        tok.consume("^")
        if tok.peek() is None:
            raise FormulaSyntaxError("Number or sign expected", start=tok.position())
        charge = parse_optional_number(tok)
        sign = tok.peek()
        if sign == "-":
            charge = -charge
        elif sign != "+":
            raise FormulaSyntaxError("Sign expected", start=tok.position())
        tok.take()

    names: list[str] = []
    for item in items:
        for name in element_names(item):
            if name not in names:
                names.append(name)

    if not items:
        raise FormulaSyntaxError("Invalid term - empty", start=start, end=tok.position())
    if ELECTRON in names:
        if len(items) > 1:
            raise FormulaSyntaxError(
                "Invalid term - electron needs to stand alone", start=start, end=tok.position()
            )
        if charge not in (0, -1):
            raise FormulaSyntaxError(
                "Invalid term - invalid charge for electron", start=start, end=tok.position()
            )
        return Term.electron()

    for name in names:
        if name.islower():
            raise FormulaSyntaxError(
                f'Invalid element name "{name}"', start=start, end=tok.position()
            )
    return Term(items=tuple(items), charge=charge)


def parse_group(tok: Tokenizer, depth: int = 1) -> Group:
    start = tok.position()
    if depth > MAX_NESTING:
        raise FormulaSyntaxError("Nesting too deep", start=start)
    tok.consume("(")
    items: list[AtomNode] = []
    while True:
        token = tok.peek()
        if token == "(":
            items.append(parse_group(tok, depth + 1))
        elif _is_name(token):
            items.append(parse_element(tok))
        elif token == ")":
            tok.consume(")")
            if not items:
                raise FormulaSyntaxError("Empty group", start=start, end=tok.position())
            break
        else:
            raise FormulaSyntaxError(
                "Element, group, or closing parenthesis expected", start=tok.position()
            )
    return Group(items=tuple(items), count=_parse_count(tok))


def parse_element(tok: Tokenizer) -> Element:
    name = tok.take()
    if not _is_name(name):
        raise InternalConsistencyError("Expected an element name")
    return Element(name=name, count=_parse_count(tok))


def _parse_count(tok: Tokenizer) -> int:
    start = tok.position()
    count = parse_optional_number(tok)
    if count < 1:
        raise FormulaSyntaxError("Count must be a positive integer", start=start, end=tok.position())
    return count


def parse_optional_number(tok: Tokenizer) -> int:
    """Consume a count if one follows, otherwise default to 1."""
    token = tok.peek()
    if token is not None and NUMBER_PATTERN.fullmatch(token):
        return checked_parse_int(tok.take())
    return 1
