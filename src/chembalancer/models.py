"""Data structures for chemical equations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from chembalancer.arithmetic import checked_add, checked_multiply

ELECTRON = "e"


@dataclass(frozen=True)
class Element:
    name: str
    count: int = 1

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError("Count must be a positive integer")


@dataclass(frozen=True)
class Group:
    items: tuple[AtomNode, ...]
    count: int = 1

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError("Count must be a positive integer")


AtomNode = Union[Element, Group]


def element_names(node: AtomNode) -> Iterator[str]:
    """Yield the element names inside ``node`` in order of appearance, with repeats."""
    if isinstance(node, Element):
        yield node.name
    else:
        for item in node.items:
            yield from element_names(item)


def count_element(node: AtomNode, name: str) -> int:
    """Count atoms of ``name`` in ``node``, scaled by every enclosing group count."""
    if isinstance(node, Element):
        return node.count if node.name == name else 0
    total = 0
    for item in node.items:
        total = checked_add(total, checked_multiply(count_element(item, name), node.count))
    return total


@dataclass(frozen=True)
class Term:
    """One addend of an equation side, e.g. ``H3O^+``.

    A term with no items is the electron ``e^-`` and must carry charge -1.
    """

    items: tuple[AtomNode, ...]
    charge: int = 0

    def __post_init__(self) -> None:
        if not self.items and self.charge != -1:
            raise ValueError("Invalid term")

    @classmethod
    def electron(cls) -> Term:
        return cls(items=(), charge=-1)

    @property
    def is_electron(self) -> bool:
        return not self.items

    def element_names(self) -> list[str]:
        """Distinct names in this term, always starting with the charge pseudo-element."""
        names = [ELECTRON]
        for item in self.items:
            for name in element_names(item):
                if name not in names:
                    names.append(name)
        return names

    def count_element(self, name: str) -> int:
        # Charge is tracked as a count of electrons.
        if name == ELECTRON:
            return -self.charge
        total = 0
        for item in self.items:
            total = checked_add(total, count_element(item, name))
        return total


@dataclass(frozen=True)
class Equation:
    lhs: tuple[Term, ...]
    rhs: tuple[Term, ...]

    def __post_init__(self) -> None:
        if not self.lhs or not self.rhs:
            raise ValueError("Each side of an equation needs at least one term")

    def terms(self) -> tuple[Term, ...]:
        return self.lhs + self.rhs

    def elements(self) -> list[str]:
        """Distinct element names across all terms, including the charge pseudo-element."""
        names: list[str] = []
        for term in self.terms():
            for name in term.element_names():
                if name not in names:
                    names.append(name)
        return names
