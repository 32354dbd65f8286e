"""
Specification Pattern Implementation

A specification is a yes/no question about one kind of item. Filters only ever
ask ``is_satisfied_by``; which attributes matter is decided by how specifications
are combined.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Specification(ABC, Generic[T]):
    """
    Predicate over items of type ``T``.

    Combine with ``&`` (all must hold), ``|`` (any may hold) and ``~`` (negation).
    Both sides of a combination must be specifications over the same item type.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """True when ``candidate`` passes. Must not mutate the candidate."""

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)

    def __or__(self, other: "Specification[T]") -> "OrSpecification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "NotSpecification[T]":
        return NotSpecification(self)


class AndSpecification(Specification[T]):
    """
    Conjunction of child specs, checked left to right, stopping at the first miss.

    With no children it holds for every item, so it can seed a chain of ``&=``.
    """

    def __init__(self, *specs: Specification[T]):
        self.specs = specs

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specs)

    def __repr__(self) -> str:
        return " & ".join(repr(spec) for spec in self.specs) or "AndSpecification()"


class OrSpecification(Specification[T]):
    """Disjunction of child specs; with no children it holds for nothing."""

    def __init__(self, *specs: Specification[T]):
        self.specs = specs

    def is_satisfied_by(self, candidate: T) -> bool:
        return any(spec.is_satisfied_by(candidate) for spec in self.specs)

    def __repr__(self) -> str:
        return f"({' | '.join(repr(spec) for spec in self.specs)})"


class NotSpecification(Specification[T]):
    """Holds exactly when the wrapped spec does not."""

    def __init__(self, spec: Specification[T]):
        self.spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.spec.is_satisfied_by(candidate)

    def __repr__(self) -> str:
        return f"~{self.spec!r}"
