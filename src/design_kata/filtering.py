"""
Specification Filtering

Applies any specification to a sequence of items of the same type.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Generic, TypeVar

from .diagnostics import FilterDiagnostics
from .models.specs import Specification

T = TypeVar("T")

logger = logging.getLogger(__name__)


def filter_items(items: Iterable[T], spec: Specification[T]) -> list[T]:
    """Returns the items satisfying ``spec`` in their original order."""
    return [item for item in items if spec.is_satisfied_by(item)]


def apply_specification(
    items: Iterable[T], spec: Specification[T]
) -> tuple[list[T], dict[str, int]]:
    """Filters ``items`` and reports how many were evaluated, matched and rejected."""
    diagnostics = FilterDiagnostics.create()
    matches = []

    for item in items:
        matched = spec.is_satisfied_by(item)
        diagnostics.record(matched)
        if matched:
            matches.append(item)

    logger.debug(
        "Applied %r: %d of %d matched",
        spec,
        diagnostics.get("matched_count"),
        diagnostics.get("evaluated_count"),
    )
    return matches, diagnostics.to_dict()


class BetterFilter(Generic[T]):
    """
    Filter driven entirely by specifications.

    New criteria are added by writing new specifications, never by adding
    methods here.
    """

    def filter(self, items: Sequence[T], spec: Specification[T]) -> list[T]:
        return filter_items(items, spec)
