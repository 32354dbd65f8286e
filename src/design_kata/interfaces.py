from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from .models.journal import Journal
    from .models.specs import Specification

T = TypeVar("T")


class IFilter(Protocol[T]):
    """
    Interface for collection filters.
    Selects the items of a sequence that satisfy a specification over the same item type.
    """

    def filter(self, items: Sequence[T], spec: "Specification[T]") -> list[T]:
        """
        Args:
            items: Candidates, in the order results should be returned
            spec: Specification evaluated against each candidate

        Returns:
            New list holding every satisfying item, input order preserved
        """
        ...


class IJournalPersistence(Protocol):
    """
    Interface for journal storage backends.
    Keeps the journal itself ignorant of where or how it is stored.
    """

    def save_to_file(self, journal: "Journal", filename: str, overwrite: bool = False) -> None:
        ...
