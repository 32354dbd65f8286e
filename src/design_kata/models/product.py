"""
Product Domain Model

A catalog item described by a name and two categorical attributes.
"""

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"

    def __str__(self) -> str:
        return self.value


class Size(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra-large"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Product:
    """
    Represents a single catalog item.
    Immutable after construction; equality is attribute equality.
    """

    name: str
    color: Color
    size: Size

    def describe(self) -> str:
        """One-line summary used by the console demos, e.g. ``tree is green``."""
        return f"{self.name} is {self.color}"


def demo_catalog() -> list[Product]:
    """The fixed three-item catalog used by the product demonstration."""
    return [
        Product("tree", Color.GREEN, Size.LARGE),
        Product("apple", Color.GREEN, Size.SMALL),
        Product("ocean", Color.BLUE, Size.LARGE),
    ]
