"""
Concrete Product Specifications

Each spec closes over one attribute value and tests a product for equality on it.
"""

from .product import Color, Product, Size
from .specs import Specification


class ColorSpecification(Specification[Product]):
    """Matches products of the given color."""

    def __init__(self, color: Color):
        self.color = color

    def is_satisfied_by(self, product: Product) -> bool:
        return product.color == self.color

    def __repr__(self) -> str:
        return f"ColorSpecification({self.color.value!r})"


class SizeSpecification(Specification[Product]):
    """Matches products of the given size."""

    def __init__(self, size: Size):
        self.size = size

    def is_satisfied_by(self, product: Product) -> bool:
        return product.size == self.size

    def __repr__(self) -> str:
        return f"SizeSpecification({self.size.value!r})"
