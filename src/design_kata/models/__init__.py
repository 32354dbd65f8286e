"""
design_kata Domain Models

Export core domain objects for external consumption.
"""

from typing import TYPE_CHECKING

__all__ = [
    "Color",
    "Size",
    "Product",
    "Journal",
    "Specification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "ColorSpecification",
    "SizeSpecification",
]


if TYPE_CHECKING:
    from .journal import Journal
    from .product import Color, Product, Size
    from .product_specs import ColorSpecification, SizeSpecification
    from .specs import AndSpecification, NotSpecification, OrSpecification, Specification

_LAZY_MODULES = {
    "Color": ".product",
    "Size": ".product",
    "Product": ".product",
    "Journal": ".journal",
    "Specification": ".specs",
    "AndSpecification": ".specs",
    "OrSpecification": ".specs",
    "NotSpecification": ".specs",
    "ColorSpecification": ".product_specs",
    "SizeSpecification": ".product_specs",
}


def __getattr__(name: str) -> type:
    module_name = _LAZY_MODULES.get(name)
    if module_name is None:
        raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
    from importlib import import_module

    return getattr(import_module(module_name, __name__), name)
