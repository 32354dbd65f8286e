"""
Specification/Filter demonstration.

Filtering by any combination of attributes needs no new filter code: callers
compose specifications and hand them to one generic filter.
"""

from collections.abc import Sequence

from .filtering import BetterFilter
from .interfaces import IFilter
from .models.product import Color, Product, Size, demo_catalog
from .models.product_specs import ColorSpecification, SizeSpecification

SEPARATOR = "====="


def print_products(products: Sequence[Product]) -> None:
    for product in products:
        print(product.describe())


def run_product_demo() -> None:
    items = demo_catalog()
    bf: IFilter[Product] = BetterFilter()

    print_products(bf.filter(items, ColorSpecification(Color.GREEN)))
    print(SEPARATOR)
    large_blue = ColorSpecification(Color.BLUE) & SizeSpecification(Size.LARGE)
    print_products(bf.filter(items, large_blue))


if __name__ == "__main__":
    run_product_demo()
