"""
design_kata: runnable object-oriented design examples.

- Specification/Filter: compose attribute predicates and filter any collection
- Single Responsibility: a journal whose persistence lives elsewhere
"""

from .filtering import BetterFilter, apply_specification, filter_items
from .journal_demo import run_journal_demo
from .models.journal import Journal
from .models.product import Color, Product, Size
from .models.product_specs import ColorSpecification, SizeSpecification
from .models.specs import AndSpecification, NotSpecification, OrSpecification, Specification
from .persistence import Persistence
from .product_demo import run_product_demo

__version__ = "0.1.0"
