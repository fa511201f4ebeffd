"""
Domain layer - Business logic and domain models.

Contains:
- Products and per-kind behaviour
- Catalog
- Machine state
- Change-making
"""

from .products import (
    Product,
    ProductKind,
    describe,
    consume,
    summarize,
)
from .catalog import (
    Catalog,
    default_catalog,
)
from .machine_state import MachineState
from .change import make_change


__all__ = [
    # Products
    "Product",
    "ProductKind",
    "describe",
    "consume",
    "summarize",
    # Catalog
    "Catalog",
    "default_catalog",
    # State
    "MachineState",
    # Change
    "make_change",
]
