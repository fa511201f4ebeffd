"""
Core module - Foundation layer with no dependencies on other layers.

Contains:
- Exceptions
- Value Objects
"""

from .exceptions import (
    VendingMachineError,
    ValidationError,
    InvalidDenominationError,
    ProductNotFoundError,
    InputParseError,
    CatalogError,
)
from .value_objects import (
    PurchaseStatus,
    InsertResult,
    PurchaseResult,
    DetailsResult,
    ChangeResult,
    format_change,
)


__all__ = [
    # Exceptions
    "VendingMachineError",
    "ValidationError",
    "InvalidDenominationError",
    "ProductNotFoundError",
    "InputParseError",
    "CatalogError",
    # Value Objects
    "PurchaseStatus",
    "InsertResult",
    "PurchaseResult",
    "DetailsResult",
    "ChangeResult",
    "format_change",
]
