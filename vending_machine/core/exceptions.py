"""
Custom exceptions for the vending machine.

Provides a hierarchy of typed exceptions so the command loop can tell
recoverable user input errors apart from programming errors.
"""

from typing import Any, Iterable, Optional


class VendingMachineError(Exception):
    """Base exception for all vending machine errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            code: Optional error code for programmatic handling.
            details: Optional additional error details.
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(VendingMachineError):
    """Recoverable error caused by user input."""

    pass


class InvalidDenominationError(ValidationError):
    """Inserted amount is not an accepted denomination."""

    def __init__(
        self,
        amount: int,
        accepted: Iterable[int] = (),
        message: str = "Invalid denomination.",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.amount = amount
        self.details["amount"] = amount
        self.details["accepted"] = list(accepted)


class ProductNotFoundError(ValidationError):
    """No product in the catalog has the requested id."""

    def __init__(
        self,
        product_id: int,
        message: str = "Product not found.",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.product_id = product_id
        self.details["product_id"] = product_id


class InputParseError(ValidationError):
    """Text entered where a whole number was expected."""

    def __init__(self, raw_value: str, **kwargs: Any) -> None:
        super().__init__(f"'{raw_value}' is not a valid number.", **kwargs)
        self.raw_value = raw_value
        self.details["value"] = raw_value


# =============================================================================
# Catalog Errors
# =============================================================================


class CatalogError(VendingMachineError):
    """Catalog could not be built from the given products."""

    pass
