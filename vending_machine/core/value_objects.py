"""
Value Objects for the vending machine.

Immutable results returned by the vending service. Declined outcomes
(not enough money, unknown product on lookup) are expressed here rather
than raised.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from vending_machine.configs import CURRENCY


# =============================================================================
# Enums
# =============================================================================


class PurchaseStatus(Enum):
    """Outcome of a purchase attempt."""

    PURCHASED = auto()
    INSUFFICIENT_FUNDS = auto()


# =============================================================================
# Insert Result
# =============================================================================


@dataclass(frozen=True)
class InsertResult:
    """
    Result of inserting money.

    Attributes:
        amount: Amount that was accepted.
        balance: Balance after the insert.
        message: Human-readable message.
    """

    amount: int
    balance: int
    message: str = ""

    @classmethod
    def accepted(cls, amount: int, balance: int) -> "InsertResult":
        """Create a result for an accepted insert."""
        return cls(
            amount=amount,
            balance=balance,
            message=f"Inserted {amount}{CURRENCY}. Current balance: {balance}{CURRENCY}.",
        )


# =============================================================================
# Purchase Result
# =============================================================================


@dataclass(frozen=True)
class PurchaseResult:
    """
    Result of a purchase attempt.

    Attributes:
        status: Whether the product was bought or declined.
        product_id: Id of the requested product.
        product_name: Name of the requested product.
        cost: Product cost.
        balance: Balance after the attempt.
        message: Human-readable message.
    """

    status: PurchaseStatus
    product_id: int
    product_name: str
    cost: int
    balance: int
    message: str = ""

    @property
    def success(self) -> bool:
        """Whether the product was bought."""
        return self.status is PurchaseStatus.PURCHASED

    @classmethod
    def purchased(
        cls,
        product_id: int,
        product_name: str,
        cost: int,
        balance: int,
        consume_message: str,
    ) -> "PurchaseResult":
        """Create a result for a completed purchase."""
        return cls(
            status=PurchaseStatus.PURCHASED,
            product_id=product_id,
            product_name=product_name,
            cost=cost,
            balance=balance,
            message=f"Purchased {product_name}. {consume_message}",
        )

    @classmethod
    def insufficient_funds(
        cls,
        product_id: int,
        product_name: str,
        cost: int,
        balance: int,
    ) -> "PurchaseResult":
        """Create a result for a purchase declined for lack of money."""
        return cls(
            status=PurchaseStatus.INSUFFICIENT_FUNDS,
            product_id=product_id,
            product_name=product_name,
            cost=cost,
            balance=balance,
            message="Not enough money. Please insert more money.",
        )


# =============================================================================
# Details Result
# =============================================================================


@dataclass(frozen=True)
class DetailsResult:
    """
    Result of a product details lookup.

    Attributes:
        product_id: Requested product id.
        found: Whether the catalog holds that id.
        description: Full description, or the not-found message.
    """

    product_id: int
    found: bool
    description: str

    @classmethod
    def of(cls, product_id: int, description: str) -> "DetailsResult":
        """Create a result for a product that exists."""
        return cls(product_id=product_id, found=True, description=description)

    @classmethod
    def not_found(cls, product_id: int) -> "DetailsResult":
        """Create a result for an unknown product id."""
        return cls(product_id=product_id, found=False, description="Product not found.")

    def __str__(self) -> str:
        return self.description


# =============================================================================
# Change Result
# =============================================================================


def format_change(breakdown: dict[int, int]) -> str:
    """
    Format a change breakdown as ``NxDkr`` pairs.

    Args:
        breakdown: Mapping of denomination to count, largest first.

    Returns:
        Comma separated pairs, e.g. ``"2x20kr, 1x5kr"``.
    """
    return ", ".join(
        f"{count}x{denomination}{CURRENCY}"
        for denomination, count in breakdown.items()
    )


@dataclass(frozen=True)
class ChangeResult:
    """
    Result of ending a transaction.

    Attributes:
        returned_amount: Balance that was handed back.
        breakdown: Denomination to count, largest denomination first,
            only positive counts.
        message: Human-readable message.
    """

    returned_amount: int
    breakdown: dict[int, int] = field(default_factory=dict)
    message: str = ""

    @property
    def coin_count(self) -> int:
        """Total number of coins and notes returned."""
        return sum(self.breakdown.values())

    @classmethod
    def returned(
        cls,
        returned_amount: int,
        breakdown: dict[int, int],
        message: Optional[str] = None,
    ) -> "ChangeResult":
        """Create a result for returned change."""
        if message is None:
            if breakdown:
                message = f"Transaction ended. Change returned: {format_change(breakdown)}"
            else:
                message = "Transaction ended. No change to return."
        return cls(
            returned_amount=returned_amount,
            breakdown=dict(breakdown),
            message=message,
        )

