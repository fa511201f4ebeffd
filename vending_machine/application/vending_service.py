"""
Vending Service - Application service for vending operations.

Coordinates the catalog, the machine state and change-making, and
publishes an event for every outcome that touches the balance.
"""

from typing import Optional

from vending_machine.core.exceptions import (
    InvalidDenominationError,
    ProductNotFoundError,
)
from vending_machine.core.value_objects import (
    ChangeResult,
    DetailsResult,
    InsertResult,
    PurchaseResult,
)
from vending_machine.domain.catalog import Catalog, default_catalog
from vending_machine.domain.change import make_change
from vending_machine.domain.machine_state import MachineState
from vending_machine.event_system import EventPublisher, EventType
from vending_machine.loggers import logger


class VendingService:
    """
    Application service for the vending machine.

    Owns the catalog and the machine state for the lifetime of the
    process. Any operation may be called at any time.
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        state: Optional[MachineState] = None,
        event_publisher: Optional[EventPublisher] = None,
    ) -> None:
        """
        Initialize the vending service.

        Args:
            catalog: Products for sale; the default catalog when None.
            state: Machine state; a fresh zero balance when None.
            event_publisher: Publisher for transaction events.
        """
        self._catalog = catalog if catalog is not None else default_catalog()
        self._state = state if state is not None else MachineState()
        self._event_publisher = event_publisher or EventPublisher()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def balance(self) -> int:
        """Money inserted and not yet spent or returned."""
        return self._state.balance

    @property
    def valid_denominations(self) -> tuple[int, ...]:
        return self._state.valid_denominations

    @property
    def event_publisher(self) -> EventPublisher:
        return self._event_publisher

    # =========================================================================
    # Queries
    # =========================================================================

    def list_products(self) -> list[str]:
        """
        Summaries of every product in catalog order.

        Returns:
            One ``"Id: .., Name: .., Cost: ..kr"`` line per product.
        """
        return [product.summary() for product in self._catalog]

    def get_details(self, product_id: int) -> DetailsResult:
        """
        Full description of a product.

        Args:
            product_id: Product id.

        Returns:
            DetailsResult; ``found`` is False for an unknown id.
        """
        product = self._catalog.find(product_id)
        if product is None:
            logger.debug(f"Details requested for unknown product {product_id}")
            return DetailsResult.not_found(product_id)
        return DetailsResult.of(product_id, product.describe())

    # =========================================================================
    # Commands
    # =========================================================================

    def insert_money(self, amount: int) -> InsertResult:
        """
        Add money to the balance.

        Args:
            amount: One of the valid denominations.

        Returns:
            InsertResult with the new balance.

        Raises:
            InvalidDenominationError: If amount is not a valid denomination.
        """
        if not self._state.accepts(amount):
            logger.warning(f"Rejected invalid denomination: {amount}")
            self._event_publisher.publish(
                EventType.MONEY_REJECTED,
                amount=amount,
                balance=self._state.balance,
            )
            raise InvalidDenominationError(amount, self._state.valid_denominations)

        balance = self._state.deposit(amount)
        logger.info(f"Inserted {amount}. Balance: {balance}")
        self._event_publisher.publish(
            EventType.MONEY_INSERTED,
            amount=amount,
            balance=balance,
        )
        return InsertResult.accepted(amount, balance)

    def purchase(self, product_id: int) -> PurchaseResult:
        """
        Buy a product with the current balance.

        Args:
            product_id: Product id.

        Returns:
            PurchaseResult; declined without any change to the balance
            when the balance is below the product cost.

        Raises:
            ProductNotFoundError: If no product has this id.
        """
        product = self._catalog.find(product_id)
        if product is None:
            logger.warning(f"Purchase requested for unknown product {product_id}")
            raise ProductNotFoundError(product_id)

        if not self._state.can_afford(product.cost):
            logger.info(
                f"Purchase of {product.name} declined: "
                f"cost {product.cost}, balance {self._state.balance}"
            )
            self._event_publisher.publish(
                EventType.PURCHASE_DECLINED,
                product_id=product.id,
                cost=product.cost,
                balance=self._state.balance,
            )
            return PurchaseResult.insufficient_funds(
                product.id, product.name, product.cost, self._state.balance
            )

        balance = self._state.withdraw(product.cost)
        logger.info(f"Purchased {product.name} for {product.cost}. Balance: {balance}")
        self._event_publisher.publish(
            EventType.PRODUCT_PURCHASED,
            product_id=product.id,
            cost=product.cost,
            balance=balance,
        )
        return PurchaseResult.purchased(
            product.id, product.name, product.cost, balance, product.consume()
        )

    def end_transaction(self) -> ChangeResult:
        """
        Return the whole balance as change.

        Returns:
            ChangeResult with the denomination breakdown, largest first.
            The balance is zero afterwards.
        """
        breakdown = make_change(self._state.balance, self._state.valid_denominations)
        returned = self._state.reset()

        logger.info(f"Transaction ended. Returned {returned}: {breakdown}")
        self._event_publisher.publish(
            EventType.TRANSACTION_ENDED,
            returned_amount=returned,
            change=breakdown,
        )
        return ChangeResult.returned(returned, breakdown)
