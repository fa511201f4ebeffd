"""
Event system for the vending machine.

This module provides a synchronous publish-subscribe event system for
transaction events like money insertion, purchases and returned change.
"""

from enum import Enum
from typing import Any, Callable, Union

from vending_machine.loggers import logger


class EventType(str, Enum):
    """
    Enumeration of event types in the vending machine.

    These events are published when the balance changes or a request
    is declined.
    """

    MONEY_INSERTED = "money_inserted"
    MONEY_REJECTED = "money_rejected"
    PRODUCT_PURCHASED = "product_purchased"
    PURCHASE_DECLINED = "purchase_declined"
    TRANSACTION_ENDED = "transaction_ended"


EventHandler = Callable[[dict[str, Any]], None]


class EventPublisher:
    """
    Publisher that dispatches events to subscribed handlers.

    Handlers run in the caller's thread, in subscription order.

    Attributes:
        handlers: Mapping of event types to their handler functions.
    """

    def __init__(self) -> None:
        self.handlers: dict[Union[EventType, str], list[EventHandler]] = {}

    def subscribe(
        self,
        event_type: Union[EventType, str],
        handler: EventHandler,
    ) -> None:
        """
        Register a handler for an event type.

        Args:
            event_type: The event type to handle.
            handler: Callable receiving the event dictionary.
        """
        self.handlers.setdefault(event_type, []).append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Register a handler for every event type."""
        for event_type in EventType:
            self.subscribe(event_type, handler)

    def unsubscribe(
        self,
        event_type: Union[EventType, str],
        handler: EventHandler,
    ) -> None:
        """
        Unregister a handler for an event type.

        Args:
            event_type: The event type.
            handler: The handler function to remove.
        """
        handlers = self.handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event_type: Union[EventType, str], **data: Any) -> None:
        """
        Publish an event to all handlers of its type.

        A failing handler is logged and does not stop the others.

        Args:
            event_type: The type of event to publish.
            **data: Additional event data as keyword arguments.
        """
        event = {"type": event_type, **data}
        for handler in list(self.handlers.get(event_type, [])):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Event handler failed for {event_type}")


def log_event(event: dict[str, Any]) -> None:
    """Handler that writes every event to the application log."""
    event_type = event.get("type")
    name = event_type.value if isinstance(event_type, EventType) else event_type
    data = {k: v for k, v in event.items() if k != "type"}
    logger.info(f"Event {name}: {data}")
