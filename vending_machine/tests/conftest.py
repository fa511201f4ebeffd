"""
Pytest configuration for vending machine tests.
"""

from typing import Any

import pytest

from vending_machine.application.vending_service import VendingService
from vending_machine.event_system import EventPublisher


class ScriptedConsole:
    """Feeds prepared lines to the command handler and records output."""

    def __init__(self, *lines: str) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def print(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def events() -> list[dict[str, Any]]:
    """Events published by the service under test."""
    return []


@pytest.fixture
def publisher(events):
    """Publisher that records every event."""
    publisher = EventPublisher()
    publisher.subscribe_all(events.append)
    return publisher


@pytest.fixture
def service(publisher):
    """Fresh vending service with the default catalog."""
    return VendingService(event_publisher=publisher)


@pytest.fixture
def console_factory():
    return ScriptedConsole
