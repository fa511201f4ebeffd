"""
Application layer - Application services and use cases.

Contains:
- Vending service
- Command handler (interactive menu)
"""

from .vending_service import VendingService
from .command_handler import CommandHandler, MenuOption, parse_int


__all__ = [
    "VendingService",
    "CommandHandler",
    "MenuOption",
    "parse_int",
]
