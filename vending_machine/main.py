#!/usr/bin/env python3
"""
Vending Machine - Console entry point.

Usage:
    python -m vending_machine [--log-level INFO] [--log-file path] [--loki-url url] [--debug]
"""

import argparse
import sys
from typing import Optional, Sequence

from vending_machine.application.command_handler import CommandHandler
from vending_machine.application.vending_service import VendingService
from vending_machine.configs import LOKI_URL
from vending_machine.domain.catalog import default_catalog
from vending_machine.domain.machine_state import MachineState
from vending_machine.event_system import EventPublisher, log_event
from vending_machine.infrastructure.settings import Settings, get_settings, set_settings
from vending_machine.loggers import configure_logging


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Console vending machine",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Level of the application logger",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write logs to this file (rotated at 5 MB)",
    )
    parser.add_argument(
        "--loki-url",
        type=str,
        nargs="?",
        const=LOKI_URL,
        default=None,
        help=f"Push logs to this Loki endpoint ({LOKI_URL} when given without a value)",
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Show debug logs on the console",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    """Apply command line flags on top of the base settings."""
    settings = base or get_settings()
    return settings.with_overrides(
        level="DEBUG" if args.debug else args.log_level,
        console_level="DEBUG" if args.debug else None,
        log_file=args.log_file,
        loki_url=args.loki_url,
    )


def build_service(settings: Settings) -> VendingService:
    """Create the vending service with the default catalog."""
    publisher = EventPublisher()
    publisher.subscribe_all(log_event)
    return VendingService(
        catalog=default_catalog(),
        state=MachineState(valid_denominations=settings.machine.denominations),
        event_publisher=publisher,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code.
    """
    args = parse_args(argv)
    settings = build_settings(args)
    set_settings(settings)
    configure_logging(settings)

    handler = CommandHandler(build_service(settings))
    return handler.run()


if __name__ == "__main__":
    sys.exit(main())
