"""
Tests for the interactive menu, entry point, events and settings.
"""

import io
import logging

import pytest

from vending_machine.application.command_handler import CommandHandler, parse_int
from vending_machine.configs import LOKI_URL
from vending_machine.core.exceptions import InputParseError
from vending_machine.event_system import EventPublisher, EventType, log_event
from vending_machine.infrastructure.settings import Settings, get_settings
from vending_machine.loggers import LokiHandler, configure_logging, logger, send_to_loki
from vending_machine.main import build_service, build_settings, main, parse_args


def make_handler(service, console):
    return CommandHandler(service, input_func=console.input, output_func=console.print)


# =============================================================================
# Command Handler Tests
# =============================================================================


class TestParseInt:
    """Tests for integer parsing."""

    def test_parse_valid(self):
        assert parse_int(" 42 \n") == 42

    def test_parse_invalid_raises(self):
        """Test non-numeric input raises InputParseError."""
        with pytest.raises(InputParseError) as exc_info:
            parse_int("abc")
        assert exc_info.value.raw_value == "abc"


class TestCommandHandler:
    """Tests for CommandHandler dispatch."""

    def test_menu_lists_options(self, service, console_factory):
        """Test the menu shows all six options in order."""
        handler = make_handler(service, console_factory())
        text = handler.menu_text()
        assert "Welcome to the Vending Machine!" in text
        for line in (
            "1. Show all products",
            "2. Insert money",
            "3. Buy product",
            "4. Show product details",
            "5. End transaction",
            "6. Exit",
        ):
            assert line in text

    def test_show_products(self, service, console_factory):
        """Test option 1 prints every product."""
        console = console_factory()
        handler = make_handler(service, console)
        assert handler.execute("1") is True
        assert console.output == service.list_products()

    def test_insert_money(self, service, console_factory):
        """Test option 2 prompts for an amount and inserts it."""
        console = console_factory("50")
        handler = make_handler(service, console)
        handler.execute("2")
        assert service.balance == 50
        assert console.prompts[-1] == (
            "Insert amount (valid denominations: 1, 5, 10, 20, 50, 100, 500, 1000): "
        )
        assert console.output[-1] == "Inserted 50kr. Current balance: 50kr."

    def test_insert_invalid_denomination(self, service, console_factory):
        """Test an invalid denomination is reported and the loop goes on."""
        console = console_factory("7")
        handler = make_handler(service, console)
        assert handler.execute("2") is True
        assert console.output[-1] == "Error: Invalid denomination."
        assert service.balance == 0

    def test_insert_non_numeric(self, service, console_factory):
        """Test a non-numeric amount is a recoverable error."""
        console = console_factory("ten")
        handler = make_handler(service, console)
        assert handler.execute("2") is True
        assert console.output[-1].startswith("Error: ")
        assert service.balance == 0

    def test_buy_product(self, service, console_factory):
        """Test option 3 lists products then buys."""
        service.insert_money(20)
        console = console_factory("1")
        handler = make_handler(service, console)
        handler.execute("3")
        assert console.output[:3] == service.list_products()
        assert console.output[-1] == "Purchased Coca-Cola. You drink the Coca-Cola."
        assert service.balance == 5

    def test_buy_unknown_product(self, service, console_factory):
        """Test buying an unknown id prints the not-found error."""
        console = console_factory("42")
        handler = make_handler(service, console)
        assert handler.execute("3") is True
        assert console.output[-1] == "Error: Product not found."

    def test_buy_without_money(self, service, console_factory):
        console = console_factory("3")
        handler = make_handler(service, console)
        handler.execute("3")
        assert console.output[-1] == "Not enough money. Please insert more money."

    def test_show_details(self, service, console_factory):
        """Test option 4 prints details or not-found."""
        console = console_factory("1", "99")
        handler = make_handler(service, console)
        handler.execute("4")
        handler.execute("4")
        assert console.output == [
            "Id: 1, Name: Coca-Cola, Cost: 15kr, Volume: 330ml",
            "Product not found.",
        ]

    def test_end_transaction(self, service, console_factory):
        """Test option 5 prints the change breakdown."""
        service.insert_money(20)
        service.insert_money(20)
        service.insert_money(5)
        console = console_factory()
        handler = make_handler(service, console)
        handler.execute("5")
        assert console.output[-1] == "Transaction ended. Change returned: 2x20kr, 1x5kr"
        assert service.balance == 0

    def test_exit(self, service, console_factory):
        """Test option 6 ends the session."""
        handler = make_handler(service, console_factory())
        assert handler.execute("6") is False

    @pytest.mark.parametrize("choice", ["0", "7", "-1"])
    def test_invalid_option(self, service, console_factory, choice):
        """Test unknown numbers print the invalid option message."""
        console = console_factory()
        handler = make_handler(service, console)
        assert handler.execute(choice) is True
        assert console.output == ["Invalid option. Please try again."]

    def test_non_numeric_choice(self, service, console_factory):
        """Test a non-numeric menu choice does not end the session."""
        console = console_factory()
        handler = make_handler(service, console)
        assert handler.execute("buy") is True
        assert console.output[-1].startswith("Error: ")

    def test_run_session(self, service, console_factory):
        """Test a full session from insert to exit."""
        console = console_factory("2", "100", "2", "50", "3", "3", "5", "6")
        handler = make_handler(service, console)
        assert handler.run() == 0
        assert "Purchased Action Figure. You play with the Action Figure." in console.output
        assert "Transaction ended. Change returned: 1x100kr" in console.output
        assert service.balance == 0

    def test_run_stops_at_end_of_input(self, service, console_factory):
        """Test EOF ends the session cleanly."""
        console = console_factory("2", "10")
        handler = make_handler(service, console)
        assert handler.run() == 0
        assert service.balance == 10


# =============================================================================
# Event System Tests
# =============================================================================


class TestEventPublisher:
    """Tests for EventPublisher."""

    def test_publish_to_subscribers(self):
        """Test handlers receive the event data."""
        received = []
        publisher = EventPublisher()
        publisher.subscribe(EventType.MONEY_INSERTED, received.append)
        publisher.publish(EventType.MONEY_INSERTED, amount=5, balance=5)
        publisher.publish(EventType.TRANSACTION_ENDED, returned_amount=5)
        assert received == [{"type": EventType.MONEY_INSERTED, "amount": 5, "balance": 5}]

    def test_unsubscribe(self):
        received = []
        publisher = EventPublisher()
        publisher.subscribe(EventType.MONEY_INSERTED, received.append)
        publisher.unsubscribe(EventType.MONEY_INSERTED, received.append)
        publisher.publish(EventType.MONEY_INSERTED, amount=5)
        assert received == []

    def test_failing_handler_does_not_break_others(self, caplog):
        """Test a handler error is logged and other handlers still run."""
        received = []

        def broken(event):
            raise RuntimeError("boom")

        publisher = EventPublisher()
        publisher.subscribe(EventType.MONEY_INSERTED, broken)
        publisher.subscribe(EventType.MONEY_INSERTED, received.append)
        with caplog.at_level(logging.ERROR, logger=logger.name):
            publisher.publish(EventType.MONEY_INSERTED, amount=1)
        assert len(received) == 1
        assert "Event handler failed" in caplog.text

    def test_failing_handler_does_not_break_service(self, service):
        """Test a broken subscriber cannot undo an insert."""
        service.event_publisher.subscribe(
            EventType.MONEY_INSERTED, lambda event: 1 / 0
        )
        service.insert_money(10)
        assert service.balance == 10

    def test_log_event(self, caplog):
        with caplog.at_level(logging.INFO, logger=logger.name):
            log_event({"type": EventType.MONEY_INSERTED, "amount": 20})
        assert "money_inserted" in caplog.text


# =============================================================================
# Settings and Entry Point Tests
# =============================================================================


class TestSettings:
    """Tests for Settings configuration."""

    def test_settings_defaults(self):
        """Test default settings values."""
        settings = Settings()
        assert settings.logging.level == "INFO"
        assert settings.logging.console_level == "WARNING"
        assert settings.logging.log_file is None
        assert settings.logging.loki_url is None
        assert settings.machine.denominations == (1, 5, 10, 20, 50, 100, 500, 1000)

    def test_with_overrides_ignores_none(self):
        """Test unset flags keep their defaults."""
        settings = Settings().with_overrides(level="DEBUG", log_file=None)
        assert settings.logging.level == "DEBUG"
        assert settings.logging.log_file is None

    def test_get_settings_singleton(self):
        assert get_settings() is get_settings()


class TestLogging:
    """Tests for logging configuration."""

    def test_configure_logging_handlers(self, tmp_path):
        """Test file and Loki handlers are added when configured."""
        log_file = tmp_path / "vending.log"
        settings = Settings().with_overrides(
            log_file=str(log_file),
            loki_url="http://localhost:3100/loki/api/v1/push",
        )
        try:
            configure_logging(settings)
            assert any(isinstance(h, LokiHandler) for h in logger.handlers)
            assert log_file.exists()
        finally:
            configure_logging(Settings())
        assert not any(isinstance(h, LokiHandler) for h in logger.handlers)

    @pytest.mark.parametrize("url", ["not a url", "http://[bad-host/push", "ftp://localhost/push"])
    def test_send_to_loki_bad_url(self, url, capsys):
        """Test an unusable Loki URL is reported once and never raised."""
        send_to_loki(url, "INFO", "message", "vending_machine")
        err = capsys.readouterr().err
        assert err.startswith("[Loki send error]")
        assert "Traceback" not in err


class TestMain:
    """Tests for the console entry point."""

    def test_parse_args(self):
        args = parse_args(["--log-level", "debug", "--log-file", "vm.log"])
        assert args.log_level == "DEBUG"
        assert args.log_file == "vm.log"
        assert args.debug is False

    def test_loki_url_flag(self):
        """Test --loki-url without a value uses the local Loki endpoint."""
        assert parse_args([]).loki_url is None
        assert parse_args(["--loki-url"]).loki_url == LOKI_URL
        assert parse_args(["--loki-url", "http://loki:3100/push"]).loki_url == "http://loki:3100/push"

        settings = build_settings(parse_args(["--loki-url"]), base=Settings())
        assert settings.logging.loki_url == LOKI_URL

    def test_debug_flag(self):
        """Test --debug lowers both logger and console levels."""
        settings = build_settings(parse_args(["--debug"]), base=Settings())
        assert settings.logging.level == "DEBUG"
        assert settings.logging.console_level == "DEBUG"

    def test_build_service(self):
        service = build_service(Settings())
        assert service.balance == 0
        assert len(service.catalog) == 3

    def test_main_exits_with_zero(self, monkeypatch, capsys):
        """Test a scripted session through stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("2\n20\n5\n6\n"))
        try:
            assert main([]) == 0
        finally:
            configure_logging(Settings())
        out = capsys.readouterr().out
        assert "Inserted 20kr. Current balance: 20kr." in out
        assert "Transaction ended. Change returned: 1x20kr" in out
