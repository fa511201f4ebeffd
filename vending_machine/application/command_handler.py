"""
Command Handler - Routes menu choices to vending service operations.

Provides the interactive read-eval loop with input parsing and
error reporting. Input and output functions are injectable so the
loop can be driven without a terminal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from vending_machine.configs import CURRENCY
from vending_machine.core.exceptions import InputParseError, ValidationError
from vending_machine.application.vending_service import VendingService
from vending_machine.loggers import logger


InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


@dataclass
class MenuOption:
    """
    Definition of a menu entry.

    Attributes:
        number: Number the user types to select the entry.
        label: Text shown in the menu.
        handler: Callable run when the entry is selected.
        exits: Whether selecting the entry ends the session.
    """

    number: int
    label: str
    handler: Callable[[], None]
    exits: bool = False


def parse_int(raw: str) -> int:
    """
    Parse user input as a whole number.

    Raises:
        InputParseError: If the text is not an integer.
    """
    try:
        return int(raw.strip())
    except ValueError:
        raise InputParseError(raw.strip()) from None


class CommandHandler:
    """
    Routes menu choices to their handlers.

    Keeps a registry of numbered menu options and dispatches the user's
    choice to the matching vending service call.
    """

    def __init__(
        self,
        service: VendingService,
        input_func: InputFunc = input,
        output_func: OutputFunc = print,
    ) -> None:
        """
        Initialize the command handler.

        Args:
            service: The vending service.
            input_func: Reads a line after showing a prompt.
            output_func: Writes a line.
        """
        self._service = service
        self._input = input_func
        self._output = output_func
        self._options: dict[int, MenuOption] = {}
        self._register_default_commands()

    def _register_default_commands(self) -> None:
        """Register the standard menu."""
        self.register(1, "Show all products", self.show_products)
        self.register(2, "Insert money", self.insert_money)
        self.register(3, "Buy product", self.buy_product)
        self.register(4, "Show product details", self.show_details)
        self.register(5, "End transaction", self.end_transaction)
        self.register(6, "Exit", lambda: None, exits=True)

    def register(
        self,
        number: int,
        label: str,
        handler: Callable[[], None],
        exits: bool = False,
    ) -> None:
        """
        Register a menu option.

        Args:
            number: Number the user types.
            label: Text shown in the menu.
            handler: Callable run on selection.
            exits: Whether the option ends the session.
        """
        self._options[number] = MenuOption(number, label, handler, exits)

    @property
    def options(self) -> list[MenuOption]:
        return sorted(self._options.values(), key=lambda o: o.number)

    def menu_text(self) -> str:
        lines = ["", "Welcome to the Vending Machine!", ""]
        lines.extend(f"{option.number}. {option.label}" for option in self.options)
        return "\n".join(lines)

    def _read_int(self, prompt: str) -> int:
        return parse_int(self._input(prompt))

    # =========================================================================
    # Menu actions
    # =========================================================================

    def show_products(self) -> None:
        for line in self._service.list_products():
            self._output(line)

    def insert_money(self) -> None:
        denominations = ", ".join(str(d) for d in self._service.valid_denominations)
        amount = self._read_int(f"Insert amount (valid denominations: {denominations}): ")
        self._output(self._service.insert_money(amount).message)

    def buy_product(self) -> None:
        self.show_products()
        product_id = self._read_int("Enter product Id to buy: ")
        self._output(self._service.purchase(product_id).message)

    def show_details(self) -> None:
        product_id = self._read_int("Enter product Id for details: ")
        self._output(self._service.get_details(product_id).description)

    def end_transaction(self) -> None:
        self._output(self._service.end_transaction().message)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def execute(self, choice: str) -> bool:
        """
        Execute one menu choice.

        Validation errors are reported to the user and the session goes on.

        Args:
            choice: Raw text the user entered at the menu prompt.

        Returns:
            False when the session should end, True otherwise.
        """
        try:
            option: Optional[MenuOption] = self._options.get(parse_int(choice))
            if option is None:
                logger.debug(f"Unknown menu option: {choice!r}")
                self._output("Invalid option. Please try again.")
                return True

            option.handler()
            return not option.exits

        except ValidationError as e:
            logger.warning(f"Rejected input: {e.message} {e.details}")
            self._output(f"Error: {e.message}")
            return True

    def run(self) -> int:
        """
        Run the interactive loop until the user exits.

        End of input or Ctrl+C ends the session like the Exit option.

        Returns:
            Process exit code.
        """
        logger.info(f"Session started. Balance: {self._service.balance}{CURRENCY}")
        try:
            while True:
                self._output(self.menu_text())
                if not self.execute(self._input("Select an option: ")):
                    break
        except (EOFError, KeyboardInterrupt):
            self._output("")

        logger.info(f"Session ended. Balance left: {self._service.balance}{CURRENCY}")
        return 0
