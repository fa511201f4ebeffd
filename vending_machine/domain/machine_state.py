"""
Machine State - Money held for the current customer.
"""

from __future__ import annotations

from typing import Any, Iterable

from vending_machine.configs import VALID_DENOMINATIONS


class MachineState:
    """
    Balance and accepted denominations.

    The balance is the only value that changes: it grows on deposit,
    shrinks on withdraw and drops to zero on reset. It never goes
    below zero. Both values are read-only from outside.
    """

    def __init__(
        self,
        balance: int = 0,
        valid_denominations: Iterable[int] = VALID_DENOMINATIONS,
    ) -> None:
        """
        Initialize the state.

        Args:
            balance: Starting balance, non-negative.
            valid_denominations: Accepted denominations in any order.
        """
        if balance < 0:
            raise ValueError("Balance cannot be negative")
        self._balance = balance
        self._valid_denominations: tuple[int, ...] = tuple(sorted(set(valid_denominations)))

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def valid_denominations(self) -> tuple[int, ...]:
        return self._valid_denominations

    def accepts(self, amount: Any) -> bool:
        """Check whether an amount is an accepted denomination."""
        # bool and float compare equal to ints (True == 1, 5.0 == 5)
        if not isinstance(amount, int) or isinstance(amount, bool):
            return False
        return amount in self._valid_denominations

    def can_afford(self, cost: int) -> bool:
        return self._balance >= cost

    def deposit(self, amount: int) -> int:
        """
        Add money to the balance.

        Args:
            amount: Accepted denomination.

        Returns:
            New balance.
        """
        if not self.accepts(amount):
            raise ValueError(f"Not an accepted denomination: {amount!r}")
        self._balance += amount
        return self._balance

    def withdraw(self, amount: int) -> int:
        """
        Take money from the balance.

        Args:
            amount: Amount to take, at most the current balance.

        Returns:
            New balance.
        """
        if amount < 0 or amount > self._balance:
            raise ValueError(f"Cannot withdraw {amount} from balance {self._balance}")
        self._balance -= amount
        return self._balance

    def reset(self) -> int:
        """
        Empty the balance.

        Returns:
            The balance before the reset.
        """
        previous = self._balance
        self._balance = 0
        return previous

    def __repr__(self) -> str:
        return f"MachineState(balance={self._balance})"
