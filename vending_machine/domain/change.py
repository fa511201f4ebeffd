"""
Change-making for the returned balance.
"""

from typing import Iterable


def make_change(amount: int, denominations: Iterable[int]) -> dict[int, int]:
    """
    Split an amount into denominations, largest first.

    Greedy: for each denomination from largest to smallest take as many
    as fit, then carry the remainder. This yields the fewest pieces for
    canonical coin systems such as 1/5/10/20/50/100/500/1000.

    Args:
        amount: Amount to return, non-negative.
        denominations: Accepted denominations in any order.

    Returns:
        Denomination to count, largest denomination first, only entries
        with a positive count.

    Raises:
        ValueError: If amount is negative or a denomination is not positive.
    """
    if amount < 0:
        raise ValueError(f"Cannot make change for negative amount: {amount}")

    ordered = sorted(set(denominations), reverse=True)
    if any(d <= 0 for d in ordered):
        raise ValueError("Denominations must be positive")

    change: dict[int, int] = {}
    remaining = amount
    for denomination in ordered:
        count = remaining // denomination
        if count > 0:
            change[denomination] = count
            remaining %= denomination

    # Only reachable without a 1-unit denomination.
    if remaining:
        raise ValueError(f"Cannot return {remaining} with denominations {ordered}")

    return change
