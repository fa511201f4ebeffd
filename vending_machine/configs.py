"""
Configuration constants for the vending machine.

Values that never change for the lifetime of the process live here;
tunable settings live in ``infrastructure.settings``.
"""

from typing import Final


# =============================================================================
# Money
# =============================================================================

CURRENCY: Final[str] = "kr"

# Ascending; change is made from the end of this tuple backwards.
VALID_DENOMINATIONS: Final[tuple[int, ...]] = (1, 5, 10, 20, 50, 100, 500, 1000)


# =============================================================================
# Logging
# =============================================================================

LOGGER_NAME: Final[str] = "VENDING_MACHINE"
LOG_APP_NAME: Final[str] = "vending_machine"
LOKI_URL: Final[str] = "http://localhost:3100/loki/api/v1/push"
