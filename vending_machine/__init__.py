"""
Console vending machine.

Layers:
- core: exceptions and value objects
- domain: products, catalog, machine state, change-making
- application: vending service and interactive menu
- infrastructure: settings
"""

__version__ = "1.0.0"
