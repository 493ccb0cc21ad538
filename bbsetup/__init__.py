"""Clone or update the Budget Bees repositories into a sibling workspace."""

__version__ = "0.1.0"
