"""Interactive floor-plan wall editor."""

__version__ = "0.1.0"
