"""daily-helper: menu recommendation weighting and todo prioritisation."""

__version__ = "0.1.0"
