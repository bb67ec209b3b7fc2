"""numfield — keystroke and paste sanitization for numeric text fields."""

__version__ = "0.1.0"
