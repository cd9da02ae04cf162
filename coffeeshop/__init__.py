"""User management layer for the coffee-shop application."""

__version__ = "0.1.0"
