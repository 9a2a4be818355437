"""Inventory API: JWT-authenticated users, products and API keys."""

__version__ = "0.1.0"
