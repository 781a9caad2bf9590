"""Inventory and payment services, order models and adapters for a small storefront."""

__version__ = "1.0.0"