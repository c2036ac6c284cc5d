"""Ingredient normalization and matching engine for household recipes and shopping lists."""

__version__ = "0.1.0"
