"""A small grocery shop: a shopping list and a store with a cart and receipts, with a Tk interface."""

__version__ = "0.1.0"