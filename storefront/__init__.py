"""Storefront demo services — in-memory product and user REST APIs plus a client gateway."""

__version__ = "0.1.0"
