"""Typed JSON value model (values) with compact and pretty text formatters (formatters)."""

__version__ = "0.1.0"
__all__ = ["values", "formatters"]