"""Infix arithmetic calculator with shunting-yard conversion and stack/queue containers."""

__version__ = "0.1.0"
__all__ = ["calc", "containers"]