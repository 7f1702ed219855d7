"""Taquilla: persistencia de entradas de cine."""

__version__ = "1.0.0"
