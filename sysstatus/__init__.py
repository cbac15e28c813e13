"""Compose a compact system status line from small components."""

__version__ = "0.1.0"