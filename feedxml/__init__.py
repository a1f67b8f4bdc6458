"""Navigable XML document and node model for reading feed files."""

__version__ = "0.1.0"
__all__ = ["document", "node"]