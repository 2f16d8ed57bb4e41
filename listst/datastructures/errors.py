"""Exceptions raised by the ordered symbol table.

Each error also derives from the closest built-in exception so callers that
only know the builtins (``ValueError``, ``IndexError`` ...) still catch them.
"""

from __future__ import annotations


class SymbolTableError(Exception):
    """Base class for every error raised by :mod:`listst.datastructures`."""


class InvalidArgument(SymbolTableError, ValueError):
    """A required key (or value) was ``None``."""


class EmptyCollection(SymbolTableError, IndexError):
    """The operation needs at least one entry but the table is empty."""


class UnsupportedOperation(SymbolTableError, TypeError):
    """Removal was attempted through a read-only keys iterator."""


class ConcurrentModification(SymbolTableError, RuntimeError):
    """The table was structurally changed while an iterator was live."""
