"""Ordered symbol table on a sorted singly-linked list."""

from .datastructures import OrderedListMap, SortedDictionary

__all__ = ["OrderedListMap", "SortedDictionary"]

__version__ = "0.1.0"
