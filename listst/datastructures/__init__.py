from .errors import (
    ConcurrentModification,
    EmptyCollection,
    InvalidArgument,
    SymbolTableError,
    UnsupportedOperation,
)
from .linked_list import SortedChain
from .ordered_map import OrderedListMap
from .dictionary import SortedDictionary

__all__ = [
    "SortedChain",
    "OrderedListMap",
    "SortedDictionary",
    "SymbolTableError",
    "InvalidArgument",
    "EmptyCollection",
    "UnsupportedOperation",
    "ConcurrentModification",
]
