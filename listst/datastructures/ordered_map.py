from __future__ import annotations
import logging
from typing import Callable, Generic, Iterator, Optional, Tuple, TypeVar

from .errors import (
    ConcurrentModification,
    EmptyCollection,
    InvalidArgument,
    UnsupportedOperation,
)
from .linked_list import SortedChain, _LLNode

K = TypeVar("K")
V = TypeVar("V")
T = TypeVar("T")

logger = logging.getLogger(__name__)


class OrderedListMap(Generic[K, V]):
    """Ordered symbol table backed by a sorted singly-linked list.

    Keys are pairwise distinct and kept in ascending order, so every
    operation is a linear scan of the chain (O(n)); ``size()`` is O(1).

    Conventions
    -----------
    • ``None`` is never a valid key. Operations that need a key raise
      :class:`InvalidArgument` when given ``None``.
    • ``None`` is never a stored value. ``put(key, None)`` deletes *key*;
      use :meth:`insert_or_update` and :meth:`delete` to keep the two
      operations apart.
    • Lookups that miss (``get``, ``select``, ``floor``, ``ceiling``)
      return ``None`` rather than raising.
    • ``rank(key)`` counts the keys ``<= key``.
    • Not thread-safe. Structural changes invalidate live iterators.
    """

    __slots__ = ("_chain", "_size", "_generation")

    def __init__(self) -> None:
        self._chain: SortedChain[K, V] = SortedChain()
        self._size: int = 0
        # Bumped on every insert/delete; iterators compare against it.
        self._generation: int = 0

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _require_key(key: Optional[K], op: str) -> None:
        if key is None:
            raise InvalidArgument(f"argument to {op}() is None")

    def _find(self, key: K) -> Optional[_LLNode[K, V]]:
        """Return the node holding exactly *key*, or None."""
        prev, _ = self._chain.locate(key)
        if prev is not None and prev.key == key:
            return prev
        return None

    # -----------------------------
    # Size & membership
    # -----------------------------
    def size(self) -> int:
        """Number of (key, value) pairs in the table."""
        return self._size

    def is_empty(self) -> bool:
        return self._chain.head is None

    def contains(self, key: Optional[K]) -> bool:
        """Return True if *key* is stored in the table.

        ``None`` is never stored, so ``contains(None)`` is simply False.
        """
        if key is None:
            return False
        return self._find(key) is not None

    def get(self, key: Optional[K]) -> Optional[V]:
        """Return the value for *key*, or None if the key is absent."""
        self._require_key(key, "get")
        node = self._find(key)  # type: ignore[arg-type]
        return None if node is None else node.value

    # -----------------------------
    # Mutation
    # -----------------------------
    def insert_or_update(self, key: K, value: V) -> bool:
        """Insert (*key*, *value*) in order, or replace the value of an existing key.

        Returns True if a new node was inserted; False if an existing node
        had its value replaced.
        """
        self._require_key(key, "insert_or_update")
        if value is None:
            raise InvalidArgument("value to insert_or_update() is None; use delete()")
        prev, _ = self._chain.locate(key)
        if prev is not None and prev.key == key:
            prev.value = value
            logger.debug("updated %r", key)
            return False
        self._chain.splice_after(prev, key, value)
        self._size += 1
        self._generation += 1
        logger.debug("inserted %r (size=%d)", key, self._size)
        return True

    def put(self, key: K, value: Optional[V]) -> None:
        """Associate *value* with *key*; a ``None`` value deletes *key* instead."""
        self._require_key(key, "put")
        if value is None:
            self.delete(key)
            return
        self.insert_or_update(key, value)

    def delete(self, key: K) -> bool:
        """Remove *key* and its value. Absent keys are ignored.

        Returns True if a node was removed.
        """
        self._require_key(key, "delete")
        prev, _ = self._chain.locate(key, inclusive=False)
        target = self._chain.successor(prev)
        if target is None or target.key != key:
            return False
        self._chain.unlink_after(prev)
        self._size -= 1
        self._generation += 1
        logger.debug("deleted %r (size=%d)", key, self._size)
        return True

    def delete_min(self) -> None:
        """Remove the smallest key. Raises EmptyCollection on an empty table."""
        if self.is_empty():
            raise EmptyCollection("delete_min(): symbol table underflow")
        self.delete(self.min())

    def delete_max(self) -> None:
        """Remove the greatest key. Raises EmptyCollection on an empty table."""
        if self.is_empty():
            raise EmptyCollection("delete_max(): symbol table underflow")
        self.delete(self.max())

    # -----------------------------
    # Order statistics
    # -----------------------------
    def min(self) -> K:
        """Smallest key. The table must be non-empty (check ``is_empty()`` first)."""
        head = self._chain.head
        if head is None:
            raise EmptyCollection("min() called on an empty symbol table")
        return head.key

    def max(self) -> K:
        """Greatest key (O(n) walk to the tail). The table must be non-empty."""
        tail = self._chain.last()
        if tail is None:
            raise EmptyCollection("max() called on an empty symbol table")
        return tail.key

    def rank(self, key: K) -> int:
        """Number of keys less than or equal to *key*.

        A stored key counts itself, so ``rank(select(k)) == k + 1``.
        """
        self._require_key(key, "rank")
        _, steps = self._chain.locate(key)
        return steps

    def select(self, k: int) -> Optional[K]:
        """Key at zero-based position *k*, or None if *k* is out of range."""
        if k < 0 or k >= self._size:
            return None
        node = self._chain.nth(k)
        return None if node is None else node.key

    def floor(self, key: K) -> Optional[K]:
        """Greatest key ``<= key``, or None if every key is greater."""
        self._require_key(key, "floor")
        prev, _ = self._chain.locate(key)
        return None if prev is None else prev.key

    def ceiling(self, key: K) -> Optional[K]:
        """Smallest key ``>= key``, or None if every key is smaller."""
        self._require_key(key, "ceiling")
        prev, _ = self._chain.locate(key, inclusive=False)
        node = self._chain.successor(prev)
        return None if node is None else node.key

    # -----------------------------
    # Iteration
    # -----------------------------
    def keys(self) -> "_ChainIterator[K]":
        """Return a fresh iterator over the keys in ascending order."""
        return _ChainIterator(self, lambda n: n.key)

    def items(self) -> "_ChainIterator[Tuple[K, V]]":
        """Return a fresh iterator over (key, value) pairs in ascending key order."""
        return _ChainIterator(self, lambda n: (n.key, n.value))

    # -----------------------------
    # Invariant checks
    # -----------------------------
    def is_sorted(self) -> bool:
        """Check the structural invariants of the chain.

        Keys strictly ascending (hence distinct), the cached size matching
        the number of reachable nodes, and an empty head iff size is zero.
        """
        count = 0
        prev: Optional[_LLNode[K, V]] = None
        for node in self._chain.nodes():
            if prev is not None and not prev.key < node.key:
                return False
            prev = node
            count += 1
        return count == self._size and (self._chain.head is None) == (self._size == 0)

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self._chain.items())
        return f"OrderedListMap({{{pairs}}})"


class _ChainIterator(Generic[T]):
    """Forward-only walk over a table's chain.

    Each call to ``keys()``/``items()`` creates a new iterator starting at the
    current head. Inserting or deleting a key after the iterator was created
    makes the next ``next()`` raise :class:`ConcurrentModification`, even
    when the iterator had already reached the end.
    """

    __slots__ = ("_table", "_node", "_generation", "_project")

    def __init__(self, table: OrderedListMap, project: Callable[[_LLNode], T]) -> None:
        self._table = table
        self._node = table._chain.head
        self._generation = table._generation
        self._project = project

    def __iter__(self) -> "_ChainIterator[T]":
        return self

    def __next__(self) -> T:
        if self._table._generation != self._generation:
            raise ConcurrentModification("symbol table changed during iteration")
        node = self._node
        if node is None:
            raise StopIteration
        self._node = node.next
        return self._project(node)

    def remove(self) -> None:
        raise UnsupportedOperation("keys iterator does not support removal")
