from __future__ import annotations
import operator
from typing import Generic, Iterator, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class _LLNode(Generic[K, V]):
    """A lightweight node for a sorted singly-linked chain."""

    __slots__ = ("key", "value", "next")

    def __init__(self, key: K, value: V, next: Optional["_LLNode[K, V]"] = None) -> None:
        self.key = key
        self.value = value
        self.next = next


class SortedChain(Generic[K, V]):
    """Singly-linked chain of (key, value) nodes kept in ascending key order.

    The chain only knows how to walk and relink itself; it does not validate
    arguments or keep a size. Positions are expressed as the node *preceding*
    the place of interest, with ``None`` standing for the virtual predecessor
    that sits before :attr:`head`.
    """

    __slots__ = ("head",)

    def __init__(self) -> None:
        self.head: Optional[_LLNode[K, V]] = None

    def locate(self, key: K, inclusive: bool = True) -> Tuple[Optional[_LLNode[K, V]], int]:
        """Walk to the last node whose key is ``<= key`` (``< key`` if not *inclusive*).

        Returns ``(prev, steps)`` where *prev* is that node, or ``None`` when
        every stored key is past the target, and *steps* is the number of
        nodes walked over. ``successor(prev)`` is then the first node at or
        beyond the target.
        """
        before = operator.le if inclusive else operator.lt
        prev: Optional[_LLNode[K, V]] = None
        n = self.head
        steps = 0
        while n is not None and before(n.key, key):
            prev, n = n, n.next
            steps += 1
        return prev, steps

    def successor(self, prev: Optional[_LLNode[K, V]]) -> Optional[_LLNode[K, V]]:
        """Return the node after *prev*; the head for the virtual predecessor."""
        return self.head if prev is None else prev.next

    def splice_after(self, prev: Optional[_LLNode[K, V]], key: K, value: V) -> _LLNode[K, V]:
        """Create a node for (*key*, *value*) and link it right after *prev*."""
        node = _LLNode(key, value, self.successor(prev))
        if prev is None:
            self.head = node
        else:
            prev.next = node
        return node

    def unlink_after(self, prev: Optional[_LLNode[K, V]]) -> _LLNode[K, V]:
        """Detach and return the node following *prev*.

        Raises IndexError if *prev* is the tail.
        """
        node = self.successor(prev)
        if node is None:
            raise IndexError("unlink past the end of the chain")
        if prev is None:
            self.head = node.next
        else:
            prev.next = node.next
        node.next = None
        return node

    def last(self) -> Optional[_LLNode[K, V]]:
        """Return the terminal node, or None for an empty chain (O(n))."""
        n = self.head
        if n is None:
            return None
        while n.next is not None:
            n = n.next
        return n

    def nth(self, k: int) -> Optional[_LLNode[K, V]]:
        """Return the node at zero-based position *k*, or None past the end."""
        if k < 0:
            return None
        n = self.head
        while n is not None and k > 0:
            n = n.next
            k -= 1
        return n

    def nodes(self) -> Iterator[_LLNode[K, V]]:
        """Yield nodes from head to tail."""
        n = self.head
        while n is not None:
            yield n
            n = n.next

    def items(self) -> Iterator[Tuple[K, V]]:
        """Yield (key, value) pairs in ascending key order."""
        for n in self.nodes():
            yield (n.key, n.value)
