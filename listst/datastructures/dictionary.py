from __future__ import annotations
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .ordered_map import OrderedListMap

K = TypeVar("K")
V = TypeVar("V")


class SortedDictionary(Generic[K, V]):
    """A minimal mapping-like wrapper around :class:`OrderedListMap`.

    Behaves like a ``dict`` whose iteration order is ascending key order:
    missing keys raise ``KeyError`` from ``d[k]`` and ``del d[k]``. A ``None``
    key is treated as missing on lookup and removal; storing a ``None`` key
    or value raises :class:`InvalidArgument`.
    """

    __slots__ = ("_map",)

    def __init__(self, it: Optional[Iterable[Tuple[K, V]]] = None, **kwargs: V) -> None:
        self._map: OrderedListMap[K, V] = OrderedListMap()
        if it is not None:
            # Accept dict-like or iterable of pairs
            if hasattr(it, "items"):
                for k, v in it.items():  # type: ignore[attr-defined]
                    self[k] = v
            else:
                for k, v in it:
                    self[k] = v
        for k, v in kwargs.items():
            self[k] = v

    def _lookup(self, key: Optional[K]) -> Optional[V]:
        # dict semantics: a None key is simply missing
        return None if key is None else self._map.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self._map.insert_or_update(key, value)

    def __getitem__(self, key: K) -> V:
        val = self._lookup(key)
        if val is None:
            raise KeyError(key)
        return val

    def __delitem__(self, key: K) -> None:
        if key is None or not self._map.delete(key):
            raise KeyError(key)

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        val = self._lookup(key)
        return default if val is None else val

    def pop(self, key: K, *default: V) -> V:
        """Remove *key* and return its value (or *default* when given and missing)."""
        val = self._lookup(key)
        if val is None:
            if default:
                return default[0]
            raise KeyError(key)
        self._map.delete(key)
        return val

    def __contains__(self, key: object) -> bool:
        return self._map.contains(key)  # type: ignore[arg-type]

    def keys(self) -> List[K]:
        # Materialize so callers can mutate the dictionary while looping
        return list(self._map.keys())

    def values(self) -> List[V]:
        return [v for _, v in self._map.items()]

    def items(self) -> List[Tuple[K, V]]:
        return list(self._map.items())

    def __len__(self) -> int:
        return len(self._map)

    def to_py(self) -> dict[K, V]:
        """Convert to a native *dict*; recursively uses ``to_py`` when present."""
        d: dict[K, V] = {}
        for k, v in self._map.items():
            if hasattr(v, "to_py") and callable(getattr(v, "to_py")):
                d[k] = v.to_py()  # type: ignore[attr-defined]
            else:
                d[k] = v
        return d

    def __iter__(self) -> Iterator[K]:
        return iter(self._map.keys())

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"SortedDictionary({self.to_py()!r})"
