from __future__ import annotations
from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

from .errors import NotFoundError
from .hashtable_map import HashtableMap

K = TypeVar("K")
V = TypeVar("V")

_MISSING = object()


class Dictionary(Generic[K, V]):
    """A mapping-like wrapper around :class:`HashtableMap`.

    Unlike the underlying table, assignment to an existing key replaces its
    value, and missing keys raise a plain :class:`KeyError` naming the key.
    """

    __slots__ = ("_map",)

    def __init__(self, it: Optional[Iterable[Tuple[K, V]]] = None, capacity: int = HashtableMap.DEFAULT_CAPACITY,
                 **kwargs: V) -> None:
        self._map: HashtableMap[K, V] = HashtableMap(capacity)
        if it is not None:
            # Accept dict-like or iterable of pairs
            if hasattr(it, "items"):
                for k, v in it.items():  # type: ignore[attr-defined]
                    self[k] = v
            else:
                for k, v in it:
                    self[k] = v
        for k, v in kwargs.items():
            self[k] = v  # type: ignore[index]

    def __setitem__(self, key: K, value: V) -> None:
        if self._map.contains_key(key):
            self._map.remove(key)
        self._map.put(key, value)

    def __getitem__(self, key: K) -> V:
        try:
            return self._map.get(key)
        except NotFoundError:
            raise KeyError(key) from None

    def __delitem__(self, key: K) -> None:
        try:
            self._map.remove(key)
        except NotFoundError:
            raise KeyError(key) from None

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        if not self._map.contains_key(key):
            return default
        return self._map.get(key)

    def pop(self, key: K, default: object = _MISSING) -> Union[V, object]:
        """Remove *key* and return its value, or *default* when given."""
        if not self._map.contains_key(key):
            if default is _MISSING:
                raise KeyError(key)
            return default
        return self._map.remove(key)

    def clear(self) -> None:
        self._map.clear()

    def __contains__(self, key: object) -> bool:  # pragma: no cover - trivial
        return self._map.contains_key(key)  # type: ignore[arg-type]

    def keys(self) -> List[K]:
        # Materialize so callers may mutate while iterating the result
        return list(self._map.keys())

    def values(self) -> List[V]:
        return list(self._map.values())

    def items(self) -> List[Tuple[K, V]]:
        return list(self._map.items())

    def __len__(self) -> int:  # pragma: no cover - trivial
        return self._map.size

    def to_py(self) -> dict[K, V]:
        """Convert to a native *dict*; recursively uses ``to_py`` when present."""
        d: dict[K, V] = {}
        for k, v in self._map.items():
            if hasattr(v, "to_py") and callable(getattr(v, "to_py")):
                d[k] = v.to_py()  # type: ignore[attr-defined]
            else:
                d[k] = v
        return d

    def __iter__(self) -> Iterator[K]:  # pragma: no cover - simple
        return iter(self.keys())

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Dictionary({self.to_py()!r})"
