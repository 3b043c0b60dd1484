from __future__ import annotations
import enum
import logging
from typing import Generic, Iterable, Iterator, Mapping, Tuple, TypeVar, Union

from .errors import InvalidArgumentError, NotFoundError
from .map_adt import MapADT

K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)

INVALID_KEY_MESSAGE = "Invalid key or key already exists!"
MISSING_KEY_MESSAGE = "Key does not exist in the hashtable!"


class _Marker(enum.Enum):
    """Slot states that carry no entry."""

    EMPTY = "empty"
    TOMBSTONE = "tombstone"


_EMPTY = _Marker.EMPTY
_TOMBSTONE = _Marker.TOMBSTONE


class _Occupied(Generic[K, V]):
    """A live (key, value) slot."""

    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"_Occupied({self.key!r}, {self.value!r})"


class HashtableMap(MapADT[K, V]):
    """A hash table mapping unique keys to values.

    Collisions are resolved by open addressing with a linear probe (step +1,
    wrapping around). Each slot is empty, occupied, or a tombstone left by a
    removal; tombstones keep probe chains intact for lookups and are reused
    by later insertions.

    The table doubles its capacity once the load factor reaches
    ``MAX_LOAD_FACTOR``. Rehashing drops every tombstone and re-places the
    surviving entries along their probe sequences in the larger array.

    Keys must be hashable and must not change their hash or equality while
    stored.
    """

    DEFAULT_CAPACITY = 8
    MAX_LOAD_FACTOR = 0.7
    GROWTH_FACTOR = 2

    __slots__ = ("_capacity", "_size", "_load_factor", "_slots")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise InvalidArgumentError("Capacity must be more than 0!")
        self._capacity: int = capacity
        self._size: int = 0
        self._load_factor: float = 0.0
        self._slots: list[_Marker | _Occupied[K, V]] = [_EMPTY] * capacity

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _home_index(self, key: K) -> int:
        return abs(hash(key)) % self._capacity

    def _probe(self, key: K) -> Iterator[int]:
        """Yield slot indices along *key*'s probe sequence, each slot once."""
        idx = self._home_index(key)
        for _ in range(self._capacity):
            yield idx
            idx = (idx + 1) % self._capacity

    def _find(self, key: K) -> int:
        """Return the index of the slot holding *key*, or -1."""
        for idx in self._probe(key):
            slot = self._slots[idx]
            if slot is _EMPTY:
                break
            if slot is not _TOMBSTONE and key == slot.key:
                return idx
        return -1

    def _place(self, entry: _Occupied[K, V]) -> None:
        """Write *entry* into the first empty or tombstoned slot of its probe."""
        for idx in self._probe(entry.key):
            if not isinstance(self._slots[idx], _Occupied):
                self._slots[idx] = entry
                self._size += 1
                return
        # put() grows before the table can fill, so a free slot always exists.
        raise RuntimeError("hashtable has no free slot")

    def _update_load_factor(self) -> None:
        self._load_factor = self._size / self._capacity

    def _grow(self) -> None:
        """Multiply the capacity by GROWTH_FACTOR and rehash live entries."""
        old_slots = self._slots
        old_capacity = self._capacity
        self._capacity = old_capacity * self.GROWTH_FACTOR
        self._slots = [_EMPTY] * self._capacity
        self._size = 0

        for slot in old_slots:
            if isinstance(slot, _Occupied):
                self._place(slot)
        self._update_load_factor()
        logger.debug(
            "grew hashtable from %d to %d slots, rehashed %d entries",
            old_capacity, self._capacity, self._size,
        )

    # -----------------------------
    # Core operations
    # -----------------------------
    def put(self, key: K, value: V) -> None:
        """Insert a new key-value pair.

        Raises:
            InvalidArgumentError: if *key* is None or already stored. The
                table is left untouched.
        """
        if key is None or self.contains_key(key):
            raise InvalidArgumentError(INVALID_KEY_MESSAGE)

        self._place(_Occupied(key, value))
        self._update_load_factor()
        if self._load_factor >= self.MAX_LOAD_FACTOR:
            self._grow()

    def contains_key(self, key: K) -> bool:
        """Check whether *key* maps to a value."""
        return self._find(key) >= 0

    def get(self, key: K) -> V:
        """Return the value *key* maps to.

        Raises:
            NotFoundError: if *key* is not stored.
        """
        idx = self._find(key)
        if idx < 0:
            raise NotFoundError(MISSING_KEY_MESSAGE)
        return self._slots[idx].value  # type: ignore[union-attr]

    def remove(self, key: K) -> V:
        """Remove *key* and return the value it mapped to.

        The slot becomes a tombstone so that keys probed past it stay
        reachable.

        Raises:
            NotFoundError: if *key* is not stored.
        """
        idx = self._find(key)
        if idx < 0:
            raise NotFoundError(MISSING_KEY_MESSAGE)
        value = self._slots[idx].value  # type: ignore[union-attr]
        self._slots[idx] = _TOMBSTONE
        self._size -= 1
        self._update_load_factor()
        return value

    def clear(self) -> None:
        """Drop every entry and tombstone, keeping the current capacity."""
        self._size = 0
        self._load_factor = 0.0
        self._slots = [_EMPTY] * self._capacity
        logger.debug("cleared hashtable with %d slots", self._capacity)

    # -----------------------------
    # Bulk insertion
    # -----------------------------
    def put_all(self, items: Union[Mapping[K, V], Iterable[Tuple[K, V]]]) -> None:
        """Insert many pairs, rejecting the whole batch if any key is invalid.

        *items* may be a mapping or an iterable of ``(key, value)`` pairs.
        Every key is checked (not None, not stored, not repeated in the batch)
        before anything is inserted.
        """
        if hasattr(items, "items"):
            pairs = list(items.items())  # type: ignore[union-attr]
        else:
            pairs = list(items)

        seen: HashtableMap[K, None] = HashtableMap(max(len(pairs), 1))
        for key, _ in pairs:
            if key is None or self.contains_key(key) or seen.contains_key(key):
                raise InvalidArgumentError(INVALID_KEY_MESSAGE)
            seen.put(key, None)

        for key, value in pairs:
            self.put(key, value)

    # -----------------------------
    # Accessors
    # -----------------------------
    @property
    def size(self) -> int:
        """Number of keys currently stored."""
        return self._size

    @property
    def capacity(self) -> int:
        """Length of the underlying slot array."""
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._load_factor

    # -----------------------------
    # Iteration helpers
    # -----------------------------
    def items(self) -> Iterator[Tuple[K, V]]:
        """Yield (key, value) pairs in slot order."""
        for slot in self._slots:
            if isinstance(slot, _Occupied):
                yield (slot.key, slot.value)

    def keys(self) -> Iterator[K]:
        for k, _ in self.items():
            yield k

    def values(self) -> Iterator[V]:
        for _, v in self.items():
            yield v

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:  # pragma: no cover - trivial
        return self._size

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashtableMap({{{pairs}}})"
