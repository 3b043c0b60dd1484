from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class MapADT(ABC, Generic[K, V]):
    """Abstract map of unique keys to values.

    Duplicate keys are rejected rather than overwritten; lookups and removals
    of absent keys raise instead of returning a default.
    """

    __slots__ = ()

    @abstractmethod
    def put(self, key: K, value: V) -> None:
        """Store a new mapping; raise InvalidArgumentError on None/duplicate keys."""

    @abstractmethod
    def contains_key(self, key: K) -> bool:
        ...

    @abstractmethod
    def get(self, key: K) -> V:
        """Return the value for *key*; raise NotFoundError if absent."""

    @abstractmethod
    def remove(self, key: K) -> V:
        """Drop *key* and return its value; raise NotFoundError if absent."""

    @abstractmethod
    def clear(self) -> None:
        ...

    @property
    @abstractmethod
    def size(self) -> int:
        ...

    @property
    @abstractmethod
    def capacity(self) -> int:
        ...
