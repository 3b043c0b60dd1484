"""Open-addressing hash table with linear probing and tombstone deletion."""

from .datastructures import (
    Dictionary,
    HashtableError,
    HashtableMap,
    InvalidArgumentError,
    MapADT,
    NotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "Dictionary",
    "HashtableError",
    "HashtableMap",
    "InvalidArgumentError",
    "MapADT",
    "NotFoundError",
]
