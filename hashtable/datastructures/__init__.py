from .errors import HashtableError, InvalidArgumentError, NotFoundError
from .map_adt import MapADT
from .hashtable_map import HashtableMap
from .dictionary import Dictionary

__all__ = [
    "HashtableError",
    "InvalidArgumentError",
    "NotFoundError",
    "MapADT",
    "HashtableMap",
    "Dictionary",
]
