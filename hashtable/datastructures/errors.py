"""Exceptions raised by the hashtable containers."""


class HashtableError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(HashtableError, ValueError):
    """A caller-supplied precondition was violated.

    Raised for a non-positive capacity, a ``None`` key, or a key that is
    already stored.
    """


class NotFoundError(HashtableError, KeyError):
    """The key targeted by ``get`` or ``remove`` is not stored."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""
