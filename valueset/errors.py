"""Exceptions raised by :class:`valueset.ValueSet`.

Each exception also subclasses the closest builtin exception, so callers may catch either.

"""


class ValueSetError(Exception):
    """Base class for all errors raised by this package."""
    pass


class InvalidArgumentError(ValueSetError, ValueError):
    """Raised when a required argument is missing or out of range."""
    pass


class InsufficientCapacityError(ValueSetError, IndexError):
    """Raised when a destination buffer cannot hold every element of a set."""
    def __init__(self, required: int, available: int):
        self.required: int = required
        """The number of slots that were needed."""
        self.available: int = available
        """The number of slots that were available."""
        super().__init__(f"Destination has room for {available} element(s) but {required} are required")
