"""A mutable set whose equality and hash are based upon its contents.

Python's builtin :class:`set` is unhashable because it is mutable, and :class:`frozenset` cannot be edited in place.
A :class:`ValueSet` sits between the two: it supports the full set of in-place set algebra operations, while still
being usable as a dictionary key or as a member of another set. Two instances holding the same elements compare equal
and have the same hash, regardless of the order in which the elements were added.

Warning:
    Mutating a :class:`ValueSet` while it is being used as a dictionary key or set member changes its hash, exactly as
    it would for any other hashable object whose hash depends upon mutable state. Likewise, elements must not be
    mutated in a way that changes their own hash while they are members.

"""

import logging
from collections.abc import MutableSet as AbstractMutableSet
from collections.abc import Set as AbstractSet
from typing import Any, Iterable, Iterator, MutableSet, Optional, TypeVar

from typing_extensions import Protocol

from .errors import InsufficientCapacityError, InvalidArgumentError
from .hashing import content_hash

log = logging.getLogger(__name__)

__all__ = ["Buffer", "ValueSet"]

T = TypeVar('T')
T_contra = TypeVar('T_contra', contravariant=True)


class Buffer(Protocol[T_contra]):
    """A fixed-size, index-assignable destination for :meth:`ValueSet.copy_into`.

    Lists satisfy this protocol, as do one-dimensional :class:`numpy.ndarray` objects.

    """
    def __len__(self) -> int:
        ...

    def __setitem__(self, index: int, value: T_contra):
        ...


class ValueSet(MutableSet[T]):
    """A set with equality and hashing based upon its content rather than its identity.

    Storage and all of the raw set algebra are delegated to an owned :class:`collections.abc.MutableSet` (a builtin
    :class:`set` by default). The content hash is computed lazily by :func:`valueset.hashing.content_hash`, cached, and
    discarded at the start of every operation that could change the contents.

    This class is not thread-safe.

    """
    def __init__(self, elements: Optional[Iterable[T]] = None):
        """Initializes the set.

        Args:
            elements: The initial contents. If this is a :class:`collections.abc.MutableSet` (other than another
                :class:`ValueSet`), it is adopted as the underlying storage without being copied, and the caller must
                not retain a reference to it. Any other iterable is copied into a new :class:`set`. If omitted, the set
                starts out empty.

        """
        if elements is None:
            elements = set()
        elif isinstance(elements, ValueSet) or not isinstance(elements, AbstractMutableSet):
            elements = set(elements)
        self._elements: MutableSet[T] = elements
        self._signature: Optional[int] = None

    @classmethod
    def _from_iterable(cls, it: Iterable[T]) -> 'ValueSet[T]':
        return cls(set(it))

    def _reset_signature(self):
        """Discards the cached content hash.

        Every mutating method calls this before modifying the underlying storage, even if the modification turns out to
        be a no-op.

        """
        self._signature = None

    @staticmethod
    def _coerce(other: Optional[Iterable[T]], operation: str) -> AbstractSet:
        if other is None:
            raise InvalidArgumentError(f"{operation} expects an iterable of elements, not None")
        elif isinstance(other, (set, frozenset)):
            return other
        return frozenset(other)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, item: Any) -> bool:
        return item in self._elements

    def __iter__(self) -> Iterator[T]:
        """Iterates over the elements of this set in an unspecified order.

        The order is only stable for as long as the set is not mutated.

        """
        yield from self._elements

    def is_subset_of(self, other: Iterable[T]) -> bool:
        """Returns whether every element of this set is also in :obj:`other`."""
        return self._elements <= self._coerce(other, "is_subset_of")

    def is_superset_of(self, other: Iterable[T]) -> bool:
        """Returns whether every element of :obj:`other` is also in this set."""
        return self._elements >= self._coerce(other, "is_superset_of")

    def is_proper_subset_of(self, other: Iterable[T]) -> bool:
        """Returns whether this set is a subset of :obj:`other` but not equal to it."""
        return self._elements < self._coerce(other, "is_proper_subset_of")

    def is_proper_superset_of(self, other: Iterable[T]) -> bool:
        """Returns whether this set is a superset of :obj:`other` but not equal to it."""
        return self._elements > self._coerce(other, "is_proper_superset_of")

    def overlaps(self, other: Iterable[T]) -> bool:
        """Returns whether this set and :obj:`other` share at least one element."""
        return not self._elements.isdisjoint(self._coerce(other, "overlaps"))

    def set_equals(self, other: Iterable[T]) -> bool:
        """Returns whether this set holds exactly the distinct elements of :obj:`other`.

        Unlike ``==``, :obj:`other` can be any iterable. Duplicate elements in :obj:`other` are ignored.

        """
        return self._elements == self._coerce(other, "set_equals")

    issubset = is_subset_of
    issuperset = is_superset_of

    def copy_into(self, destination: Buffer[T], offset: int = 0):
        """Writes every element of this set into a pre-sized sequence.

        Args:
            destination: The sequence to write into. It is not resized.
            offset: The index in :obj:`destination` at which to write the first element.

        Raises:
            InvalidArgumentError: If :obj:`offset` is negative.
            InsufficientCapacityError: If :obj:`destination` does not have room for ``len(self)`` elements starting at
                :obj:`offset`. Nothing is written in this case.

        """
        if offset < 0:
            raise InvalidArgumentError(f"Invalid offset {offset!r}; the offset must be non-negative")
        available = max(len(destination) - offset, 0)
        if available < len(self._elements):
            raise InsufficientCapacityError(required=len(self._elements), available=available)
        for index, element in enumerate(self._elements, start=offset):
            destination[index] = element

    def add(self, item: T) -> bool:
        """Adds an element to this set.

        Returns:
            bool: :const:`True` if the element was not already present.

        """
        self._reset_signature()
        size_before = len(self._elements)
        self._elements.add(item)
        return len(self._elements) != size_before

    def discard(self, item: T):
        self._reset_signature()
        self._elements.discard(item)

    def remove(self, item: T) -> bool:
        """Removes an element from this set, if present.

        Unlike :meth:`set.remove`, this does not raise a :exc:`KeyError` if the element is missing.

        Returns:
            bool: :const:`True` if the element was present and has been removed.

        """
        self._reset_signature()
        if item not in self._elements:
            return False
        self._elements.discard(item)
        return True

    def clear(self):
        self._reset_signature()
        self._elements.clear()

    def union_with(self, other: Iterable[T]):
        """Adds every element of :obj:`other` to this set."""
        self._reset_signature()
        self._elements |= self._coerce(other, "union_with")

    def intersect_with(self, other: Iterable[T]):
        """Removes every element of this set that is not also in :obj:`other`."""
        self._reset_signature()
        self._elements &= self._coerce(other, "intersect_with")

    def except_with(self, other: Iterable[T]):
        """Removes every element of :obj:`other` from this set."""
        self._reset_signature()
        self._elements -= self._coerce(other, "except_with")

    def symmetric_except_with(self, other: Iterable[T]):
        """Updates this set to hold the elements that are in either it or :obj:`other`, but not in both."""
        self._reset_signature()
        self._elements ^= self._coerce(other, "symmetric_except_with")

    update = union_with
    intersection_update = intersect_with
    difference_update = except_with
    symmetric_difference_update = symmetric_except_with

    def __ior__(self, it: Iterable[T]) -> 'ValueSet[T]':
        self.union_with(it)
        return self

    def __iand__(self, it: Iterable[T]) -> 'ValueSet[T]':
        self.intersect_with(it)
        return self

    def __isub__(self, it: Iterable[T]) -> 'ValueSet[T]':
        self.except_with(it)
        return self

    def __ixor__(self, it: Iterable[T]) -> 'ValueSet[T]':
        self.symmetric_except_with(it)
        return self

    def copy(self) -> 'ValueSet[T]':
        """Returns a new :class:`ValueSet` holding a shallow copy of this set's elements."""
        return self.__class__(set(self._elements))

    __copy__ = copy

    def __getstate__(self):
        # element hashes are not stable across interpreter runs
        state = dict(self.__dict__)
        state['_signature'] = None
        return state

    def __eq__(self, other) -> bool:
        """Returns whether :obj:`other` is a :class:`ValueSet` with exactly the same elements.

        A :class:`ValueSet` is never equal to an object that is not a :class:`ValueSet`, including a builtin
        :class:`set` with the same contents.

        """
        if not isinstance(other, ValueSet):
            return False
        elif other is self:
            return True
        elif self._signature is not None and other._signature is not None and self._signature != other._signature:
            return False
        return self._elements == other._elements

    def __hash__(self) -> int:
        """Returns a hash of this set's content.

        The hash is computed with :func:`valueset.hashing.content_hash` the first time it is requested after a
        mutation, and is cached until the next mutation.

        """
        if self._signature is None:
            self._signature = content_hash(self._elements)
            log.debug(f"Recomputed the signature of a {self.__class__.__name__} with {len(self._elements)} "
                      f"element(s): {self._signature}")
        return self._signature

    def __repr__(self):
        if not self._elements:
            return f"{self.__class__.__name__}()"
        return f"{self.__class__.__name__}({{{', '.join(map(repr, self._elements))}}})"

    def __str__(self):
        return f"{{{', '.join(map(str, self._elements))}}}"
