"""Order-independent hashing of unordered collections.

The signature of a collection is computed by hashing every element individually, sorting the distinct element hashes
in ascending order, and then folding them left to right::

    code = 0
    for element_code in sorted(set(hash(e) for e in elements)):
        code = (code * HASH_MULTIPLIER) ^ element_code

Sorting the element hashes, rather than relying on the iteration order of the underlying collection, is what makes two
collections with the same content produce the same signature regardless of the order in which their elements were
inserted.

Note:
    Elements whose individual hashes collide contribute a single entry to the fold. Two collections that differ only
    in which of a set of colliding elements they hold will therefore share a signature. This is permitted by the hash
    contract, since they are not equal anyway.

"""

import sys
from typing import Hashable, Iterable, List

import numpy as np

HASH_MULTIPLIER: int = 397
"""The odd multiplier used to spread bits between successive element hashes.

This must stay a module-wide constant: instances hashing with different multipliers would break the guarantee that
equal collections have equal hashes.
"""

HASH_WIDTH: int = sys.hash_info.width
"""The width, in bits, of the signed integers produced by :func:`fold_hash_codes`."""

_MASK = (1 << HASH_WIDTH) - 1
_SIGN_BIT = 1 << (HASH_WIDTH - 1)


def _wrap(value: int) -> int:
    value &= _MASK
    if value >= _SIGN_BIT:
        value -= 1 << HASH_WIDTH
    return value


def canonical_hash_codes(elements: Iterable[Hashable]) -> List[int]:
    """Returns the distinct hashes of :obj:`elements` in ascending order.

    Args:
        elements: The elements to hash. Each must be hashable.

    Returns:
        List[int]: The sorted, de-duplicated element hashes.

    Raises:
        TypeError: If any of the elements is unhashable.

    """
    codes = np.fromiter((hash(e) for e in elements), dtype=np.int64)
    return np.unique(codes).tolist()


def fold_hash_codes(sorted_codes: Iterable[int]) -> int:
    """Folds a sequence of hash codes into a single signature.

    The accumulator wraps around to a signed integer of :attr:`HASH_WIDTH` bits after every step, so the result is
    always a valid native hash value.

    """
    code = 0
    for element_code in sorted_codes:
        code = _wrap((code * HASH_MULTIPLIER) ^ element_code)
    return code


def content_hash(elements: Iterable[Hashable]) -> int:
    """Calculates an order-independent hash of a collection of unique elements.

    This is equivalent to::

        fold_hash_codes(canonical_hash_codes(elements))

    """
    return fold_hash_codes(canonical_hash_codes(elements))
