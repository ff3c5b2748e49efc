import random
from unittest import TestCase

from valueset.hashing import HASH_MULTIPLIER, HASH_WIDTH, canonical_hash_codes, content_hash, fold_hash_codes


class TestHashing(TestCase):
    def test_empty(self):
        self.assertEqual([], canonical_hash_codes(()))
        self.assertEqual(0, content_hash(()))

    def test_canonical_codes_are_sorted_and_unique(self):
        self.assertEqual([1, 2, 3], canonical_hash_codes([3, 1, 2, 3, 1]))
        self.assertEqual([-5, 0, 5], canonical_hash_codes([5, 0, -5]))

    def test_fold(self):
        self.assertEqual(1, fold_hash_codes([1]))
        self.assertEqual((1 * HASH_MULTIPLIER) ^ 2, fold_hash_codes([1, 2]))
        self.assertEqual((((1 * HASH_MULTIPLIER) ^ 2) * HASH_MULTIPLIER) ^ 3, content_hash([2, 3, 1]))

    def test_fold_wraps(self):
        limit = 1 << (HASH_WIDTH - 1)
        codes = canonical_hash_codes(range(1000))
        h = fold_hash_codes(codes)
        self.assertGreaterEqual(h, -limit)
        self.assertLess(h, limit)
        self.assertEqual(h, content_hash(reversed(range(1000))))

    def test_extreme_element_hashes(self):
        limit = 1 << (HASH_WIDTH - 1)

        class Extreme:
            def __init__(self, h):
                self.h = h

            def __hash__(self):
                return self.h

        extremes = [Extreme(-limit + 1), Extreme(limit - 1), Extreme(0)]
        self.assertEqual([-limit + 1, 0, limit - 1], canonical_hash_codes(extremes))

    def test_order_independence(self):
        elements = [f"element{i}" for i in range(100)]
        expected = content_hash(elements)
        for _ in range(20):
            random.shuffle(elements)
            self.assertEqual(expected, content_hash(elements))

    def test_multiplier(self):
        self.assertEqual(397, HASH_MULTIPLIER)
