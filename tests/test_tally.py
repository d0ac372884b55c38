"""Unit tests for app.services.tally."""

import unittest
from types import SimpleNamespace

from app.services.tally import RATING_BUCKETS, tally


def _reviews(*ratings: int) -> list[SimpleNamespace]:
    return [SimpleNamespace(rating=r) for r in ratings]


class TestTally(unittest.TestCase):
    def test_counts_per_bucket(self) -> None:
        self.assertEqual(tally(_reviews(5, 5, 4, 1)), {1: 1, 2: 0, 3: 0, 4: 1, 5: 2})

    def test_empty_sequence_has_all_buckets_at_zero(self) -> None:
        self.assertEqual(tally([]), {1: 0, 2: 0, 3: 0, 4: 0, 5: 0})

    def test_out_of_range_ratings_are_ignored(self) -> None:
        counts = tally(_reviews(0, 6, -1, 3))
        self.assertEqual(counts, {1: 0, 2: 0, 3: 1, 4: 0, 5: 0})
        self.assertEqual(tuple(counts), RATING_BUCKETS)

    def test_order_does_not_matter(self) -> None:
        self.assertEqual(tally(_reviews(1, 2, 2, 5)), tally(_reviews(5, 2, 1, 2)))

    def test_accepts_generator(self) -> None:
        counts = tally(SimpleNamespace(rating=r) for r in (3, 3, 3))
        self.assertEqual(counts[3], 3)


if __name__ == "__main__":
    unittest.main()
