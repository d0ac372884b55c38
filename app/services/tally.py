"""Vote tally: count reviews per rating bucket. Pure; recomputed on every read."""

from collections.abc import Iterable
from typing import Protocol

RATING_BUCKETS = (1, 2, 3, 4, 5)


class _Rated(Protocol):
    rating: int


def tally(reviews: Iterable[_Rated]) -> dict[int, int]:
    """
    Return {rating: count} for buckets 1..5. Every bucket is present, zero if unused.
    Ratings outside 1..5 are ignored.
    """
    counts = dict.fromkeys(RATING_BUCKETS, 0)
    for review in reviews:
        if review.rating in counts:
            counts[review.rating] += 1
    return counts
