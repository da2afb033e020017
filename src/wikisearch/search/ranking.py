"""Rank ordering of result sets.

Scores are ordered ascending by default (lowest relevance first), matching the
historical presentation of this search. Ties are broken by identifier so that
the same results always render in the same order.
"""

from __future__ import annotations

from typing import List, Tuple

from .result_set import ResultSet

RankedEntry = Tuple[str, int]


def sorted_by_relevance(results: ResultSet, *, descending: bool = False) -> List[RankedEntry]:
    """Return a fresh list of (identifier, score) pairs ordered by score.

    Parameters
    ----------
    results: ResultSet
        The results to rank.
    descending: bool
        If True, highest scores come first. Equal scores are always ordered by
        ascending identifier, regardless of direction.
    """
    if descending:
        return sorted(results.items(), key=lambda entry: (-entry[1], entry[0]))
    return sorted(results.items(), key=lambda entry: (entry[1], entry[0]))


def top_ranked(results: ResultSet, k: int, *, descending: bool = True) -> List[RankedEntry]:
    """Return at most `k` entries of the ranking (best first unless `descending=False`)."""
    if k <= 0:
        return []
    return sorted_by_relevance(results, descending=descending)[:k]
