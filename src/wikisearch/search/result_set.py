"""Immutable search results and the boolean algebra over them.

A `ResultSet` maps document identifiers (typically URLs) to an integer
relevance score. Results for single terms are combined with `union` (OR),
`intersect` (AND) and `difference` (AND NOT); each combination returns a new
`ResultSet` and leaves both operands untouched.

Whenever both operands score the same identifier, the scores are merged by
`ResultSet.total_relevance`. Subclasses may override that single hook to
change the ranking formula without touching the set logic.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional


def total_relevance(first: int, second: int) -> int:
    """Combine two scores for the same document: relevance is the sum of term frequencies."""
    return first + second


class ResultSet(Mapping):
    """Read-only mapping from document identifier to relevance score.

    The constructor copies its input, so a `ResultSet` never shares storage
    with the mapping it was built from or with the operands it was combined from.
    """

    __slots__ = ("_scores",)

    total_relevance = staticmethod(total_relevance)

    def __init__(self, scores: Optional[Mapping[str, int]] = None) -> None:
        self._scores: Dict[str, int] = dict(scores or {})

    @classmethod
    def empty(cls) -> ResultSet:
        return cls()

    # --------------------------- mapping protocol ----------------------------
    def __getitem__(self, doc_id: str) -> int:
        return self._scores[doc_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._scores

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._scores!r})"

    # ------------------------------ accessors --------------------------------
    def relevance(self, doc_id: str) -> int:
        """Return the score for `doc_id`, or 0 if it is not part of the results."""
        return self._scores.get(doc_id, 0)

    def to_dict(self) -> Dict[str, int]:
        """Return an independent plain-dict copy of the scores."""
        return dict(self._scores)

    # ------------------------------- algebra ---------------------------------
    def union(self, other: ResultSet) -> ResultSet:
        """Documents found in either result set (OR).

        Documents in both get the combined relevance; the rest keep their own score.
        """
        scores = dict(self._scores)
        for doc_id, score in other.items():
            if doc_id in scores:
                scores[doc_id] = self.total_relevance(scores[doc_id], score)
            else:
                scores[doc_id] = score
        return self._derive(scores)

    def intersect(self, other: ResultSet) -> ResultSet:
        """Documents found in both result sets (AND), with combined relevance."""
        scores = {
            doc_id: self.total_relevance(score, other[doc_id])
            for doc_id, score in self._scores.items()
            if doc_id in other
        }
        return self._derive(scores)

    def difference(self, other: ResultSet) -> ResultSet:
        """Documents in this result set that are absent from `other` (AND NOT)."""
        scores = {
            doc_id: score for doc_id, score in self._scores.items() if doc_id not in other
        }
        return self._derive(scores)

    def __or__(self, other: Any) -> ResultSet:
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: Any) -> ResultSet:
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other: Any) -> ResultSet:
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self.difference(other)

    def _derive(self, scores: Dict[str, int]) -> ResultSet:
        # Keep the left operand's class so an overridden aggregation policy carries through
        return type(self)(scores)
