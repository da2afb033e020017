"""Search result algebra, ranking, and boolean query evaluation."""

from .formatting import format_results, serialize_results
from .query import evaluate_query, normalize_term, parse_query, search
from .ranking import sorted_by_relevance, top_ranked
from .result_set import ResultSet, total_relevance

__all__ = [
    "ResultSet",
    "total_relevance",
    "sorted_by_relevance",
    "top_ranked",
    "search",
    "parse_query",
    "normalize_term",
    "evaluate_query",
    "format_results",
    "serialize_results",
]
