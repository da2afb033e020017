"""Search tools for FastMCP.

Boolean search over the configured term index. Results are ranked and
serialized here; the search core itself never formats or prints.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

from fastmcp import FastMCP

from wikisearch.index.base import TermIndex
from wikisearch.search import (
    ResultSet,
    evaluate_query,
    format_results,
    normalize_term,
    search,
    serialize_results,
    sorted_by_relevance,
    top_ranked,
)


def register_search_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register search tools on the given FastMCP instance.

    Reads the index from state.index and ranking defaults from state.settings.search.
    """

    def _get_index(state_obj: Any) -> TermIndex:
        index = getattr(state_obj, "index", None)
        if index is None:
            raise RuntimeError(
                "Search index is not configured. Set WIKISEARCH_INDEX__BACKEND "
                "(with WIKISEARCH_INDEX__COUNTS_PATH or WIKISEARCH_INDEX__REDIS_URL)."
            )
        return index

    def _ranked(
        query: str, limit: Optional[int], descending: Optional[bool]
    ) -> List[Tuple[str, int]]:
        state = get_state()
        index = _get_index(state)
        scfg = getattr(getattr(state, "settings", None), "search", None)
        if descending is None:
            descending = bool(getattr(scfg, "descending", False))
        if limit is None:
            limit = int(getattr(scfg, "default_limit", 20))
        results = evaluate_query(query, index)
        # Keep the best hits, then present them in the requested order
        best = top_ranked(results, int(limit), descending=True)
        return sorted_by_relevance(ResultSet(dict(best)), descending=bool(descending))

    @mcp.tool
    def wiki_search(
        query: str,
        limit: Optional[int] = None,
        descending: Optional[bool] = None,
    ) -> List[Dict[str, Any]]:
        """Run a boolean query and return ranked results as {url, relevance} items.

        Parameters
        ----------
        query: str
            Terms combined with AND, OR, NOT and parentheses, e.g.
            "java AND (programming OR language) NOT coffee". Adjacent terms imply AND.
        limit: int | None
            Maximum number of results (default from configuration).
        descending: bool | None
            Order highest relevance first. Defaults to the configured order
            (ascending unless WIKISEARCH_SEARCH__DESCENDING is set).
        """
        return serialize_results(_ranked(query, limit, descending))

    @mcp.tool
    def wiki_search_text(
        query: str,
        limit: Optional[int] = None,
        descending: Optional[bool] = None,
    ) -> str:
        """Same as wiki_search, rendered as plain `url=relevance` lines."""
        return format_results(_ranked(query, limit, descending))

    @mcp.tool
    def wiki_term_counts(term: str) -> Dict[str, int]:
        """Return raw occurrence counts per URL for a single term.

        The term is lower-cased and trimmed of punctuation, as in wiki_search.
        """
        state = get_state()
        return search(normalize_term(term), _get_index(state)).to_dict()

    @mcp.tool
    def wiki_relevance(query: str, url: str) -> Dict[str, Any]:
        """Return the relevance of one URL for a boolean query (0 if it does not match)."""
        state = get_state()
        results = evaluate_query(query, _get_index(state))
        return {"url": url, "relevance": results.relevance(url)}
