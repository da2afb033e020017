"""Custom exception hierarchy for wikisearch.

The result algebra itself never raises; these exceptions cover the edges of
the system (configuration, the term index, and query parsing) so callers can
discriminate error categories while preserving the original context.
"""

from __future__ import annotations


class WikiSearchError(Exception):
    """Base class for all wikisearch exceptions."""


class ConfigError(WikiSearchError):
    """Raised when configuration loading or validation fails."""


class IndexLookupError(WikiSearchError):
    """Raised when the term index cannot serve a lookup (connection, protocol, etc.)."""


class SearchError(WikiSearchError):
    """Raised for query issues."""


class QuerySyntaxError(SearchError):
    """Raised when a boolean query string cannot be parsed."""
