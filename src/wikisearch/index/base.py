"""Term-index boundary.

The search core never talks to a storage technology directly. It depends on
this one-method protocol, and callers inject whichever implementation they
have (Redis, in-memory, a remote service, a test fake).
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class TermIndex(Protocol):
    """Resolves a term to the documents containing it."""

    def get_counts(self, term: str) -> Mapping[str, int]:
        """Return {identifier: occurrence count} for every document containing `term`.

        Implementations return an empty mapping when the term has no matches and
        should raise `wikisearch.exceptions.IndexLookupError` when the lookup fails.
        """
        ...
