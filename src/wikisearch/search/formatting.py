"""Plain-text rendering of ranked results for terminals and logs."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple


def format_results(entries: Iterable[Tuple[str, int]]) -> str:
    """Render ranked entries as one `identifier=score` line each."""
    return "\n".join(f"{doc_id}={score}" for doc_id, score in entries)


def serialize_results(entries: Iterable[Tuple[str, int]]) -> List[Dict[str, Any]]:
    return [{"url": doc_id, "relevance": score} for doc_id, score in entries]
