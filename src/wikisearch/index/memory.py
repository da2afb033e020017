"""In-memory term index over a precomputed term -> document counts table."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Mapping


class InMemoryIndex:
    """Serves counts from a nested mapping; nothing is tokenized or built here."""

    def __init__(self, counts: Mapping[str, Mapping[str, int]] | None = None) -> None:
        self._counts: Dict[str, Dict[str, int]] = {
            term: dict(docs) for term, docs in (counts or {}).items()
        }

    @classmethod
    def from_json(cls, path: Path) -> InMemoryIndex:
        """Load a ``{"term": {"url": count}}`` JSON file.

        Raises `OSError` if the file cannot be read and `ValueError` if it is not
        valid JSON of that shape.
        """
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected an object of term -> {{url: count}}")
        counts: Dict[str, Dict[str, int]] = {}
        for term, docs in data.items():
            if not isinstance(docs, dict):
                raise ValueError(f"{path}: counts for term {term!r} must be an object")
            for url, count in docs.items():
                if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                    raise ValueError(
                        f"{path}: count for {term!r} in {url} must be a non-negative integer"
                    )
            counts[term] = docs
        return cls(counts)

    def get_counts(self, term: str) -> Dict[str, int]:
        return dict(self._counts.get(term, {}))
