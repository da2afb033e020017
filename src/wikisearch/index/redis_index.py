"""Read-only Redis term index.

Reads the key layout written by the wiki crawler/indexer:

- ``URLSet:<term>``: set of URLs whose page contains the term;
- ``TermCounter:<url>``: hash of term -> occurrence count for that page.

Counts for all URLs of a term are fetched in a single pipeline round trip.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import redis

from wikisearch.exceptions import IndexLookupError

logger = logging.getLogger(__name__)

URL_SET_PREFIX = "URLSet:"
TERM_COUNTER_PREFIX = "TermCounter:"


def _parse_count(url: str, term: str, raw: Any) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-integer count %r for term %r in %s", raw, term, url)
        return None


class RedisIndex:
    """Term index backed by a `redis.Redis` client (expects ``decode_responses=True``)."""

    def __init__(self, client: redis.Redis, *, prefix: str = "") -> None:
        self._client = client
        self.prefix = prefix

    @classmethod
    def from_url(cls, url: str, *, prefix: str = "", socket_timeout: float = 5.0) -> RedisIndex:
        client = redis.Redis.from_url(url, decode_responses=True, socket_timeout=socket_timeout)
        return cls(client, prefix=prefix)

    def url_set_key(self, term: str) -> str:
        return f"{self.prefix}{URL_SET_PREFIX}{term}"

    def term_counter_key(self, url: str) -> str:
        return f"{self.prefix}{TERM_COUNTER_PREFIX}{url}"

    def get_counts(self, term: str) -> Dict[str, int]:
        try:
            urls = sorted(self._client.smembers(self.url_set_key(term)))
            if not urls:
                return {}
            with self._client.pipeline() as pipe:
                for url in urls:
                    pipe.hget(self.term_counter_key(url), term)
                raw_counts = pipe.execute()
        except redis.RedisError as exc:
            raise IndexLookupError(f"Lookup failed for term '{term}': {exc}") from exc

        counts: Dict[str, int] = {}
        for url, raw in zip(urls, raw_counts):
            count = _parse_count(url, term, raw)
            # A zero count is indistinguishable from absence
            if count:
                counts[url] = count
        return counts
