"""Term index implementations consumed by the search core."""

from __future__ import annotations

from wikisearch.config import Settings
from wikisearch.exceptions import ConfigError

from .base import TermIndex
from .memory import InMemoryIndex
from .redis_index import RedisIndex


def make_index(settings: Settings) -> TermIndex:
    """Build the term index selected by `settings.index.backend`."""
    cfg = settings.index
    if cfg.backend == "redis":
        if not cfg.redis_url:
            raise ConfigError(
                "Redis index backend selected but no URL set. Set WIKISEARCH_INDEX__REDIS_URL."
            )
        return RedisIndex.from_url(
            cfg.redis_url, prefix=cfg.key_prefix, socket_timeout=cfg.socket_timeout
        )
    if not cfg.counts_path:
        raise ConfigError(
            "Memory index backend selected but no counts file set. "
            "Set WIKISEARCH_INDEX__COUNTS_PATH."
        )
    try:
        return InMemoryIndex.from_json(cfg.counts_path)
    except (OSError, ValueError) as exc:
        raise ConfigError(f"Cannot load term counts from {cfg.counts_path}: {exc}") from exc


__all__ = ["TermIndex", "InMemoryIndex", "RedisIndex", "make_index"]
