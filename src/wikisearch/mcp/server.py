"""wikisearch MCP server entrypoint using FastMCP.

Exposes boolean search over the configured term index as MCP tools.
Run with:
  - wikisearch-mcp
  - or: python -m wikisearch.mcp.server (ensure PYTHONPATH includes ./src)
"""
from __future__ import annotations

import logging
from typing import Optional

from fastmcp import FastMCP

from wikisearch.config import Settings, load_settings
from wikisearch.index import TermIndex, make_index
from wikisearch.mcp.tools import register_search_tools

logger = logging.getLogger(__name__)


class AppState:
    """Application state shared by MCP tools."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.index: Optional[TermIndex] = None

    def init_index(self) -> None:
        """Initialize the term index from configuration."""
        self.index = make_index(self.settings)
        logger.info("Using %s term index", self.settings.index.backend)


# Global state and server instance
_state: Optional[AppState] = None
mcp = FastMCP("wikisearch MCP Server")


# ----- Tools -----

@mcp.tool
def health() -> str:
    """Simple health check tool."""
    return "ok"


# ----- Entrypoint -----

def main() -> None:
    """Initialize state and run the MCP server."""
    global _state
    settings = load_settings()
    logging.basicConfig(level=settings.app.log_level)
    _state = AppState(settings)
    _state.init_index()
    register_search_tools(mcp, get_state=lambda: _state)
    # Choose transport based on configuration: stdio (default), http, or sse
    transport = settings.app.transport
    if transport in ("http", "sse"):
        logger.info(
            "Running server with %s transport on %s:%s", transport, settings.app.host, settings.app.port
        )
        mcp.run(transport=transport, host=settings.app.host, port=settings.app.port)
    else:
        mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
