"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: callable actions (analyze, tokenize, extract errors)
- Resources: addressable data blobs (token legend, raw log via URI)
- Prompts: reusable conversation templates that clients can invoke

Run locally (stdio):
    python -m mcp_log_insight.server.log_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_log_insight.prompts.registry import register_prompts
from mcp_log_insight.resources.registry import register_resources
from mcp_log_insight.tools.analyze import (
    analyze_log_impl,
    extract_errors_impl,
    tokenize_log_impl,
)

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv("LOG_INSIGHT_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("log-insight", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
async def analyze_log(
    log_path: str,
    levels: Sequence[str] | None = None,
    limit: int = 200,
    include_tokens: bool = False,
) -> dict[str, Any]:
    """Detect the format of a log file, parse it and return entries plus statistics.

    Parameters
    ----------
    log_path:
        Path to a local log file. Only the first 50 MiB are parsed.
    levels:
        Filter returned entries by severity names (e.g., ["error", "warning"]).
        Case-insensitive. Statistics always cover the whole file.
    limit:
        Maximum number of entries returned (hard-capped in the implementation).
    include_tokens:
        Also return highlighting tokens (type, name, span, color, text), capped by ``limit``.

    Returns
    -------
    dict:
        {"summary": dict, "truncated": bool, "statistics": dict, "count": int, "entries": list[dict], "tokens"?: list[dict]}
    """
    return await analyze_log_impl(
        log_path=log_path,
        levels=list(levels) if levels else None,
        limit=limit,
        include_tokens=include_tokens,
    )


@mcp.tool()
async def tokenize_log(log_path: str, limit: int | None = None) -> dict[str, Any]:
    """Return classified highlighting spans (timestamps, IPs, levels, strings...) for a log file."""
    return await tokenize_log_impl(log_path=log_path, limit=limit)


@mcp.tool()
async def extract_errors(log_path: str) -> dict[str, Any]:
    """Return the raw lines of every warning, error and fatal entry as one text block."""
    return await extract_errors_impl(log_path=log_path)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
