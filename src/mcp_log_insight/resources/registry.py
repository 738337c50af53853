"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from mcp_log_insight.core.config import resolve_ingest_config
from mcp_log_insight.core.detection import format_display_name
from mcp_log_insight.core.levels import GENERIC_KEYWORDS, SYSLOG_KEYWORDS
from mcp_log_insight.core.models import LogFormat
from mcp_log_insight.core.tokenizer import TokenType, token_type_name

ALLOWED_FILE_SUFFIXES = {".log", ".logs", ".txt"}
BASE_DIR_ENV = "LOG_INSIGHT_BASE_DIR"


def _base_dir() -> Path:
    """Return the resolved base directory for file resources."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def _safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = _base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def _resolve_resource_path(path: str) -> Path:
    """Resolve and validate a resource file path."""
    resolved = _safe_resolve(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"File not found: {resolved}")
    if resolved.suffix.lower() not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return resolved


def _read_capped(path: Path) -> str:
    """Read the parseable prefix of a log file as text."""
    cfg = resolve_ingest_config()
    with path.open("rb") as f:
        data = f.read(cfg.max_parse_bytes)
    return data.decode(cfg.encoding, errors=cfg.decode_errors)


def token_legend() -> dict[str, str]:
    """Token id -> display name."""
    return {str(int(t)): token_type_name(t) for t in TokenType}


def level_keywords() -> dict[str, dict[str, list[str]]]:
    """Keyword priority lists used for substring level inference."""
    return {
        "syslog": {lvl.value: list(keys) for lvl, keys in SYSLOG_KEYWORDS},
        "generic": {lvl.value: list(keys) for lvl, keys in GENERIC_KEYWORDS},
    }


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://log-insight/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        base = _base_dir()
        formats = ", ".join(format_display_name(f) for f in LogFormat if f is not LogFormat.UNKNOWN)
        return (
            "Resources:\n"
            "- app://log-insight/help\n"
            "- app://log-insight/legend/tokens\n"
            "- app://log-insight/config/level-keywords\n"
            "- app://log-insight/examples/sample-log\n"
            f"- log://{{path}} (restricted to {BASE_DIR_ENV}; allowed: {allowed})\n"
            f"\nKnown formats: {formats}\n"
            f"Base directory: {base}\n"
        )

    @mcp.resource("app://log-insight/examples/sample-log")
    def sample_log() -> str:
        """Return a tiny access log for demos and tests."""
        return (
            '127.0.0.1 - - [10/Oct/2023:13:55:36 -0700] "GET /index.html HTTP/1.0" 200 1043\n'
            '10.0.0.7 - - [10/Oct/2023:13:55:40 -0700] "POST /login HTTP/1.1" 401 12\n'
            '10.0.0.9 - - [10/Oct/2023:13:56:02 -0700] "GET /api/items HTTP/1.1" 502 0\n'
        )

    @mcp.resource("app://log-insight/legend/tokens")
    def tokens_legend() -> dict[str, str]:
        """Return the token id legend used by tokenize_log."""
        return token_legend()

    @mcp.resource("app://log-insight/config/level-keywords")
    def keywords() -> dict[str, dict[str, list[str]]]:
        """Return the keyword lists used for level inference."""
        return level_keywords()

    @mcp.resource("log://{path}")
    async def read_log(path: str) -> str:
        """Return the parseable part of a log file within LOG_INSIGHT_BASE_DIR."""
        p = _resolve_resource_path(path)
        return await asyncio.to_thread(_read_capped, p)
