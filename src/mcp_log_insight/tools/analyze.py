"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict
from typing import Any

from mcp_log_insight.core.document import LogDocument, load_document
from mcp_log_insight.core.levels import level_color
from mcp_log_insight.core.models import LogEntry, LogLevel
from mcp_log_insight.core.statistics import http_breakdown, level_breakdown
from mcp_log_insight.core.tokenizer import Token
from mcp_log_insight.core.transforms import ExtractErrors, FilterByLevel, apply

DEFAULT_LIMIT = 200
HARD_LIMIT = 5000
ALL_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "FATAL", "CRITICAL", "UNKNOWN"]


def _parse_levels(levels: Sequence[str] | None) -> list[LogLevel] | None:
    """Parse user-supplied severity names into LogLevel enums."""
    if not levels:
        return None
    out: list[LogLevel] = []
    for s in levels:
        name = s.strip().upper()
        if not name:
            continue
        try:
            out.append(LogLevel[name])
        except KeyError as e:
            valid = ", ".join(ALL_LEVELS)
            raise ValueError(
                f"Unknown log level '{s}'. Valid values: {valid}. "
                "Tip: levels is case-insensitive (e.g., 'error', 'WARNING')."
            ) from e
    return out or None


def _resolve_limit(limit: int | None) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    return min(limit, HARD_LIMIT)


def _entry_to_dict(entry: LogEntry) -> dict[str, Any]:
    """Convert a LogEntry into a JSON-serializable dict."""
    d: dict[str, Any] = {
        "line_number": entry.line_number,
        "line_start": entry.line_start,
        "line_end": entry.line_end,
        "timestamp": entry.timestamp or None,
        "level": entry.level.name.lower(),
        "message": entry.message,
    }
    if entry.source:
        d["source"] = entry.source
    if entry.ip_address or entry.http_status:
        d["http"] = {
            "ip_address": entry.ip_address,
            "method": entry.http_method,
            "url": entry.url,
            "status": entry.http_status,
            "response_size": entry.response_size,
            "referer": entry.referer,
            "user_agent": entry.user_agent,
        }
    return d


def _token_to_dict(token: Token, text: str) -> dict[str, Any]:
    return {
        "type": int(token.type),
        "name": token.name,
        "start": token.start,
        "end": token.end,
        "color": token.color,
        "text": text[token.start : token.end],
    }


def _statistics_to_dict(doc: LogDocument) -> dict[str, Any]:
    stats = doc.statistics
    return {
        **asdict(stats),
        "levels": [
            {
                "level": label,
                "count": count,
                "percent": round(pct, 1),
                "color": level_color(LogLevel(label)),
            }
            for label, count, pct in level_breakdown(stats)
        ],
        "http": [
            {"class": label, "count": count, "percent": round(pct, 1)}
            for label, count, pct in http_breakdown(stats)
        ],
    }


async def analyze_log_impl(
    *,
    log_path: str,
    levels: list[str] | None = None,
    limit: int | None = DEFAULT_LIMIT,
    include_tokens: bool = False,
) -> dict[str, Any]:
    """Implementation for the `analyze_log` MCP tool.

    Notes
    -----
    - Statistics always cover the whole parsed file; ``levels`` only filters
      the returned entries.
    - ``limit`` caps the number of entries (hard-capped at HARD_LIMIT).
    - ``include_tokens`` adds highlighting tokens, capped by the same ``limit``.
    """
    limit = _resolve_limit(limit)
    sev = _parse_levels(levels)

    doc = await load_document(log_path)
    entries = list(doc.entries) if sev is None else apply(FilterByLevel.of(sev), doc)

    out: dict[str, Any] = {
        "summary": doc.summary().to_context(),
        "truncated": doc.truncated,
        "statistics": _statistics_to_dict(doc),
        "count": len(entries),
        "entries": [_entry_to_dict(e) for e in entries[:limit]],
    }
    if include_tokens:
        text = doc.text()
        out["tokens"] = [_token_to_dict(t, text) for t in doc.tokens()[:limit]]
    return out


async def tokenize_log_impl(*, log_path: str, limit: int | None = None) -> dict[str, Any]:
    """Implementation for the `tokenize_log` MCP tool."""
    limit = _resolve_limit(limit)
    doc = await load_document(log_path)
    text = doc.text()
    tokens = doc.tokens()
    return {
        "count": len(tokens),
        "tokens": [_token_to_dict(t, text) for t in tokens[:limit]],
    }


async def extract_errors_impl(*, log_path: str) -> dict[str, Any]:
    """Implementation for the `extract_errors` MCP tool."""
    doc = await load_document(log_path)
    text = apply(ExtractErrors(), doc)
    return {
        "format": doc.summary().format,
        "line_count": len(text.splitlines()),
        "text": text,
    }
