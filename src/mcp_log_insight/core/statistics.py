"""Statistics over a parsed entry sequence."""

from __future__ import annotations

from collections.abc import Sequence

from .models import LogEntry, LogLevel, LogStatistics

_LEVEL_FIELDS: dict[LogLevel, str] = {
    LogLevel.TRACE: "trace_count",
    LogLevel.DEBUG: "debug_count",
    LogLevel.INFO: "info_count",
    LogLevel.WARNING: "warning_count",
    LogLevel.ERROR: "error_count",
    LogLevel.FATAL: "fatal_count",
    LogLevel.CRITICAL: "fatal_count",
}


def _http_field(status: int) -> str | None:
    if 200 <= status < 300:
        return "http_2xx_count"
    if 300 <= status < 400:
        return "http_3xx_count"
    if 400 <= status < 500:
        return "http_4xx_count"
    if status >= 500:
        return "http_5xx_count"
    return None


def aggregate(entries: Sequence[LogEntry]) -> LogStatistics:
    """Compute level/HTTP counters and the first/last non-empty timestamps."""
    counts: dict[str, int] = {}
    for e in entries:
        field = _LEVEL_FIELDS.get(e.level, "unknown_count")
        counts[field] = counts.get(field, 0) + 1

        http = _http_field(e.http_status)
        if http is not None:
            counts[http] = counts.get(http, 0) + 1

    first = next((e.timestamp for e in entries if e.timestamp), "")
    last = next((e.timestamp for e in reversed(entries) if e.timestamp), "")

    return LogStatistics(
        total_lines=len(entries),
        first_timestamp=first,
        last_timestamp=last,
        **counts,
    )


def level_breakdown(stats: LogStatistics) -> list[tuple[str, int, float]]:
    """Rows of (level, count, percent of total lines), most severe first."""
    total = stats.total_lines or 1
    rows = (
        ("FATAL", stats.fatal_count),
        ("ERROR", stats.error_count),
        ("WARNING", stats.warning_count),
        ("INFO", stats.info_count),
        ("DEBUG", stats.debug_count),
        ("TRACE", stats.trace_count),
        ("UNKNOWN", stats.unknown_count),
    )
    return [(label, count, count * 100.0 / total) for label, count in rows]


def http_breakdown(stats: LogStatistics) -> list[tuple[str, int, float]]:
    """HTTP status class rows; empty when the file carries no 2xx/4xx/5xx."""
    if not (stats.http_2xx_count or stats.http_4xx_count or stats.http_5xx_count):
        return []
    total = stats.total_lines or 1
    rows = (
        ("2xx (OK)", stats.http_2xx_count),
        ("3xx (Redirect)", stats.http_3xx_count),
        ("4xx (Client)", stats.http_4xx_count),
        ("5xx (Server)", stats.http_5xx_count),
    )
    return [(label, count, count * 100.0 / total) for label, count in rows]
