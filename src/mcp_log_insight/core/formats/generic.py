"""Fallback parser for files that match no known dialect."""

from __future__ import annotations

from dataclasses import dataclass

from ..levels import GENERIC_KEYWORDS, scan_level
from ..models import LogEntry
from .base import LineSpan


def _extract_timestamp(line: str) -> str:
    """Return a `[bracketed]` prefix or an ISO-like date/datetime prefix."""
    if line.startswith("["):
        end = line.find("]")
        return line[1:end] if end != -1 else ""

    if len(line) >= 10 and line[4] == "-" and line[7] == "-":
        ts_end = 10
        if len(line) > 19 and line[10] == " " and line[13] == ":":
            ts_end = 19
            if len(line) > 23 and line[19] in ".,":
                ts_end = 23
        return line[:ts_end]

    return ""


@dataclass(frozen=True, slots=True)
class GenericParser:
    """Keep the whole line as the message; guess timestamp and level loosely."""

    def parse(self, span: LineSpan) -> LogEntry:
        """Parse an arbitrary line into a LogEntry."""
        line = span.text
        return LogEntry(
            line_start=span.start,
            line_end=span.end,
            line_number=span.line_number,
            timestamp=_extract_timestamp(line),
            level=scan_level(line, GENERIC_KEYWORDS),
            message=line,
        )
