"""Log4j/Log4net style parser."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..levels import classify_level
from ..models import LogEntry, LogLevel
from .base import LineSpan

# Checked in this order; the first token found near the start wins, even when
# a later token would match at an earlier position.
LEVEL_TOKENS: Sequence[str] = (
    "TRACE",
    "DEBUG",
    "INFO",
    "WARN",
    "WARNING",
    "ERROR",
    "FATAL",
    "CRITICAL",
)
_LEVEL_WINDOW = 20
_MESSAGE_MARKER = " - "


def leading_timestamp_end(line: str) -> int:
    """Length of a `YYYY-MM-DD HH:MM:SS[.mmm]` prefix, or 0 if there is none."""
    if len(line) < 19 or line[4] not in "-/" or line[7] not in "-/":
        return 0
    if len(line) > 23 and line[19] in ".,":
        return 23
    return 19


@dataclass(frozen=True, slots=True)
class Log4jParser:
    """Parse `timestamp LEVEL [logger] - message` and `timestamp [LEVEL] logger - message`."""

    level_tokens: Sequence[str] = LEVEL_TOKENS

    def parse(self, span: LineSpan) -> LogEntry:
        """Parse a Log4j-style line into a LogEntry."""
        line = span.text
        ts_end = leading_timestamp_end(line)
        remaining = line[ts_end:]

        level = LogLevel.UNKNOWN
        source = ""
        message = ""
        for token in self.level_tokens:
            pos = remaining.find(token)
            if pos == -1 or pos >= _LEVEL_WINDOW:
                continue

            level = classify_level(token)
            after_level = pos + len(token)
            marker = remaining.find(_MESSAGE_MARKER, pos)
            if marker != -1:
                source = remaining[after_level:marker].lstrip(" [").rstrip(" ]")
                message = remaining[marker + len(_MESSAGE_MARKER) :]
            else:
                message = remaining[after_level:]
            break

        return LogEntry(
            line_start=span.start,
            line_end=span.end,
            line_number=span.line_number,
            timestamp=line[:ts_end],
            level=level,
            source=source,
            message=message or line,
        )
