"""BSD-style syslog parser."""

from __future__ import annotations

from dataclasses import dataclass

from ..levels import SYSLOG_KEYWORDS, scan_level
from ..models import LogEntry, LogLevel
from .base import LineSpan

# "Mon DD HH:MM:SS" is assumed to be fixed width; it is not validated.
_TIMESTAMP_WIDTH = 15


@dataclass(frozen=True, slots=True)
class SyslogParser:
    """Parse `Mon DD HH:MM:SS host process[pid]: message` lines.

    Severity is inferred from keywords in the message and defaults to INFO.
    """

    def parse(self, span: LineSpan) -> LogEntry:
        """Parse a syslog line into a LogEntry."""
        line = span.text
        timestamp = line[:_TIMESTAMP_WIDTH] if len(line) >= _TIMESTAMP_WIDTH else ""
        source = ""
        message = line

        colon = line.find(": ")
        if colon > _TIMESTAMP_WIDTH:
            # drop the hostname, keep the process tag
            tag = line[_TIMESTAMP_WIDTH + 1 : colon]
            space = tag.find(" ")
            if space != -1:
                source = tag[space + 1 :]
            message = line[colon + 2 :] or line

        return LogEntry(
            line_start=span.start,
            line_end=span.end,
            line_number=span.line_number,
            timestamp=timestamp,
            level=scan_level(message, SYSLOG_KEYWORDS, default=LogLevel.INFO),
            source=source,
            message=message,
        )
