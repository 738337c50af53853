"""Per-dialect line parsers.

Exactly one parser runs over a file, chosen from the detected format.
"""

from __future__ import annotations

from ..models import LogEntry, LogFormat
from .access import AccessLogParser
from .base import LineParser, LineSpan, iter_lines, parse_lines
from .generic import GenericParser
from .log4j import Log4jParser
from .syslog import SyslogParser

__all__ = [
    "AccessLogParser",
    "GenericParser",
    "LineParser",
    "LineSpan",
    "Log4jParser",
    "SyslogParser",
    "iter_lines",
    "parse",
    "parser_for",
    "parse_lines",
]


def parser_for(fmt: LogFormat) -> LineParser:
    """Return the parser for a detected format; GENERIC for anything unhandled."""
    if fmt is LogFormat.APACHE:
        return AccessLogParser()
    if fmt is LogFormat.SYSLOG:
        return SyslogParser()
    if fmt is LogFormat.LOG4J:
        return Log4jParser()
    return GenericParser()


def parse(
    content: bytes,
    fmt: LogFormat,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> list[LogEntry]:
    """Parse every non-empty line of ``content`` with the parser for ``fmt``."""
    return parse_lines(content, parser_for(fmt), encoding=encoding, decode_errors=decode_errors)
