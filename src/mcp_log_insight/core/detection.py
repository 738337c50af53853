"""Whole-file dialect sniffing.

Looks only at the first ``sample_bytes`` of the content. Checks run in a fixed
priority order and the first match wins.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import LogFormat

DEFAULT_SAMPLE_BYTES = 4096

_APACHE_MARKER = b" - - ["
_APACHE_HINTS: Sequence[bytes] = (b'" 200 ', b'" 404 ', b'" 500 ', b"GET ", b"POST ")
_APACHE_ERROR_HINTS: Sequence[bytes] = (b"[error]", b"[warn]", b"[notice]", b"[crit]")
_SYSLOG_MONTHS: Sequence[bytes] = (
    b"Jan ",
    b"Feb ",
    b"Mar ",
    b"Apr ",
    b"May ",
    b"Jun ",
    b"Jul ",
    b"Aug ",
    b"Sep ",
    b"Oct ",
    b"Nov ",
    b"Dec ",
)
_SYSLOG_TAG_END = b"]: "
_LOG4J_LEVELS: Sequence[bytes] = (
    b" INFO ",
    b" DEBUG ",
    b" ERROR ",
    b" WARN ",
    b"[INFO]",
    b"[DEBUG]",
    b"[ERROR]",
    b"[WARN]",
)
_LOG4J_SEPARATOR = b" - "
_JSON_OPEN = b'{"'
_JSON_KEYS: Sequence[bytes] = (b'"timestamp"', b'"level"', b'"message"')

_DISPLAY_NAMES: dict[LogFormat, str] = {
    LogFormat.APACHE: "Apache/Nginx Access Log",
    LogFormat.APACHE_ERROR: "Apache/Nginx Error Log",
    LogFormat.SYSLOG: "Syslog",
    LogFormat.WINDOWS_EVENT: "Windows Event Log",
    LogFormat.IIS: "IIS Log",
    LogFormat.LOG4J: "Log4j/Log4net",
    LogFormat.JSON: "JSON Structured Log",
    LogFormat.CUSTOM: "Generic/Custom",
}


def _has_any(sample: bytes, needles: Sequence[bytes]) -> bool:
    return any(n in sample for n in needles)


def detect_format(content: bytes, *, sample_bytes: int = DEFAULT_SAMPLE_BYTES) -> LogFormat:
    """Guess the dialect of ``content``; never fails, CUSTOM is the fallback."""
    sample = content[:sample_bytes]

    if _APACHE_MARKER in sample and _has_any(sample, _APACHE_HINTS):
        return LogFormat.APACHE
    if _has_any(sample, _APACHE_ERROR_HINTS):
        return LogFormat.APACHE_ERROR
    if _has_any(sample, _SYSLOG_MONTHS) and _SYSLOG_TAG_END in sample:
        return LogFormat.SYSLOG
    if _has_any(sample, _LOG4J_LEVELS) and _LOG4J_SEPARATOR in sample:
        return LogFormat.LOG4J
    if _JSON_OPEN in sample and _has_any(sample, _JSON_KEYS):
        return LogFormat.JSON
    return LogFormat.CUSTOM


def format_display_name(fmt: LogFormat) -> str:
    """Human-readable dialect name for summaries and legends."""
    return _DISPLAY_NAMES.get(fmt, "Unknown")
