"""Severity classification helpers.

Two flavours live here: exact token lookup (``classify_level``) used when a
parser has isolated a level word, and the looser substring scans the syslog
and generic parsers run over whole messages. Keyword order is significant.
"""

from __future__ import annotations

from collections.abc import Sequence

from .models import LogLevel

_LEVEL_ALIASES: dict[str, LogLevel] = {
    "TRACE": LogLevel.TRACE,
    "TRC": LogLevel.TRACE,
    "DEBUG": LogLevel.DEBUG,
    "DBG": LogLevel.DEBUG,
    "DEBU": LogLevel.DEBUG,
    "INFO": LogLevel.INFO,
    "INF": LogLevel.INFO,
    "INFORMATION": LogLevel.INFO,
    "NOTICE": LogLevel.INFO,
    "WARN": LogLevel.WARNING,
    "WARNING": LogLevel.WARNING,
    "WRN": LogLevel.WARNING,
    "ERROR": LogLevel.ERROR,
    "ERR": LogLevel.ERROR,
    "ERRO": LogLevel.ERROR,
    "FATAL": LogLevel.FATAL,
    "FTL": LogLevel.FATAL,
    "CRIT": LogLevel.FATAL,
    "CRITICAL": LogLevel.FATAL,
}

SYSLOG_KEYWORDS: Sequence[tuple[LogLevel, Sequence[str]]] = (
    (LogLevel.ERROR, ("ERROR", "FAIL")),
    (LogLevel.WARNING, ("WARN",)),
    (LogLevel.DEBUG, ("DEBUG",)),
)

GENERIC_KEYWORDS: Sequence[tuple[LogLevel, Sequence[str]]] = (
    (LogLevel.FATAL, ("FATAL", "CRITICAL")),
    (LogLevel.ERROR, ("ERROR", "EXCEPTION", "FAIL")),
    (LogLevel.WARNING, ("WARN",)),
    (LogLevel.DEBUG, ("DEBUG",)),
    (LogLevel.TRACE, ("TRACE",)),
    (LogLevel.INFO, ("INFO",)),
)

_LEVEL_COLORS: dict[LogLevel, str] = {
    LogLevel.TRACE: "gray",
    LogLevel.DEBUG: "aqua",
    LogLevel.INFO: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.FATAL: "magenta",
    LogLevel.CRITICAL: "magenta",
}


def classify_level(token: str) -> LogLevel:
    """Map a level word (any case) to a LogLevel; UNKNOWN when unrecognized."""
    return _LEVEL_ALIASES.get(token.upper(), LogLevel.UNKNOWN)


def scan_level(
    text: str,
    keywords: Sequence[tuple[LogLevel, Sequence[str]]],
    *,
    default: LogLevel = LogLevel.UNKNOWN,
) -> LogLevel:
    """Return the first level whose keywords occur anywhere in ``text``."""
    upper = text.upper()
    for level, keys in keywords:
        if any(k in upper for k in keys):
            return level
    return default


def level_name(level: LogLevel) -> str:
    return level.value


def level_color(level: LogLevel) -> str:
    """Color class used by display layers for a severity."""
    return _LEVEL_COLORS.get(level, "white")
