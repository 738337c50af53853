"""Core data models for log ingestion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LogLevel(str, Enum):
    """Severity levels recognized by the parsers."""

    UNKNOWN = "UNKNOWN"
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    FATAL = "FATAL"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log dialect chosen once per file by the format detector."""

    UNKNOWN = "unknown"
    APACHE = "apache"
    APACHE_ERROR = "apache_error"
    SYSLOG = "syslog"
    WINDOWS_EVENT = "windows_event"
    IIS = "iis"
    LOG4J = "log4j"
    JSON = "json"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One non-empty source line turned into a structured record.

    ``line_start``/``line_end`` are byte offsets into the source buffer; the
    range excludes the newline but may include a trailing carriage return.
    """

    line_start: int
    line_end: int
    line_number: int
    message: str
    timestamp: str = ""
    level: LogLevel = LogLevel.UNKNOWN
    source: str = ""

    # web server fields
    ip_address: str = ""
    http_method: str = ""
    url: str = ""
    http_status: int = 0  # 0 when not applicable
    response_size: int = 0
    user_agent: str = ""
    referer: str = ""


@dataclass(frozen=True, slots=True)
class LogStatistics:
    """Summary counters derived from a full entry sequence."""

    total_lines: int = 0
    trace_count: int = 0
    debug_count: int = 0
    info_count: int = 0
    warning_count: int = 0
    error_count: int = 0
    fatal_count: int = 0  # includes CRITICAL
    unknown_count: int = 0

    http_2xx_count: int = 0
    http_3xx_count: int = 0
    http_4xx_count: int = 0
    http_5xx_count: int = 0

    first_timestamp: str = ""
    last_timestamp: str = ""
