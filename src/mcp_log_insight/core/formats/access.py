"""Apache/Nginx access log parser (Common/Combined format)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..models import LogEntry, LogLevel
from .base import LineSpan

_DIGITS_RE = re.compile(r"[0-9]+")
_QUOTED_RE = re.compile(r'"([^"]*)"')
# Longer digit runs are junk, not a status or size; they read as 0.
_MAX_NUMBER_DIGITS = 18


def _to_int(digits: str) -> int:
    return int(digits) if len(digits) <= _MAX_NUMBER_DIGITS else 0


@dataclass(frozen=True, slots=True)
class AccessLogParser:
    """Positional parser for `ip - - [ts] "METHOD url proto" status size "ref" "ua"`.

    The whole line is kept as the message. Level comes from the HTTP status.
    """

    @staticmethod
    def level_from_status(status: int) -> LogLevel:
        """Map HTTP status codes to a severity."""
        if status >= 500:
            return LogLevel.ERROR
        if status >= 400:
            return LogLevel.WARNING
        return LogLevel.INFO

    @staticmethod
    def _split_request(request: str) -> tuple[str, str]:
        """Return (method, url) from the quoted request; protocol is dropped."""
        method_end = request.find(" ")
        if method_end == -1:
            return "", ""
        url_end = request.find(" ", method_end + 1)
        if url_end == -1:
            return request[:method_end], ""
        return request[:method_end], request[method_end + 1 : url_end]

    def parse(self, span: LineSpan) -> LogEntry:
        """Parse an access-log line into a LogEntry."""
        line = span.text
        fields: dict = {}

        ip_end = line.find(" ")
        if ip_end != -1:
            fields["ip_address"] = line[:ip_end]

            ts_start = line.find("[")
            ts_end = line.find("]", ts_start + 1) if ts_start != -1 else -1
            if ts_start != -1 and ts_end != -1:
                fields["timestamp"] = line[ts_start + 1 : ts_end]

            req_start = line.find('"')
            req_end = line.find('"', req_start + 1) if req_start != -1 else -1
            if req_end != -1:
                method, url = self._split_request(line[req_start + 1 : req_end])
                fields["http_method"] = method
                fields["url"] = url

                after = line[req_end + 1 :]
                m = _DIGITS_RE.search(after)
                if m:
                    status = _to_int(m.group())
                    fields["http_status"] = status
                    fields["level"] = self.level_from_status(status)

                    rest = after[m.end() :]
                    size = _DIGITS_RE.match(rest.lstrip(" "))
                    if size:
                        fields["response_size"] = _to_int(size.group())

                    quoted = _QUOTED_RE.findall(rest)
                    if len(quoted) >= 1:
                        fields["referer"] = quoted[0]
                    if len(quoted) >= 2:
                        fields["user_agent"] = quoted[1]

        return LogEntry(
            line_start=span.start,
            line_end=span.end,
            line_number=span.line_number,
            message=line,
            **fields,
        )
