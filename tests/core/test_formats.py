from __future__ import annotations

from mcp_log_insight.core.document import LogDocument
from mcp_log_insight.core.formats import (
    AccessLogParser,
    GenericParser,
    LineSpan,
    Log4jParser,
    SyslogParser,
    iter_lines,
    parse,
    parser_for,
)
from mcp_log_insight.core.models import LogFormat, LogLevel


def _span(line: str, line_number: int = 1) -> LineSpan:
    return LineSpan(line_number=line_number, start=0, end=len(line), text=line)


def test_iter_lines_offsets_and_blank_lines() -> None:
    spans = list(iter_lines(b"a\r\n\r\nb\n\nc"))
    assert [s.line_number for s in spans] == [1, 3, 5]
    assert [s.text for s in spans] == ["a", "b", "c"]
    assert [(s.start, s.end) for s in spans] == [(0, 2), (5, 6), (8, 9)]


def test_iter_lines_trailing_newline() -> None:
    spans = list(iter_lines(b"only\n"))
    assert len(spans) == 1
    assert spans[0].text == "only"


def test_access_log_parser_combined() -> None:
    line = '127.0.0.1 - - [10/Oct/2023:13:55:36 -0700] "GET /index.html HTTP/1.0" 200 1043'
    entry = AccessLogParser().parse(_span(line))
    assert entry.ip_address == "127.0.0.1"
    assert entry.timestamp == "10/Oct/2023:13:55:36 -0700"
    assert entry.http_method == "GET"
    assert entry.url == "/index.html"
    assert entry.http_status == 200
    assert entry.response_size == 1043
    assert entry.level == LogLevel.INFO
    assert entry.message == line


def test_access_log_parser_referer_and_agent() -> None:
    line = '10.0.0.7 - - [10/Oct/2023:13:55:40 -0700] "POST /login HTTP/1.1" 404 512 "http://ref/" "Mozilla/5.0"'
    entry = AccessLogParser().parse(_span(line))
    assert entry.level == LogLevel.WARNING
    assert entry.http_status == 404
    assert entry.referer == "http://ref/"
    assert entry.user_agent == "Mozilla/5.0"


def test_access_log_parser_status_levels() -> None:
    assert AccessLogParser.level_from_status(503) == LogLevel.ERROR
    assert AccessLogParser.level_from_status(400) == LogLevel.WARNING
    assert AccessLogParser.level_from_status(302) == LogLevel.INFO


def test_access_log_parser_degrades_gracefully() -> None:
    entry = AccessLogParser().parse(_span("garbage line here"))
    assert entry.ip_address == "garbage"
    assert entry.timestamp == ""
    assert entry.http_status == 0
    assert entry.level == LogLevel.UNKNOWN
    assert entry.message == "garbage line here"

    entry = AccessLogParser().parse(_span("single"))
    assert entry.ip_address == ""
    assert entry.message == "single"


def test_access_log_parser_oversized_numbers_read_as_zero() -> None:
    line = '1.2.3.4 - - [x] "GET / HTTP/1.0" ' + "9" * 5000 + " " + "7" * 40
    entry = AccessLogParser().parse(_span(line))
    assert entry.http_status == 0
    assert entry.response_size == 0
    assert entry.level == LogLevel.INFO
    assert entry.url == "/"


def test_access_log_parser_oversized_status_does_not_abort_document() -> None:
    data = (
        '10.0.0.1 - - [10/Oct/2023:13:55:36 -0700] "GET /a HTTP/1.0" 200 5\n'
        + '10.0.0.2 - - [x] "GET /b HTTP/1.0" '
        + "9" * 5000
        + "\n"
    ).encode()
    doc = LogDocument("access.log", data)
    assert doc.update() is True
    assert [e.http_status for e in doc.entries] == [200, 0]


def test_access_log_parser_status_is_ascii_digits_only() -> None:
    line = '127.0.0.1 - - [x] "GET / HTTP/1.0" \u0662\u0660\u0660 5'
    entry = AccessLogParser().parse(_span(line))
    assert entry.http_status == 5
    assert entry.level == LogLevel.INFO


def test_access_log_parser_first_bracket_pair() -> None:
    line = '10.0.0.1 x] - [10/Oct/2023:13:55:36 -0700] "GET / HTTP/1.0" 404 0'
    entry = AccessLogParser().parse(_span(line))
    assert entry.timestamp == "10/Oct/2023:13:55:36 -0700"
    assert entry.level == LogLevel.WARNING


def test_syslog_parser() -> None:
    line = "Jan 12 06:25:24 myhost sshd[1234]: Failed password for root"
    entry = SyslogParser().parse(_span(line))
    assert entry.timestamp == "Jan 12 06:25:24"
    assert entry.source == "sshd[1234]"
    assert entry.message == "Failed password for root"
    assert entry.level == LogLevel.ERROR


def test_syslog_parser_level_from_message() -> None:
    entry = SyslogParser().parse(_span("Jan 12 06:25:24 myhost kernel: warning: low memory"))
    assert entry.source == "kernel"
    assert entry.message == "warning: low memory"
    assert entry.level == LogLevel.WARNING


def test_syslog_parser_without_tag() -> None:
    line = "Jan 12 06:25:24 myhost plain text"
    entry = SyslogParser().parse(_span(line))
    assert entry.timestamp == "Jan 12 06:25:24"
    assert entry.source == ""
    assert entry.message == line
    assert entry.level == LogLevel.INFO

    short = SyslogParser().parse(_span("short: line"))
    assert short.timestamp == ""
    assert short.message == "short: line"


def test_log4j_parser_space_delimited_level() -> None:
    entry = Log4jParser().parse(_span("2024-01-15 10:30:00.123 INFO com.example.App - Started"))
    assert entry.timestamp == "2024-01-15 10:30:00.123"
    assert entry.level == LogLevel.INFO
    assert entry.source == "com.example.App"
    assert entry.message == "Started"


def test_log4j_parser_bracketed_source() -> None:
    entry = Log4jParser().parse(_span("2024-01-15 10:30:01 WARN [main] - Low disk"))
    assert entry.timestamp == "2024-01-15 10:30:01"
    assert entry.level == LogLevel.WARNING
    assert entry.source == "main"
    assert entry.message == "Low disk"


def test_log4j_parser_comma_millis() -> None:
    entry = Log4jParser().parse(_span("2024/01/15 10:30:02,456 ERROR PaymentService - Card declined"))
    assert entry.timestamp == "2024/01/15 10:30:02,456"
    assert entry.level == LogLevel.ERROR
    assert entry.source == "PaymentService"
    assert entry.message == "Card declined"


def test_log4j_parser_token_order_beats_position() -> None:
    # INFO is listed before ERROR, so it wins although ERROR comes first.
    entry = Log4jParser().parse(_span("2024-01-15 10:30:00 ERROR job INFO - done"))
    assert entry.level == LogLevel.INFO
    assert entry.message == "done"


def test_log4j_parser_without_marker() -> None:
    entry = Log4jParser().parse(_span("2024-01-15 10:30:00 DEBUG cache warmed"))
    assert entry.level == LogLevel.DEBUG
    assert entry.source == ""
    assert entry.message == " cache warmed"


def test_log4j_parser_no_level() -> None:
    line = "2024-01-15 10:30:00 hello world"
    entry = Log4jParser().parse(_span(line))
    assert entry.timestamp == "2024-01-15 10:30:00"
    assert entry.level == LogLevel.UNKNOWN
    assert entry.message == line

    far = "x" * 25 + " ERROR boom"
    entry = Log4jParser().parse(_span(far))
    assert entry.timestamp == ""
    assert entry.level == LogLevel.UNKNOWN
    assert entry.message == far


def test_generic_parser_iso_timestamp() -> None:
    line = "2024-01-15 10:02:33 Something went WRONG here"
    entry = GenericParser().parse(_span(line))
    assert entry.timestamp == "2024-01-15 10:02:33"
    assert entry.level == LogLevel.UNKNOWN
    assert entry.message == line


def test_generic_parser_timestamp_variants() -> None:
    assert GenericParser().parse(_span("2024-01-15 nothing")).timestamp == "2024-01-15"
    assert (
        GenericParser().parse(_span("2024-01-15 10:02:33.250 x")).timestamp
        == "2024-01-15 10:02:33.250"
    )
    entry = GenericParser().parse(_span("[2024-01-15 10:00:00] ERROR db down"))
    assert entry.timestamp == "2024-01-15 10:00:00"
    assert entry.level == LogLevel.ERROR
    assert GenericParser().parse(_span("[unterminated")).timestamp == ""


def test_generic_parser_keyword_priority() -> None:
    parser = GenericParser()
    assert parser.parse(_span("CRITICAL error")).level == LogLevel.FATAL
    assert parser.parse(_span("info: request failed")).level == LogLevel.ERROR
    assert parser.parse(_span("warning: disk")).level == LogLevel.WARNING
    assert parser.parse(_span("trace and debug")).level == LogLevel.DEBUG
    assert parser.parse(_span("trace only")).level == LogLevel.TRACE
    assert parser.parse(_span("Info only")).level == LogLevel.INFO


def test_parser_for_dispatch() -> None:
    assert isinstance(parser_for(LogFormat.APACHE), AccessLogParser)
    assert isinstance(parser_for(LogFormat.SYSLOG), SyslogParser)
    assert isinstance(parser_for(LogFormat.LOG4J), Log4jParser)
    for fmt in (LogFormat.APACHE_ERROR, LogFormat.JSON, LogFormat.CUSTOM, LogFormat.IIS):
        assert isinstance(parser_for(fmt), GenericParser)


def test_parse_keeps_byte_offsets() -> None:
    content = "héllo error\r\nsecond\n".encode()
    entries = parse(content, LogFormat.CUSTOM)
    assert [e.line_number for e in entries] == [1, 2]
    assert entries[0].line_start == 0
    assert entries[0].line_end == content.index(b"\n")
    assert entries[0].message == "héllo error"
    assert entries[0].level == LogLevel.ERROR
    assert entries[1].line_start == content.index(b"\n") + 1
