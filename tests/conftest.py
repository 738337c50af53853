from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

APACHE_LINES = [
    '127.0.0.1 - - [10/Oct/2023:13:55:36 -0700] "GET /index.html HTTP/1.0" 200 1043',
    '10.0.0.7 - - [10/Oct/2023:13:55:40 -0700] "POST /login HTTP/1.1" 401 12 "-" "curl/8.0"',
    '10.0.0.9 - - [10/Oct/2023:13:56:02 -0700] "GET /api/items HTTP/1.1" 502 0',
]

SYSLOG_LINES = [
    "Jan 12 06:25:24 myhost sshd[1234]: Failed password for root",
    "Jan 12 06:25:30 myhost sshd[1234]: Accepted publickey for deploy",
    "Jan 12 06:26:00 myhost CRON[99]: (root) CMD (debug-run)",
]

LOG4J_LINES = [
    "2024-01-15 10:30:00.123 INFO com.example.App - Started",
    "2024-01-15 10:30:01 WARN [main] - Low disk",
    "2024-01-15 10:30:02,456 ERROR PaymentService - Card declined",
]


@pytest.fixture
def write_lines() -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    return _write


@pytest.fixture
def apache_log(tmp_path: Path, write_lines) -> Path:
    path = tmp_path / "access.log"
    write_lines(path, APACHE_LINES)
    return path


@pytest.fixture
def syslog_log(tmp_path: Path, write_lines) -> Path:
    path = tmp_path / "auth.log"
    write_lines(path, SYSLOG_LINES)
    return path


@pytest.fixture
def apache_lines() -> list[str]:
    return list(APACHE_LINES)


@pytest.fixture
def syslog_lines() -> list[str]:
    return list(SYSLOG_LINES)


@pytest.fixture
def log4j_lines() -> list[str]:
    return list(LOG4J_LINES)
