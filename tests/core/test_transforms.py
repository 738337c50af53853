from __future__ import annotations

import pytest

from mcp_log_insight.core.document import LogDocument
from mcp_log_insight.core.models import LogLevel
from mcp_log_insight.core.transforms import ExtractErrors, FilterByLevel, apply


@pytest.fixture
def doc(apache_lines: list[str]) -> LogDocument:
    d = LogDocument("access.log", ("\r\n".join(apache_lines) + "\r\n").encode())
    d.update()
    return d


def test_filter_by_level(doc: LogDocument) -> None:
    out = apply(FilterByLevel.of([LogLevel.WARNING, LogLevel.ERROR]), doc)
    assert [e.line_number for e in out] == [2, 3]
    assert apply(FilterByLevel.of([]), doc) == []


def test_extract_errors(doc: LogDocument, apache_lines: list[str]) -> None:
    assert apply(ExtractErrors(), doc) == apache_lines[1] + "\n" + apache_lines[2]


def test_extract_errors_nothing_to_extract() -> None:
    d = LogDocument("ok.log", b"all fine\n")
    d.update()
    assert apply(ExtractErrors(), d) == ""


def test_apply_rejects_unknown_transform(doc: LogDocument) -> None:
    with pytest.raises(TypeError):
        apply(object(), doc)  # type: ignore[arg-type]
