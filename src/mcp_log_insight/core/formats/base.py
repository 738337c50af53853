"""Parser interface and the shared line-splitting loop."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

from ..models import LogEntry


@dataclass(frozen=True, slots=True)
class LineSpan:
    """A non-empty source line with its byte offsets."""

    line_number: int
    start: int
    end: int
    text: str


class LineParser(Protocol):
    """Parser interface: every non-empty line yields exactly one LogEntry."""

    def parse(self, span: LineSpan) -> LogEntry:
        """Turn a source line into a LogEntry."""
        ...


def iter_lines(
    content: bytes,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> Iterator[LineSpan]:
    """Split ``content`` on newlines, skipping blank lines.

    One trailing carriage return is stripped from the text. Blank lines still
    advance the line counter. ``end`` points at the newline (or the end of the
    buffer) so it includes a stripped carriage return.
    """
    pos = 0
    line_number = 1
    size = len(content)
    while pos < size:
        end = content.find(b"\n", pos)
        if end == -1:
            end = size

        raw = content[pos:end]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        if raw:
            yield LineSpan(
                line_number=line_number,
                start=pos,
                end=end,
                text=raw.decode(encoding, errors=decode_errors),
            )

        pos = end + 1
        line_number += 1


def parse_lines(
    content: bytes,
    parser: LineParser,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> list[LogEntry]:
    """Run ``parser`` over every non-empty line of ``content``."""
    return [
        parser.parse(span)
        for span in iter_lines(content, encoding=encoding, decode_errors=decode_errors)
    ]
