"""Ingestion engine.

A LogDocument owns one source buffer and the artifacts derived from it. Each
``update()`` call throws away the previous entries and statistics and
rebuilds them: detect the format, run exactly one parser, aggregate.
"""

from __future__ import annotations

import logging
from pathlib import Path

import aiofiles

from .config import IngestConfig, resolve_ingest_config
from .detection import detect_format
from .formats import parse
from .models import LogEntry, LogFormat, LogStatistics
from .statistics import aggregate
from .summary import LogSummary, build_summary
from .tokenizer import TokenList, TokenSink, tokenize_into

logger = logging.getLogger(__name__)


class LogDocument:
    """Parsed view over a log buffer.

    ``content_size`` is the size of the whole source, which can be larger than
    ``data`` when the caller already stopped reading at the parse cap.
    """

    def __init__(
        self,
        name: str,
        data: bytes,
        *,
        content_size: int | None = None,
        config: IngestConfig | None = None,
    ) -> None:
        self.name = name
        self.config = resolve_ingest_config(config)
        self.content_size = len(data) if content_size is None else content_size
        self._data = data
        self._format = LogFormat.UNKNOWN
        self._entries: tuple[LogEntry, ...] = ()
        self._stats = LogStatistics()

    @property
    def content(self) -> bytes:
        """The bytes that are parsed and tokenized (never past the cap)."""
        return self._data[: self.config.max_parse_bytes]

    @property
    def truncated(self) -> bool:
        return self.content_size > self.config.max_parse_bytes

    @property
    def detected_format(self) -> LogFormat:
        return self._format

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        return self._entries

    @property
    def statistics(self) -> LogStatistics:
        return self._stats

    def update(self) -> bool:
        """Re-parse the buffer. Returns False (and empty results) for empty input."""
        self._format = LogFormat.UNKNOWN
        self._entries = ()
        self._stats = LogStatistics()

        if self.content_size == 0 or not self._data:
            logger.debug("Nothing to parse in %s", self.name)
            return False

        content = self.content
        if self.truncated:
            logger.debug(
                "%s is %s bytes; parsing only the first %s",
                self.name,
                self.content_size,
                self.config.max_parse_bytes,
            )

        self._format = detect_format(content, sample_bytes=self.config.sample_bytes)
        self._entries = tuple(
            parse(
                content,
                self._format,
                encoding=self.config.encoding,
                decode_errors=self.config.decode_errors,
            )
        )
        self._stats = aggregate(self._entries)
        logger.debug(
            "Parsed %s as %s: %s entries", self.name, self._format.value, len(self._entries)
        )
        return True

    def text(self) -> str:
        """Decoded text of the parsed region."""
        return self.content.decode(self.config.encoding, errors=self.config.decode_errors)

    def line_text(self, entry: LogEntry) -> str:
        """Raw source text of an entry, without its line terminator."""
        raw = self._data[entry.line_start : entry.line_end]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        return raw.decode(self.config.encoding, errors=self.config.decode_errors)

    def tokenize_into(self, sink: TokenSink) -> None:
        """Emit highlighting tokens for the parsed region into ``sink``."""
        tokenize_into(self.text(), sink)

    def tokens(self) -> TokenList:
        tokens = TokenList()
        self.tokenize_into(tokens)
        return tokens

    def summary(self) -> LogSummary:
        return build_summary(
            name=self.name,
            content_size=self.content_size,
            fmt=self._format,
            stats=self._stats,
        )


async def load_document(
    log_path: str | Path,
    *,
    config: IngestConfig | None = None,
) -> LogDocument:
    """Read a log file (up to the parse cap) and return an updated LogDocument."""
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")

    cfg = resolve_ingest_config(config)
    size = path.stat().st_size
    async with aiofiles.open(path, mode="rb") as f:
        data = await f.read(cfg.max_parse_bytes)

    doc = LogDocument(path.name, data, content_size=size, config=cfg)
    doc.update()
    return doc
