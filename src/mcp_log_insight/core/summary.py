"""Compact document summary for assistant/introspection queries."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .detection import format_display_name
from .models import LogFormat, LogStatistics


class LogSummary(BaseModel):
    name: str = Field(description="Document name.")
    content_size: int = Field(ge=0, description="Size of the whole source in bytes.")
    format: str = Field(description="Display name of the detected log format.")
    total_lines: int = Field(ge=0, description="Number of parsed entries.")
    error_count: int = Field(ge=0)
    warning_count: int = Field(ge=0)
    info_count: int = Field(ge=0)
    first_timestamp: str | None = Field(default=None, description="First timestamp seen, verbatim.")
    last_timestamp: str | None = Field(default=None, description="Last timestamp seen, verbatim.")

    def to_context(self) -> dict:
        """Dict form that leaves out timestamps nobody observed."""
        return self.model_dump(exclude_none=True)


def build_summary(
    *,
    name: str,
    content_size: int,
    fmt: LogFormat,
    stats: LogStatistics,
) -> LogSummary:
    return LogSummary(
        name=name,
        content_size=content_size,
        format=format_display_name(fmt),
        total_lines=stats.total_lines,
        error_count=stats.error_count,
        warning_count=stats.warning_count,
        info_count=stats.info_count,
        first_timestamp=stats.first_timestamp or None,
        last_timestamp=stats.last_timestamp or None,
    )
