"""Document transforms.

The set of transforms is closed; ``apply`` dispatches on the variant.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .document import LogDocument
from .models import LogEntry, LogLevel

ERROR_LEVELS: frozenset[LogLevel] = frozenset(
    {LogLevel.WARNING, LogLevel.ERROR, LogLevel.FATAL, LogLevel.CRITICAL}
)


@dataclass(frozen=True, slots=True)
class FilterByLevel:
    """Keep only entries whose level is in ``levels``."""

    levels: frozenset[LogLevel]

    @classmethod
    def of(cls, levels: Iterable[LogLevel]) -> FilterByLevel:
        return cls(levels=frozenset(levels))


@dataclass(frozen=True, slots=True)
class ExtractErrors:
    """Copy the source lines of warning-or-worse entries into a new text buffer."""


Transform = FilterByLevel | ExtractErrors


def apply(transform: Transform, document: LogDocument) -> list[LogEntry] | str:
    """Run ``transform`` against the current entries of ``document``."""
    if isinstance(transform, FilterByLevel):
        return [e for e in document.entries if e.level in transform.levels]
    if isinstance(transform, ExtractErrors):
        return "\n".join(
            document.line_text(e) for e in document.entries if e.level in ERROR_LEVELS
        )
    raise TypeError(f"Unsupported transform: {type(transform).__name__}")
