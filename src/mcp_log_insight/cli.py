from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from mcp_log_insight.core.document import LogDocument, load_document
from mcp_log_insight.core.levels import level_name
from mcp_log_insight.core.models import LogLevel
from mcp_log_insight.core.statistics import http_breakdown, level_breakdown
from mcp_log_insight.core.transforms import ExtractErrors, FilterByLevel, apply


def _parse_levels(s: str) -> list[LogLevel]:
    out: list[LogLevel] = []
    for part in s.split(","):
        name = part.strip().upper()
        if not name:
            continue
        try:
            out.append(LogLevel(name))
        except ValueError as e:
            allowed = ", ".join(lvl.value for lvl in LogLevel)
            raise argparse.ArgumentTypeError(f"Invalid level. Allowed: {allowed}") from e
    if not out:
        raise argparse.ArgumentTypeError("At least one level must be provided")
    return out


def _print_statistics(doc: LogDocument) -> None:
    summary = doc.summary()
    print(f"File:        {summary.name} ({summary.content_size:,} bytes)")
    print(f"Format:      {summary.format}")
    print(f"Total lines: {summary.total_lines:,}")
    if summary.first_timestamp:
        print(f"First entry: {summary.first_timestamp}")
    if summary.last_timestamp:
        print(f"Last entry:  {summary.last_timestamp}")
    if doc.truncated:
        print(f"(only the first {doc.config.max_parse_bytes:,} bytes were parsed)")

    print("\nLevel statistics")
    for label, count, pct in level_breakdown(doc.statistics):
        print(f"  {label:<16}{count:>10,}{pct:>8.1f}%")
    rows = http_breakdown(doc.statistics)
    if rows:
        print("\nHTTP status")
        for label, count, pct in rows:
            print(f"  {label:<16}{count:>10,}{pct:>8.1f}%")


def main() -> None:
    p = argparse.ArgumentParser(description="Detect, parse and summarize a plain-text log file.")
    p.add_argument("log_path")
    p.add_argument(
        "--levels",
        type=_parse_levels,
        default=None,
        help="Comma-separated (e.g., ERROR,WARNING). Default: all levels",
    )
    p.add_argument("--max", dest="max_results", type=int, default=None, help="Max entries to print (default: no cap)")
    p.add_argument("--stats", action="store_true", help="Print summary and statistics instead of entries")
    p.add_argument("--tokens", action="store_true", help="Print highlighting tokens instead of entries")
    p.add_argument("--extract-errors", action="store_true", help="Print raw warning/error lines only")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = p.parse_args()
    level_name_env = os.getenv("LOG_INSIGHT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, level_name_env, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        doc = asyncio.run(load_document(Path(args.log_path)))
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    if args.stats:
        _print_statistics(doc)
        return

    if args.extract_errors:
        print(apply(ExtractErrors(), doc))
        return

    if args.tokens:
        text = doc.text()
        for t in doc.tokens()[: args.max_results]:
            print(f"{t.start}-{t.end} {t.name:<12} {text[t.start:t.end]!r}")
        return

    entries = list(doc.entries) if args.levels is None else apply(FilterByLevel.of(args.levels), doc)
    for e in entries[: args.max_results]:
        ts = e.timestamp or "-"
        print(f"{e.line_number} {ts} [{level_name(e.level)}] {e.message}")

    print(f"\nFound {len(entries)} matching entries.")


if __name__ == "__main__":
    main()
