"""Ingestion configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from .detection import DEFAULT_SAMPLE_BYTES

MAX_PARSE_BYTES = 50 * 1024 * 1024
MAX_PARSE_BYTES_ENV = "LOG_INSIGHT_MAX_PARSE_BYTES"


@dataclass(frozen=True, slots=True)
class IngestConfig:
    # Bytes past this cap are neither parsed nor tokenized.
    max_parse_bytes: int = MAX_PARSE_BYTES
    sample_bytes: int = DEFAULT_SAMPLE_BYTES
    encoding: str = "utf-8"
    decode_errors: str = "replace"


def resolve_ingest_config(cfg: IngestConfig | None = None) -> IngestConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = IngestConfig()

    env = os.getenv(MAX_PARSE_BYTES_ENV)
    if env is None or env == "":
        return cfg

    try:
        value = int(env)
    except ValueError as exc:
        raise ValueError(f"{MAX_PARSE_BYTES_ENV} must be an integer") from exc
    if value < 1:
        raise ValueError(f"{MAX_PARSE_BYTES_ENV} must be >= 1")

    if value == cfg.max_parse_bytes:
        return cfg
    return replace(cfg, max_parse_bytes=value)
