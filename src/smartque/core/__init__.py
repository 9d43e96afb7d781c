"""Core shared helpers for smartque commands."""

from __future__ import annotations

from .ai import API_KEY_ENV, load_client
from .files import write_jsonl
from .logging import (
    HOME_ENV,
    LOG_FILENAME,
    JsonLogFormatter,
    configure_logger,
    default_log_dir,
)

__all__ = [
    "API_KEY_ENV",
    "load_client",
    "write_jsonl",
    "HOME_ENV",
    "LOG_FILENAME",
    "JsonLogFormatter",
    "configure_logger",
    "default_log_dir",
]
