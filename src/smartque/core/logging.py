"""JSON-lines logging for smartque commands."""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Mapping

__all__ = [
    "HOME_ENV",
    "LOG_FILENAME",
    "JsonLogFormatter",
    "configure_logger",
    "default_log_dir",
]


HOME_ENV = "SMARTQUE_HOME"
LOG_FILENAME = "smartque.log"

# Handlers installed here carry this attribute so reconfiguring replaces them.
_OWNED = "_smartque_owned"

_RECORD_FIELDS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record; ``extra`` fields are nested under ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_FIELDS
        }
        if extra:
            entry["extra"] = extra
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        # Paths and other objects are logged by their str().
        return json.dumps(entry, ensure_ascii=False, default=str)


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Return ``$SMARTQUE_HOME/logs`` (``~/.smartque/logs`` when unset)."""
    env_map = os.environ if env is None else env
    home = env_map.get(HOME_ENV)
    base = Path(home).expanduser() if home else Path.home() / ".smartque"
    return base / "logs"


def configure_logger(
    name: str = "smartque",
    *,
    log_dir: Path | None = None,
    level: str = "INFO",
    verbose: bool = False,
) -> logging.Logger:
    """Send ``name`` records to ``<log_dir>/smartque.log`` as JSON lines.

    ``verbose`` logs everything and mirrors it to stderr. Calling again
    swaps out the handlers from the previous call.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    directory = log_dir or default_log_dir()
    directory.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        directory / LOG_FILENAME,
        maxBytes=2 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setFormatter(JsonLogFormatter())
    file_handler.setLevel(
        logging.DEBUG if verbose else getattr(logging, level.upper(), logging.INFO)
    )
    handlers: list[logging.Handler] = [file_handler]

    if verbose:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        handlers.append(console)

    for handler in handlers:
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)
    return logger
