from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from smartque.core import logging as core_logging


def _close(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def _file_handlers(logger: logging.Logger) -> list[RotatingFileHandler]:
    return [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]


def test_configure_logger_writes_json(tmp_path: Path) -> None:
    logger = core_logging.configure_logger(
        "smartque.test", log_dir=tmp_path / "logs", level="INFO"
    )

    logger.debug("filtered out")
    logger.info("hello world", extra={"event": "unit", "value": 3})

    class _Helper:
        def __repr__(self) -> str:
            return "helper"

    try:
        raise ValueError("boom")
    except ValueError:
        logger.exception(
            "with error",
            extra={
                "body": {"items": [Path("x"), 1], "mapping": {"k": "v"}},
                "obj": _Helper(),
            },
        )
    for handler in logger.handlers:
        handler.flush()

    log_path = tmp_path / "logs" / "smartque.log"
    lines = log_path.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["message"] == "hello world"
    assert first["level"] == "INFO"
    assert first["logger"] == "smartque.test"
    assert first["extra"] == {"event": "unit", "value": 3}

    last = json.loads(lines[-1])
    assert "ValueError: boom" in last["exception"]
    assert last["extra"]["obj"] == "helper"
    assert last["extra"]["body"]["items"] == ["x", 1]
    assert last["extra"]["body"]["mapping"] == {"k": "v"}

    _close(logger)


def test_json_formatter_keeps_non_ascii() -> None:
    record = logging.LogRecord(
        "smartque", logging.INFO, __file__, 1, "প্রশ্ন", (), None
    )
    payload = json.loads(core_logging.JsonLogFormatter().format(record))
    assert payload["message"] == "প্রশ্ন"
    assert "extra" not in payload


def test_reconfiguring_replaces_handlers(tmp_path: Path) -> None:
    logger = core_logging.configure_logger(
        "smartque.idem", log_dir=tmp_path / "a"
    )
    core_logging.configure_logger(
        "smartque.idem", log_dir=tmp_path / "b", level="DEBUG"
    )

    handlers = _file_handlers(logger)
    assert len(handlers) == 1
    assert handlers[0].level == logging.DEBUG
    assert Path(handlers[0].baseFilename) == tmp_path / "b" / "smartque.log"
    _close(logger)


def test_reconfiguring_keeps_foreign_handlers(tmp_path: Path) -> None:
    logger = logging.getLogger("smartque.foreign")
    foreign = logging.NullHandler()
    logger.addHandler(foreign)

    core_logging.configure_logger("smartque.foreign", log_dir=tmp_path)
    core_logging.configure_logger("smartque.foreign", log_dir=tmp_path)

    assert foreign in logger.handlers
    assert len(logger.handlers) == 2
    _close(logger)


def test_verbose_toggles_console_handler(tmp_path: Path) -> None:
    logger = core_logging.configure_logger(
        "smartque.verbose", log_dir=tmp_path, level="ERROR", verbose=True
    )
    consoles = [
        h for h in logger.handlers if type(h) is logging.StreamHandler
    ]
    assert len(consoles) == 1
    assert _file_handlers(logger)[0].level == logging.DEBUG

    core_logging.configure_logger(
        "smartque.verbose", log_dir=tmp_path, verbose=False
    )
    assert not any(type(h) is logging.StreamHandler for h in logger.handlers)
    _close(logger)


def test_unknown_level_name_logs_at_info(tmp_path: Path) -> None:
    logger = core_logging.configure_logger(
        "smartque.level", log_dir=tmp_path, level="chatty"
    )
    assert _file_handlers(logger)[0].level == logging.INFO
    _close(logger)


def test_default_log_dir_uses_home_env(tmp_path: Path) -> None:
    env = {"SMARTQUE_HOME": str(tmp_path / "home")}
    assert core_logging.default_log_dir(env) == tmp_path / "home" / "logs"
    assert core_logging.default_log_dir({}) == (
        Path.home() / ".smartque" / "logs"
    )


def test_configure_logger_defaults_to_home_log_dir(tmp_path: Path) -> None:
    logger = core_logging.configure_logger("smartque.home")
    handler = _file_handlers(logger)[0]
    assert Path(handler.baseFilename) == tmp_path / "home" / "logs" / (
        "smartque.log"
    )
    _close(logger)
