"""Configuration for quiz generation.

Settings come from ``smartque.toml`` with two tables, ``[openai]`` and
``[logging]``. Every key has a default, so a missing file yields the
defaults. Unknown tables or keys and ill-typed values raise
:class:`ConfigError` naming the offending ``[table] key``.
"""

from __future__ import annotations

import copy
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

from smartque.core.logging import default_log_dir


CONFIG_FILENAME = "smartque.toml"
CONFIG_PATH_ENV = "SMARTQUE_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(RuntimeError):
    """Raised when configuration parsing or validation fails."""


@dataclass(frozen=True)
class OpenAIConfig:
    model: str
    temperature: float
    max_tokens: int
    api_base: Optional[str]


@dataclass(frozen=True)
class LoggingConfig:
    level: str
    verbose: bool
    directory: Optional[Path]

    @property
    def log_dir(self) -> Path:
        return self.directory or default_log_dir()


@dataclass(frozen=True)
class QuizConfig:
    openai: OpenAIConfig
    logging: LoggingConfig


# TOML has no null, so ``None`` marks keys that are unset unless given.
_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {
        "model": "gpt-4o-mini",
        "temperature": 0.7,
        "max_tokens": 8000,
        "api_base": None,
    },
    "logging": {
        "level": "INFO",
        "verbose": False,
        "directory": None,
    },
}

_TEMPLATE = """\
# smartque configuration

[openai]
# Chat completion model used to write the quiz
model = "gpt-4o-mini"
# Sampling temperature (0.0-2.0)
temperature = 0.7
# Twenty questions with explanations need a generous token budget
max_tokens = 8000
# Point at a compatible proxy instead of api.openai.com
# api_base = "https://api.openai.com/v1"

[logging]
# One of DEBUG, INFO, WARNING, ERROR, CRITICAL
level = "INFO"
# Mirror log lines to stderr
verbose = false
# Where smartque.log is written; defaults to $SMARTQUE_HOME/logs
# directory = "~/.smartque/logs"
"""


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_token_budget(value: Any) -> bool:
    return type(value) is int and value > 0


def _is_temperature(value: Any) -> bool:
    return type(value) in (int, float) and 0.0 <= value <= 2.0


def _is_flag(value: Any) -> bool:
    return isinstance(value, bool)


def _is_level(value: Any) -> bool:
    return isinstance(value, str) and value.upper() in LOG_LEVELS


def _optional(check: Callable[[Any], bool]) -> Callable[[Any], bool]:
    return lambda value: value is None or check(value)


_CHECKS: Dict[str, Dict[str, tuple[Callable[[Any], bool], str]]] = {
    "openai": {
        "model": (_is_text, "a non-empty string"),
        "temperature": (_is_temperature, "a number between 0.0 and 2.0"),
        "max_tokens": (_is_token_budget, "a positive integer"),
        "api_base": (_optional(_is_text), "a non-empty string"),
    },
    "logging": {
        "level": (_is_level, "one of " + ", ".join(LOG_LEVELS)),
        "verbose": (_is_flag, "true or false"),
        "directory": (_optional(_is_text), "a non-empty string"),
    },
}


def _overlay(raw: Mapping[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Lay the file's tables over the defaults, rejecting unknown names."""
    tree = copy.deepcopy(_DEFAULTS)
    for table, values in raw.items():
        if table not in tree:
            raise ConfigError(f"Unknown table [{table}].")
        if not isinstance(values, Mapping):
            raise ConfigError(
                f"[{table}] must be a table, found {type(values).__name__}."
            )
        for key, value in values.items():
            if key not in tree[table]:
                raise ConfigError(f"[{table}] {key}: unknown key.")
            tree[table][key] = value
    return tree


def _validate(tree: Mapping[str, Mapping[str, Any]]) -> None:
    for table, checks in _CHECKS.items():
        for key, (check, expected) in checks.items():
            value = tree[table][key]
            if not check(value):
                raise ConfigError(
                    f"[{table}] {key}: expected {expected}, got {value!r}."
                )


def _build(tree: Mapping[str, Mapping[str, Any]]) -> QuizConfig:
    _validate(tree)
    ai, log = tree["openai"], tree["logging"]
    directory = log["directory"]
    return QuizConfig(
        openai=OpenAIConfig(
            model=ai["model"].strip(),
            temperature=float(ai["temperature"]),
            max_tokens=ai["max_tokens"],
            api_base=ai["api_base"],
        ),
        logging=LoggingConfig(
            level=log["level"].upper(),
            verbose=log["verbose"],
            directory=Path(directory).expanduser() if directory else None,
        ),
    )


def default_config() -> QuizConfig:
    return _build(_DEFAULTS)


def resolve_config_path(
    *,
    explicit_path: Optional[Path] = None,
    env: Mapping[str, str] | None = None,
) -> Optional[Path]:
    """Pick the config file to read, or ``None`` to run on defaults.

    Order: explicit path, ``$SMARTQUE_CONFIG``, then ``./smartque.toml``
    when it exists.
    """
    env_map = os.environ if env is None else env
    if explicit_path is not None:
        return explicit_path.expanduser().resolve()
    if env_map.get(CONFIG_PATH_ENV):
        return Path(env_map[CONFIG_PATH_ENV]).expanduser().resolve()
    local = Path.cwd() / CONFIG_FILENAME
    return local.resolve() if local.exists() else None


def load_config(
    *,
    explicit_path: Optional[Path] = None,
    env: Mapping[str, str] | None = None,
) -> QuizConfig:
    path = resolve_config_path(explicit_path=explicit_path, env=env)
    if path is None:
        return default_config()
    try:
        raw = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path} is not valid TOML: {exc}") from exc
    return _build(_overlay(raw))


def config_template() -> str:
    return _TEMPLATE


def write_template(path: Path, *, overwrite: bool = False) -> Path:
    """Write the commented template to ``path`` with owner-only access."""
    if path.exists() and not overwrite:
        raise ConfigError(f"Config already exists: {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config_template(), encoding="utf-8")
    path.chmod(0o600)
    return path
