from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest

TESTS_DIR = Path(__file__).resolve().parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from fixtures import ChatTransport  # noqa: E402


@pytest.fixture
def chat() -> ChatTransport:
    """Offline transport backing a real ``AsyncOpenAI`` client."""

    return ChatTransport()


@pytest.fixture(autouse=True)
def _isolate_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Iterator[None]:
    monkeypatch.setenv("SMARTQUE_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("SMARTQUE_CONFIG", raising=False)
    monkeypatch.delenv("OPENAI_BASE_URL", raising=False)
    yield
    logger = logging.getLogger("smartque")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
