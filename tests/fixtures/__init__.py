"""Shared testing fixtures for the smartque test suite."""

from .chat import (  # noqa: F401
    API_KEY,
    BASE_URL,
    ChatTransport,
    completion_body,
    sample_questions,
)

__all__ = [
    "API_KEY",
    "BASE_URL",
    "ChatTransport",
    "completion_body",
    "sample_questions",
]
