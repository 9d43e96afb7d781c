"""Exceptions raised while generating quizzes."""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "GENERIC_SERVICE_MESSAGE",
    "PARSE_FAILURE_MESSAGE",
    "QuizError",
    "ServiceError",
    "ParseError",
    "UnknownLevelError",
]


GENERIC_SERVICE_MESSAGE = "Failed to generate questions"
PARSE_FAILURE_MESSAGE = "Failed to parse quiz questions"


class QuizError(RuntimeError):
    """Base class for quiz generation failures."""


class ServiceError(QuizError):
    """The completion service answered with a non-success status."""

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        body: Any = None,
    ) -> None:
        super().__init__(message or GENERIC_SERVICE_MESSAGE)
        self.status_code = status_code
        self.body = body

    @property
    def message(self) -> str:
        return str(self)


class ParseError(QuizError):
    """The model reply could not be decoded into a JSON array of questions."""

    def __init__(self, message: str = PARSE_FAILURE_MESSAGE) -> None:
        super().__init__(message)


class UnknownLevelError(QuizError, ValueError):
    """Raised when a difficulty level has no description."""

    def __init__(self, level: object, known: tuple[str, ...]) -> None:
        super().__init__(
            f"Unknown level '{level}'. Known: {', '.join(known)}"
        )
        self.level = level
