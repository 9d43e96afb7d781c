"""Decode model replies into normalized quiz questions."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .errors import ParseError

__all__ = [
    "QuizQuestion",
    "extract_json_array",
    "normalize_question",
    "normalize_questions",
    "parse_quiz_content",
]

logger = logging.getLogger(__name__)

# Greedy: spans from the first "[" to the last "]" in the reply.
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")


@dataclass(frozen=True)
class QuizQuestion:
    """A single normalized multiple-choice question."""

    id: int
    question: Optional[str]
    options: List[Any] = field(default_factory=list)
    answer: Optional[str] = None
    description: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def extract_json_array(content: str) -> List[Any]:
    """Recover a JSON array from free-form model output.

    When the text contains a bracketed span, only that span is decoded;
    otherwise the whole text is. Prose or code fences around the array are
    tolerated, malformed JSON is not: any decode failure, or a decoded value
    that is not an array, raises :class:`ParseError`.
    """
    text = content or ""
    match = _ARRAY_RE.search(text)
    payload = match.group(0) if match else text
    try:
        data = json.loads(payload)
    except ValueError as exc:
        logger.error(
            "Parse error: %s",
            exc,
            extra={"raw_content": text},
        )
        raise ParseError() from exc
    if not isinstance(data, list):
        logger.error(
            "Reply decoded to %s, expected an array",
            type(data).__name__,
            extra={"raw_content": text},
        )
        raise ParseError()
    return data


def normalize_question(
    position: int, record: Mapping[str, Any]
) -> QuizQuestion:
    """Build a :class:`QuizQuestion` from one decoded record.

    ``id`` always comes from ``position``; any model-supplied id is ignored.
    """
    raw_options = record.get("options")
    options = list(raw_options) if isinstance(raw_options, list) else []
    return QuizQuestion(
        id=position,
        question=record.get("question"),
        options=options,
        answer=record.get("answer"),
        description=record.get("description") or "",
    )


def normalize_questions(records: Sequence[Any]) -> List[QuizQuestion]:
    questions: List[QuizQuestion] = []
    for index, record in enumerate(records, start=1):
        if not isinstance(record, Mapping):
            logger.error(
                "Question %d is %s, expected an object",
                index,
                type(record).__name__,
            )
            raise ParseError()
        questions.append(normalize_question(index, record))
    return questions


def parse_quiz_content(content: str) -> List[QuizQuestion]:
    """Extract and normalize every question contained in ``content``."""
    return normalize_questions(extract_json_array(content))
