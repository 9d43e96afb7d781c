"""Prompt construction for quiz generation.

Everything here is a pure function of its arguments: the same topic, level
and language always produce byte-identical text.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Mapping

from .errors import UnknownLevelError

Level = Literal["beginner", "intermediate", "advanced"]

QUESTION_COUNT = 20
OPTIONS_PER_QUESTION = 4
DEFAULT_LANGUAGE = "en"

LEVEL_DESCRIPTIONS: Mapping[str, str] = {
    "beginner": (
        "basic concepts suitable for beginners who are just starting to learn"
    ),
    "intermediate": (
        "moderately challenging concepts for learners with some experience"
    ),
    "advanced": "complex and in-depth concepts for experts and professionals",
}

LANGUAGE_NAMES: Mapping[str, str] = {
    "bn": "Bengali (Bangla)",
}
FALLBACK_LANGUAGE_NAME = "English"

SYSTEM_PROMPT = (
    "You are a quiz generator expert. You generate high-quality multiple "
    "choice questions for web development topics. Always respond with valid "
    "JSON only, no markdown formatting."
)

_EXAMPLE_SHAPE = """[
  {
    "id": 1,
    "question": "Question text here",
    "options": ["Option A", "Option B", "Option C", "Option D"],
    "answer": "The correct option text (must match exactly one of the options)",
    "description": "Brief explanation of why this answer is correct"
  }
]"""


def level_names() -> tuple[str, ...]:
    return tuple(LEVEL_DESCRIPTIONS)


def describe_level(level: str) -> str:
    """Return the prompt description for ``level``.

    Raises :class:`UnknownLevelError` for anything outside the fixed table.
    """
    try:
        return LEVEL_DESCRIPTIONS[level]
    except (KeyError, TypeError) as exc:
        raise UnknownLevelError(level, level_names()) from exc


def language_name(language: str | None) -> str:
    """Map a language code to the name used in the prompt.

    Unknown or missing codes fall back to English.
    """
    if language is None:
        return FALLBACK_LANGUAGE_NAME
    return LANGUAGE_NAMES.get(language, FALLBACK_LANGUAGE_NAME)


def build_prompt(
    topic: str, level: Level, language: str | None = DEFAULT_LANGUAGE
) -> str:
    topic_name = topic.upper()
    description = describe_level(level)
    lang_name = language_name(language)
    return (
        f"Generate exactly {QUESTION_COUNT} multiple choice questions about "
        f"{topic_name} web development at {level} difficulty level "
        f"({description}).\n\n"
        f"Language: All questions, options, answers, and descriptions must "
        f"be in {lang_name}.\n\n"
        "Return ONLY a valid JSON array with this exact structure (no "
        "markdown, no code blocks, just pure JSON):\n"
        f"{_EXAMPLE_SHAPE}\n\n"
        "Requirements:\n"
        f"- Exactly {QUESTION_COUNT} questions\n"
        f"- Each question has exactly {OPTIONS_PER_QUESTION} unique options\n"
        f"- The answer field must exactly match one of the "
        f"{OPTIONS_PER_QUESTION} options\n"
        f"- Questions should progressively cover different aspects of "
        f"{topic_name}\n"
        "- Descriptions should be educational and helpful\n"
        f"- All text in {lang_name} language"
    )


def build_messages(
    topic: str, level: Level, language: str | None = DEFAULT_LANGUAGE
) -> List[Dict[str, str]]:
    """Construct the two-message conversation sent to the chat endpoint."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_prompt(topic, level, language)},
    ]
