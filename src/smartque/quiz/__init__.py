from .errors import (
    QuizError,
    ServiceError,
    ParseError,
    UnknownLevelError,
)
from .parsing import (
    QuizQuestion,
    extract_json_array,
    normalize_questions,
    parse_quiz_content,
)
from .prompts import (
    LEVEL_DESCRIPTIONS,
    QUESTION_COUNT,
    Level,
    build_messages,
    build_prompt,
)
from .requester import QuizRequester, generate_quiz_questions
from .selection import SelectionState, SelectionStore

__all__ = [
    "QuizError",
    "ServiceError",
    "ParseError",
    "UnknownLevelError",
    "QuizQuestion",
    "extract_json_array",
    "normalize_questions",
    "parse_quiz_content",
    "LEVEL_DESCRIPTIONS",
    "QUESTION_COUNT",
    "Level",
    "build_messages",
    "build_prompt",
    "QuizRequester",
    "generate_quiz_questions",
    "SelectionState",
    "SelectionStore",
]
