"""Generate quizzes through a chat-completion endpoint.

One call to :meth:`QuizRequester.generate` issues exactly one request. There
is no retry, caching or batching: failures surface immediately as
:class:`~smartque.quiz.errors.ServiceError` (non-success status),
:class:`~smartque.quiz.errors.ParseError` (unusable reply) or the transport
error raised by the ``openai`` SDK.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import openai

from smartque.core.ai import load_client

from .config import OpenAIConfig, default_config
from .errors import ParseError, ServiceError
from .parsing import QuizQuestion, parse_quiz_content
from .prompts import DEFAULT_LANGUAGE, Level, build_messages

__all__ = ["QuizRequester", "generate_quiz_questions"]

logger = logging.getLogger(__name__)


def _service_message(body: Any) -> Optional[str]:
    """Pull ``error.message`` out of an error body, if there is one."""
    if not isinstance(body, Mapping):
        return None
    nested = body.get("error")
    if isinstance(nested, Mapping):
        body = nested
    message = body.get("message")
    if isinstance(message, str) and message:
        return message
    return None


def _single_attempt(client: Any) -> Any:
    """Copy ``client`` with SDK retries off if it supports ``with_options``."""
    with_options = getattr(client, "with_options", None)
    return with_options(max_retries=0) if callable(with_options) else client


def _reply_content(response: Any) -> str:
    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, TypeError) as exc:
        logger.error("Completion response carried no message content")
        raise ParseError() from exc
    return content or ""


class QuizRequester:
    """Builds quiz prompts and turns completions into question records.

    ``client`` is anything exposing an awaitable
    ``chat.completions.create(**params)``; by default an
    :class:`openai.AsyncOpenAI` client is built lazily from the environment.
    Injected clients are copied with retries disabled so a call stays a
    single request.
    """

    def __init__(
        self,
        client: Any = None,
        *,
        settings: Optional[OpenAIConfig] = None,
    ) -> None:
        self._client = None if client is None else _single_attempt(client)
        self.settings = settings or default_config().openai

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = load_client(api_base=self.settings.api_base)
        return self._client

    def build_params(
        self,
        topic: str,
        level: Level,
        language: Optional[str] = DEFAULT_LANGUAGE,
    ) -> Dict[str, Any]:
        return {
            "model": self.settings.model,
            "messages": build_messages(topic, level, language),
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
        }

    async def generate(
        self,
        topic: str,
        level: Level,
        language: Optional[str] = DEFAULT_LANGUAGE,
    ) -> List[QuizQuestion]:
        """Request one quiz for ``topic`` and return its normalized questions.

        The list is nominally 20 items long; the count is not enforced.
        """
        params = self.build_params(topic, level, language)
        try:
            response = await self.client.chat.completions.create(**params)
        except openai.APIStatusError as exc:
            logger.error(
                "API error: %s",
                exc.status_code,
                extra={"status_code": exc.status_code, "body": exc.body},
            )
            raise ServiceError(
                _service_message(exc.body),
                status_code=exc.status_code,
                body=exc.body,
            ) from exc

        content = _reply_content(response)
        questions = parse_quiz_content(content)
        logger.info(
            "Generated %d question(s)",
            len(questions),
            extra={"topic": topic, "level": level, "language": language},
        )
        return questions


async def generate_quiz_questions(
    topic: str,
    level: Level,
    language: Optional[str] = DEFAULT_LANGUAGE,
    *,
    client: Any = None,
    settings: Optional[OpenAIConfig] = None,
) -> List[QuizQuestion]:
    """Convenience wrapper around a one-off :class:`QuizRequester`."""
    requester = QuizRequester(client, settings=settings)
    return await requester.generate(topic, level, language)
