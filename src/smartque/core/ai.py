"""Shared AI helper utilities."""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from openai import AsyncOpenAI

__all__ = ["API_KEY_ENV", "load_client"]


API_KEY_ENV = "OPENAI_API_KEY"


def load_client(
    *,
    api_base: Optional[str] = None,
    max_retries: int = 0,
) -> AsyncOpenAI:
    """Initialize an async OpenAI client using environment-derived credentials.

    Retries are disabled by default; callers decide whether a failed
    generation is worth another attempt.
    """
    load_dotenv()
    api_key = os.getenv(API_KEY_ENV)
    if not api_key:
        raise RuntimeError(
            f"{API_KEY_ENV} not found in environment. Set it or add to .env"
        )
    return AsyncOpenAI(
        api_key=api_key,
        base_url=api_base,
        max_retries=max_retries,
    )
