"""
OpenAI client construction.
"""
from functools import lru_cache

from openai import AsyncOpenAI

from medrelay.config.settings import get_settings


@lru_cache()
def get_openai_client() -> AsyncOpenAI:
    """Get the process-wide async OpenAI client."""
    settings = get_settings()
    return AsyncOpenAI(api_key=settings.openai_api_key)
