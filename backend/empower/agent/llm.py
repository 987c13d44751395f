"""LLM provider configuration."""

from functools import lru_cache

from langchain_openai import ChatOpenAI

from empower.core.config import get_settings
from empower.core.logging import get_logger

logger = get_logger(__name__)


@lru_cache
def get_llm() -> ChatOpenAI:
    """Get configured LLM instance for roadmap generation."""
    settings = get_settings()

    kwargs: dict = {
        "model": settings.OPENAI_MODEL,
        "temperature": settings.OPENAI_TEMPERATURE,
        "timeout": settings.ROADMAP_GENERATION_TIMEOUT,
    }

    if settings.OPENAI_API_KEY:
        kwargs["api_key"] = settings.OPENAI_API_KEY
    if settings.OPENAI_API_BASE_URL:
        kwargs["base_url"] = settings.OPENAI_API_BASE_URL

    logger.info("Initializing LLM", model=settings.OPENAI_MODEL)
    return ChatOpenAI(**kwargs)
