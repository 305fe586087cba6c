"""AI-assisted job description suggestions."""

from __future__ import annotations

import structlog
from openai import OpenAI

from joblogger.backend.src.core.config import get_settings

LOGGER = structlog.get_logger(__name__)

GENERATION_FAILED_MESSAGE = "Failed to generate description from AI."


class DescriptionGenerationError(RuntimeError):
    """Raised when the text-generation service does not return a description."""


def build_description_prompt(keywords: str) -> str:
    return (
        "You are an assistant for a tradesperson. Based on the following keywords, "
        "write a concise and professional job completion description suitable for a "
        "client invoice or job log. Be specific about the work performed. "
        f'Keywords: "{keywords}"'
    )


def generate_description(keywords: str, client: OpenAI | None = None) -> str:
    """Expand free-text ``keywords`` into a job description.

    Blank keywords short-circuit to an empty string without calling the model.
    """

    if not keywords.strip():
        return ""

    settings = get_settings()
    try:
        client = client or OpenAI(api_key=settings.openai_api_key)
        response = client.chat.completions.create(
            model=settings.openai_model,
            messages=[{"role": "user", "content": build_description_prompt(keywords)}],
        )
        content = response.choices[0].message.content if response.choices else None
    except Exception as exc:
        LOGGER.warning("description_generation_failed", error=str(exc))
        raise DescriptionGenerationError(GENERATION_FAILED_MESSAGE) from exc

    if not content:
        LOGGER.warning("description_generation_empty")
        raise DescriptionGenerationError(GENERATION_FAILED_MESSAGE)
    return content.strip()


__all__ = [
    "DescriptionGenerationError",
    "build_description_prompt",
    "generate_description",
]
