"""Tests for AI description suggestions."""

from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import Mock

sys.path.append(str(Path(__file__).resolve().parents[4]))

import pytest

from joblogger.backend.src.services import descriptions
from joblogger.backend.src.services.descriptions import (
    DescriptionGenerationError,
    generate_description,
)


@pytest.fixture(autouse=True)
def fake_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    settings = SimpleNamespace(openai_api_key="test", openai_model="test-model")
    monkeypatch.setattr(descriptions, "get_settings", lambda: settings)


def _client_returning(content: str | None) -> Mock:
    client = Mock()
    client.chat.completions.create.return_value = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )
    return client


def test_blank_keywords_skip_the_model() -> None:
    client = Mock()
    assert generate_description("   ", client=client) == ""
    client.chat.completions.create.assert_not_called()


def test_generated_text_is_returned() -> None:
    client = _client_returning("  Replaced the leaking tap washer.  ")

    assert generate_description("tap washer leak", client=client) == "Replaced the leaking tap washer."
    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert 'Keywords: "tap washer leak"' in kwargs["messages"][0]["content"]


def test_service_error_becomes_generation_error() -> None:
    client = Mock()
    client.chat.completions.create.side_effect = RuntimeError("401 invalid api key")

    with pytest.raises(DescriptionGenerationError, match="Failed to generate description from AI."):
        generate_description("boiler service", client=client)


def test_empty_response_becomes_generation_error() -> None:
    with pytest.raises(DescriptionGenerationError):
        generate_description("boiler service", client=_client_returning(None))
