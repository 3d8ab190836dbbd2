"""Unit tests for draft generation and response parsing."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import anthropic
import httpx
import pytest

from autopost.config import PipelineConfig
from autopost.models import AnalysisRecord
from autopost.pipeline.generator import GenerationError, generate_draft, make_client, parse_draft


def _message(text: str) -> SimpleNamespace:
    return SimpleNamespace(
        content=[SimpleNamespace(type="text", text=text)],
        usage=SimpleNamespace(input_tokens=10, output_tokens=20),
    )


def _client(text: str) -> MagicMock:
    client = MagicMock()
    client.messages.create.return_value = _message(text)
    return client


DRAFT_JSON = json.dumps(
    {"title": "제목", "metaDescription": "설명", "content": "<h2>A</h2>[CTA_PLACEHOLDER]"},
    ensure_ascii=False,
)


class TestParseDraft:
    def test_reads_json_wrapped_in_prose(self) -> None:
        draft = parse_draft(f"Here you go:\n```json\n{DRAFT_JSON}\n```\nEnjoy")

        assert draft.title == "제목"
        assert draft.meta_description == "설명"
        assert draft.body_markup == "<h2>A</h2>[CTA_PLACEHOLDER]"

    def test_meta_description_is_optional(self) -> None:
        draft = parse_draft('{"title": "t", "content": "c"}')

        assert draft.meta_description == ""

    @pytest.mark.parametrize(
        "text",
        [
            "no json here",
            "{not: valid}",
            '{"title": "t"}',
            '{"content": "c"}',
            "",
        ],
    )
    def test_unusable_responses_raise(self, text) -> None:
        with pytest.raises(GenerationError):
            parse_draft(text)


def test_generate_draft_sends_profile_prompts_and_model_settings() -> None:
    client = _client(DRAFT_JSON)
    config = PipelineConfig(draft_profile="strict", claude_model="m", claude_max_tokens=123)

    draft = generate_draft(client, "연말정산", AnalysisRecord(keyword="연말정산"), config)

    kwargs = client.messages.create.call_args.kwargs
    assert kwargs["model"] == "m"
    assert kwargs["max_tokens"] == 123
    assert "No Markdown syntax at all" in kwargs["system"]
    assert "연말정산" in kwargs["messages"][0]["content"]
    assert draft.title == "제목"


def test_api_failure_becomes_generation_error() -> None:
    client = MagicMock()
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    client.messages.create.side_effect = anthropic.APIConnectionError(request=request)

    with pytest.raises(GenerationError):
        generate_draft(client, "kw", AnalysisRecord(keyword="kw"), PipelineConfig())


def test_malformed_model_output_becomes_generation_error() -> None:
    with pytest.raises(GenerationError):
        generate_draft(_client("Sorry, I can't."), "kw", AnalysisRecord(keyword="kw"), PipelineConfig())


def test_make_client_requires_key() -> None:
    with pytest.raises(ValueError):
        make_client("")


def test_make_client_does_not_retry() -> None:
    assert make_client("sk-test").max_retries == 0
