"""Ask Claude for a JSON article draft and parse it into a Draft."""

from __future__ import annotations

import json
import re
import time
from datetime import date
from typing import Optional

import anthropic

from autopost.config import PipelineConfig
from autopost.models import AnalysisRecord, Draft
from autopost.pipeline.prompts import build_system_prompt, build_user_prompt

JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


class GenerationError(RuntimeError):
    """The model did not return a usable draft. Fatal for the run."""


def make_client(api_key: str) -> anthropic.Anthropic:
    if not api_key:
        raise ValueError("CLAUDE_API_KEY not set. Add it to your .env file.")
    # One attempt per run; a failed run is picked up again by the next invocation.
    return anthropic.Anthropic(api_key=api_key, max_retries=0)


def _extract_text(message) -> str:
    """Concatenate the text blocks of a response."""
    return "".join(block.text for block in message.content if block.type == "text")


def parse_draft(text: str) -> Draft:
    """Pull the first {...} span out of ``text`` and read title/meta/content.

    Raises GenerationError if there is no JSON object or the required keys
    are missing.
    """
    match = JSON_OBJECT_RE.search(text or "")
    if not match:
        raise GenerationError("Response contained no JSON object")
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise GenerationError(f"Could not parse draft JSON: {e}") from e
    if not isinstance(data, dict):
        raise GenerationError("Draft JSON is not an object")

    title = data.get("title")
    content = data.get("content")
    if not title or not content:
        raise GenerationError("Draft JSON is missing 'title' or 'content'")

    return Draft(
        title=str(title),
        meta_description=str(data.get("metaDescription") or ""),
        body_markup=str(content),
    )


def generate_draft(
    client: anthropic.Anthropic,
    keyword: str,
    analysis: AnalysisRecord,
    config: PipelineConfig,
    today: Optional[date] = None,
) -> Draft:
    """Generate a single draft for ``keyword`` by calling the Claude API.

    Args:
        client: Anthropic API client.
        keyword: The search keyword being targeted.
        analysis: Competitor analysis for the keyword.
        config: Run configuration (model, token budget, draft profile, site URL).
        today: Reference date written into the prompt.

    Returns:
        The parsed Draft; the body may still contain Markdown and placeholders.
    """
    system_prompt = build_system_prompt(config.draft_profile)
    user_prompt = build_user_prompt(
        keyword=keyword,
        analysis=analysis,
        site_url=config.site_url,
        profile=config.draft_profile,
        today=today,
    )

    print(f"  -> Generating draft ({config.claude_model}, {config.draft_profile} profile)...")
    start = time.time()

    try:
        message = client.messages.create(
            model=config.claude_model,
            max_tokens=config.claude_max_tokens,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )
    except anthropic.APIError as e:
        raise GenerationError(f"Claude API error: {e}") from e

    elapsed = time.time() - start
    draft = parse_draft(_extract_text(message))
    usage = message.usage
    print(
        f"  OK Draft \"{draft.title}\" in {elapsed:.1f}s "
        f"({usage.input_tokens} in / {usage.output_tokens} out)"
    )
    return draft
