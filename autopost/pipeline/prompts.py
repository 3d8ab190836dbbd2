"""Build the system and user prompts for Claude draft generation."""

from __future__ import annotations

from datetime import date
from typing import Optional

from autopost.config import CONTENT_LANGUAGE
from autopost.models import AnalysisRecord


# ── System prompt ─────────────────────────────────────────────────────────


_BASE_SYSTEM_PROMPT = f"""You are a professional blog writer with ten years of experience and a Google SEO specialist. You write in {CONTENT_LANGUAGE}.

## CORE PRINCIPLE: TRUSTWORTHY INFORMATION

### Source priority (very important)
1. Official documents and public-institution sources come first
2. Use only information from the last 3 months
3. Never include outdated or unverified information
4. Figures, statistics and policy details always come with their source
5. No hedging phrases ("reportedly", "it is said that")

### Writing style
- Natural, conversational tone (the way a person talks to a friend)
- Include personal experience ("when I actually tried it", "honestly")
- Must not read like AI-written text
- Precise information with concrete numbers and dates

### Google SEO
- Title: keyword near the front, 55 characters max
- Keyword within the first 100 characters of the opening paragraph
- 3-5 H2 sections, each H2 naturally containing the keyword
- Keyword density 1.5-2.5%
- Meta description: contains the keyword, 150 characters max

### Structure
- Opening: 2-3 sentences that empathize with the reader's problem
- Put the [IMAGE_PLACEHOLDER] token right after the opening
- Body: 3-5 H2 sections
- Mention the product naturally mid-article with an internal link
- Closing: key summary + call to action
- Put the [CTA_PLACEHOLDER] token at the very end
- At least 1500 characters in total
"""

_STRICT_FORMAT_RULES = """
## FORBIDDEN (STRICT)
- No emoji at all
- No Markdown syntax at all: ##, **, *, #, - and so on
- Use HTML tags only
- No information older than last year
- No unverified figures or statistics

## HTML FORMAT (REQUIRED)
- Subheadings: <h2>Heading</h2> (never ##)
- Emphasis: <strong>text</strong> (never **)
- Paragraphs: <p>text</p>
- Lists: <ul><li>item</li></ul> (never -)
"""

_PERMISSIVE_FORMAT_RULES = """
## FORMAT
- No emoji at all
- Prefer HTML tags (<h2>, <p>, <strong>, <ul><li>)
- Light Markdown is tolerated where it is simpler: ## for H2, ### for H3, **bold**, *italic*, "- " list items
- No information older than last year
- No unverified figures or statistics
"""


def build_system_prompt(profile: str = "strict") -> str:
    """Return the system-level instructions for the given draft profile."""
    rules = _STRICT_FORMAT_RULES if profile == "strict" else _PERMISSIVE_FORMAT_RULES
    return _BASE_SYSTEM_PROMPT + rules


# ── User prompt sections ──────────────────────────────────────────────────


def _build_official_section(analysis: AnalysisRecord) -> str:
    if not analysis.authoritative_excerpts:
        return "No official-source results found."
    return "\n".join(
        f"- {s['title']}: {s['snippet']}" for s in analysis.authoritative_excerpts
    )


def _build_recent_section(analysis: AnalysisRecord) -> str:
    if not analysis.recent_excerpts:
        return "No recent information found."
    return "\n".join(
        f"- [{s.get('date') or 'recent'}] {s['title']}: {s['snippet']}"
        for s in analysis.recent_excerpts
    )


def _build_competitor_section(analysis: AnalysisRecord) -> str:
    titles = " | ".join(analysis.ranked_titles) or "(none)"
    headings = ", ".join(analysis.outline_hints) or "(none)"
    return f"""**Competitor analysis**:
- Top-ranking titles: {titles}
- Frequently used subheadings: {headings}"""


def _build_format_reminder(profile: str) -> str:
    if profile == "strict":
        return """4. **No Markdown, ever**:
   - Never ## -> use <h2>Heading</h2>
   - Never ** -> use <strong>text</strong>
   - No emoji
   - Pure HTML only"""
    return """4. **Formatting**:
   - HTML preferred; light Markdown (##, **, - ) is converted automatically
   - No emoji"""


def build_user_prompt(
    keyword: str,
    analysis: AnalysisRecord,
    site_url: str,
    profile: str = "strict",
    today: Optional[date] = None,
) -> str:
    """Assemble the per-keyword request including research context."""
    today = today or date.today()

    return f"""Write a blog post optimized for Google SEO for the keyword below.

**Keyword**: {keyword}
**Reference date**: {today.isoformat()} (use the latest information as of this date)

## Official / authoritative sources to rely on:
{_build_official_section(analysis)}

## Information from the last 3 months:
{_build_recent_section(analysis)}

{_build_competitor_section(analysis)}

**Requirements**:

1. **Title (55 characters max)**: keyword near the front, makes people click

2. **Body structure**:
   - Opening (2-3 sentences): empathize with the reader, keyword within the first 100 characters
   - [IMAGE_PLACEHOLDER]
   - 3-5 H2 sections (each H2 contains a variation of the keyword)
   - **Base the article on the official and recent information above**
   - Concrete examples, numbers and data in every section (cite sources where possible)
   - Mid-article internal link, placed where it fits the context: <a href="{site_url}">AI 블로그 자동화 프로그램</a>
   - Closing: three-line summary + next action
   - [CTA_PLACEHOLDER] token at the very end

3. **Reliability**:
   - Prefer the official information provided
   - Only information from the last 3 months
   - Concrete dates, figures and sources

{_build_format_reminder(profile)}

5. **SEO**:
   - Keyword used naturally 7-10 times
   - Important keywords emphasized with <strong>text</strong>

6. **At least 1500 characters**

Respond with JSON only:
{{
  "title": "title (no emoji)",
  "metaDescription": "meta description, 150 characters max, contains the keyword",
  "content": "HTML body (no emoji, contains [IMAGE_PLACEHOLDER])"
}}"""
