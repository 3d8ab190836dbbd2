"""Combine ranked results and page samples into one AnalysisRecord."""

from __future__ import annotations

from datetime import date
from typing import Optional

from autopost.models import AnalysisRecord, PageSample, SearchResult
from autopost.research.dates import is_recent
from autopost.research.outline import aggregate_headings

EXCERPT_LIMIT = 1000


def build_analysis(
    keyword: str,
    ranked: list[SearchResult],
    samples: list[Optional[PageSample]],
    outline_size: int = 8,
    recent_months: int = 3,
    today: Optional[date] = None,
) -> AnalysisRecord:
    """Build the analysis handed to the draft prompt.

    ``samples`` is index-aligned with the front of ``ranked``; ``None``
    entries (pages that could not be fetched) contribute nothing.
    """
    authoritative_excerpts = []
    recent_excerpts = []

    for result, sample in zip(ranked, samples):
        if sample is None:
            continue
        if result.is_authoritative:
            authoritative_excerpts.append({
                "title": result.title,
                "url": result.url,
                "snippet": result.snippet,
                "excerpt": sample.text_excerpt[:EXCERPT_LIMIT],
            })
        page_date = sample.publish_date or result.publish_date
        if is_recent(page_date, today=today, months=recent_months):
            recent_excerpts.append({
                "title": result.title,
                "url": result.url,
                "date": page_date,
                "snippet": result.snippet,
            })

    return AnalysisRecord(
        keyword=keyword,
        ranked_titles=[r.title for r in ranked],
        outline_hints=aggregate_headings(samples, top_n=outline_size),
        authoritative_excerpts=authoritative_excerpts,
        recent_excerpts=recent_excerpts,
    )
