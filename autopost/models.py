"""Records passed between pipeline steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class SearchResult:
    title: str
    url: str
    snippet: str
    rank: int  # 1-based, provider order
    is_authoritative: bool = False
    publish_date: Optional[str] = None


@dataclass
class PageSample:
    url: str
    text_excerpt: str
    headings: list[str] = field(default_factory=list)
    publish_date: Optional[str] = None


@dataclass
class AnalysisRecord:
    """Everything the draft prompt needs to know about the competition."""

    keyword: str
    ranked_titles: list[str] = field(default_factory=list)
    outline_hints: list[str] = field(default_factory=list)
    authoritative_excerpts: list[dict] = field(default_factory=list)
    recent_excerpts: list[dict] = field(default_factory=list)


@dataclass
class Draft:
    title: str
    meta_description: str
    body_markup: str


@dataclass
class PublishableArticle:
    title: str
    meta_description: str
    body_markup: str
