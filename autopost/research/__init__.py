"""Competitor research: search, ranking, page sampling, outline aggregation."""

from autopost.research.analysis import build_analysis
from autopost.research.outline import aggregate_headings, heading_frequencies
from autopost.research.ranker import is_authoritative, merge_official, rank_results, rerank
from autopost.research.sampler import fetch_page, sample_pages
from autopost.research.search import search_google, search_official_docs

__all__ = [
    "build_analysis",
    "aggregate_headings",
    "heading_frequencies",
    "is_authoritative",
    "merge_official",
    "rank_results",
    "rerank",
    "fetch_page",
    "sample_pages",
    "search_google",
    "search_official_docs",
]
