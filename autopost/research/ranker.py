"""Normalize raw search results and order them authoritative-first."""

from __future__ import annotations

from typing import Iterable

from autopost.models import SearchResult


def is_authoritative(url: str, allowlist: Iterable[str]) -> bool:
    """True if any allowlisted domain appears anywhere in the URL.

    Plain case-sensitive substring containment: a query parameter that
    mentions a listed domain also counts.
    """
    return any(domain in url for domain in allowlist)


def to_search_result(raw: dict, default_rank: int, allowlist: Iterable[str]) -> SearchResult:
    """Convert one provider record ({title, link, snippet, position, date})."""
    url = raw.get("link") or raw.get("url") or ""
    rank = raw.get("position")
    if not isinstance(rank, int):
        rank = default_rank
    return SearchResult(
        title=raw.get("title") or "",
        url=url,
        snippet=raw.get("snippet") or "",
        rank=rank,
        is_authoritative=is_authoritative(url, allowlist),
        publish_date=raw.get("date") or None,
    )


def sort_key(result: SearchResult) -> tuple[bool, int]:
    return (not result.is_authoritative, result.rank)


def rank_results(
    raw_results: list[dict],
    allowlist: Iterable[str],
    limit: int = 7,
) -> list[SearchResult]:
    """Return at most ``limit`` results, authoritative first, then by rank."""
    allowlist = list(allowlist)
    results = [
        to_search_result(raw, default_rank=i, allowlist=allowlist)
        for i, raw in enumerate(raw_results, 1)
    ]
    results.sort(key=sort_key)
    return results[:limit]


def rerank(results: list[SearchResult], limit: int = 7) -> list[SearchResult]:
    """Re-apply the ranking order to already normalized results."""
    return sorted(results, key=sort_key)[:limit]


def merge_official(
    ranked: list[SearchResult],
    official: list[SearchResult],
) -> list[SearchResult]:
    """Append official-search hits and move every authoritative entry up front.

    Order inside each partition is kept as given.
    """
    merged = list(ranked) + list(official)
    merged.sort(key=lambda r: not r.is_authoritative)
    return merged
