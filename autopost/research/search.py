"""Google search through SerpAPI: top results and official-source results."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

import requests

from autopost.config import (
    OFFICIAL_SEARCH_NUM_RESULTS,
    OFFICIAL_SITES,
    RECENT_FILTER,
    SEARCH_LOCALE,
    SEARCH_NUM_RESULTS,
    SERPAPI_ENDPOINT,
)
from autopost.models import SearchResult
from autopost.research.ranker import rank_results, to_search_result


def _serpapi_get(params: dict, api_key: str, session=None, timeout: float = 30) -> Optional[list[dict]]:
    """Call SerpAPI; return ``organic_results`` or None if the key is absent."""
    http = session or requests
    resp = http.get(SERPAPI_ENDPOINT, params={**params, "api_key": api_key}, timeout=timeout)
    resp.raise_for_status()
    return resp.json().get("organic_results")


def search_google(
    keyword: str,
    api_key: str,
    allowlist: Iterable[str],
    limit: int = 7,
    recent_only: bool = True,
    session=None,
) -> list[SearchResult]:
    """Search Google for ``keyword`` and return ranked results.

    With ``recent_only`` the query is restricted to the last three months;
    if that comes back empty, the search is repeated once without the
    filter. A missing and an empty ``organic_results`` are treated alike.
    Transport errors give an empty list.
    """
    allowlist = list(allowlist)
    params = {"q": keyword, "num": str(SEARCH_NUM_RESULTS), **SEARCH_LOCALE}
    if recent_only:
        params["tbs"] = RECENT_FILTER

    label = "last 3 months" if recent_only else "all time"
    print(f"  -> Searching Google for \"{keyword}\" ({label})...")
    try:
        organic = _serpapi_get(params, api_key, session=session)
    except (requests.RequestException, ValueError) as e:
        print(f"  Warning: search failed ({e}), continuing without results")
        return []

    if not organic:
        if recent_only:
            print("  .. no recent results, searching all time instead")
            return search_google(
                keyword, api_key, allowlist, limit=limit, recent_only=False, session=session
            )
        print("  Warning: no search results, continuing without them")
        return []

    ranked = rank_results(organic, allowlist, limit=limit)
    official = sum(1 for r in ranked if r.is_authoritative)
    print(f"  OK {len(organic)} results, kept {len(ranked)} ({official} authoritative)")
    return ranked


def search_official_docs(keyword: str, api_key: str, session=None) -> list[SearchResult]:
    """Search only official/public-institution sites. Every hit is authoritative."""
    sites = " OR ".join(f"site:{site}" for site in OFFICIAL_SITES)
    params = {
        "q": f"{keyword} ({sites})",
        "num": str(OFFICIAL_SEARCH_NUM_RESULTS),
        **SEARCH_LOCALE,
    }

    print(f"  -> Searching official sources for \"{keyword}\"...")
    try:
        organic = _serpapi_get(params, api_key, session=session)
    except (requests.RequestException, ValueError) as e:
        print(f"  Warning: official search failed ({e})")
        return []

    if not organic:
        print("  .. no official results")
        return []

    results = [
        replace(to_search_result(raw, default_rank=i, allowlist=()), is_authoritative=True)
        for i, raw in enumerate(organic, 1)
    ]
    print(f"  OK {len(results)} official results")
    return results
