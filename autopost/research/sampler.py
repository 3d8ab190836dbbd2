"""Fetch top-ranked pages and pull out text, H2 outline and publish date.

Every fetch is independent: a page that times out, errors, or answers with
a non-2xx status simply yields ``None`` in the output list. Nothing is
retried and nothing is raised to the caller.
"""

from __future__ import annotations

import re
from typing import Optional

import requests
from bs4 import BeautifulSoup

from autopost.models import PageSample, SearchResult
from autopost.research.dates import KOREAN_DATE_RE, NUMERIC_DATE_RE

USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
TEXT_LIMIT = 3000
HEADING_LIMIT = 10

# Checked in order; first hit wins.
DATE_META_TAGS = [
    {"property": "article:published_time"},
    {"name": "date"},
    {"name": "pubdate"},
]


def _clean_text(text: str) -> str:
    """Normalize whitespace and strip."""
    if not text:
        return ""
    return re.sub(r"\s+", " ", text).strip()


def extract_text(soup: BeautifulSoup, limit: int = TEXT_LIMIT) -> str:
    for tag in soup(["script", "style"]):
        tag.decompose()
    return _clean_text(soup.get_text(" "))[:limit]


def extract_headings(soup: BeautifulSoup, limit: int = HEADING_LIMIT) -> list[str]:
    headings = []
    for h2 in soup.find_all("h2"):
        text = _clean_text(h2.get_text(" "))
        if text:
            headings.append(text)
    return headings[:limit]


def extract_publish_date(html: str, soup: BeautifulSoup) -> Optional[str]:
    """Find a publish date: meta tags first, then date-like text in the raw HTML."""
    for attrs in DATE_META_TAGS:
        meta = soup.find("meta", attrs=attrs)
        if meta and meta.get("content"):
            return meta["content"].strip()

    for pattern in (NUMERIC_DATE_RE, KOREAN_DATE_RE):
        match = pattern.search(html)
        if match:
            return match.group(0)
    return None


def parse_page(url: str, html: str) -> PageSample:
    soup = BeautifulSoup(html, "html.parser")
    publish_date = extract_publish_date(html, soup)
    headings = extract_headings(soup)
    text = extract_text(soup)
    return PageSample(url=url, text_excerpt=text, headings=headings, publish_date=publish_date)


def fetch_page(url: str, timeout: float = 10.0, session=None) -> Optional[PageSample]:
    """Download and parse one page; None on any transport or HTTP failure."""
    http = session or requests
    try:
        resp = http.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    except requests.RequestException as e:
        print(f"  .. skipped {url} ({type(e).__name__})")
        return None
    if not resp.ok:
        print(f"  .. skipped {url} (HTTP {resp.status_code})")
        return None
    return parse_page(url, resp.text)


def sample_pages(
    results: list[SearchResult],
    max_pages: int = 5,
    timeout: float = 10.0,
    session=None,
) -> list[Optional[PageSample]]:
    """Fetch the first ``max_pages`` results one after another.

    The returned list is index-aligned with ``results[:max_pages]``; dropped
    pages are ``None``.
    """
    samples: list[Optional[PageSample]] = []
    for result in results[:max_pages]:
        samples.append(fetch_page(result.url, timeout=timeout, session=session))
    fetched = sum(1 for s in samples if s is not None)
    print(f"  OK Sampled {fetched}/{len(samples)} pages")
    return samples
