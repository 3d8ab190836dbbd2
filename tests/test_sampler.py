"""Unit tests for page sampling and content extraction."""

from __future__ import annotations

from unittest.mock import MagicMock

import requests

from autopost.models import SearchResult
from autopost.research.sampler import fetch_page, parse_page, sample_pages

PAGE = """<html><head>
<meta property="article:published_time" content="2025-01-02T10:00:00+09:00">
<meta name="date" content="2020-01-01">
<style>.hidden { display: none; }</style>
<script>var tracking = 1;</script>
</head><body>
<H2>First <b>Part</b></H2>
<p>Hello     world</p>
<h2 class="title">Second</h2>
<p>Posted 2019-05-06</p>
</body></html>"""


def _ok(text: str) -> MagicMock:
    return MagicMock(ok=True, status_code=200, text=text)


def _result(url: str) -> SearchResult:
    return SearchResult(title=url, url=url, snippet="", rank=1)


def test_parse_page_extracts_text_headings_and_date() -> None:
    sample = parse_page("https://a.com", PAGE)

    assert sample.url == "https://a.com"
    assert sample.headings == ["First Part", "Second"]
    assert sample.publish_date == "2025-01-02T10:00:00+09:00"
    assert "Hello world" in sample.text_excerpt
    assert "tracking" not in sample.text_excerpt
    assert "display" not in sample.text_excerpt


def test_date_falls_back_through_meta_then_text_patterns() -> None:
    by_meta = parse_page("u", '<meta name="pubdate" content="2024-07-01"><p>2019.1.1</p>')
    numeric = parse_page("u", "<p>Updated 2024.3.5 by admin</p>")
    korean = parse_page("u", "<p>작성일 2024년 3월 5일</p>")
    missing = parse_page("u", "<p>no date here</p>")

    assert by_meta.publish_date == "2024-07-01"
    assert numeric.publish_date == "2024.3.5"
    assert korean.publish_date == "2024년 3월 5일"
    assert missing.publish_date is None


def test_empty_headings_dropped_and_multiline_headings_kept() -> None:
    sample = parse_page("u", "<h2></h2><h2>  </h2><h2>Split\n  across\nlines</h2><h2>Last</h2>")

    assert sample.headings == ["Split across lines", "Last"]


def test_text_and_headings_are_bounded() -> None:
    html = "".join(f"<h2>Heading {i}</h2>" for i in range(12)) + "<p>" + "word " * 2000 + "</p>"

    sample = parse_page("u", html)

    assert len(sample.headings) == 10
    assert len(sample.text_excerpt) <= 3000


def test_fetch_page_returns_none_on_http_error_status() -> None:
    session = MagicMock()
    session.get.return_value = MagicMock(ok=False, status_code=503, text="")

    assert fetch_page("https://a.com", session=session) is None


def test_fetch_page_returns_none_on_timeout() -> None:
    session = MagicMock()
    session.get.side_effect = requests.Timeout("slow")

    assert fetch_page("https://a.com", timeout=10, session=session) is None
    assert session.get.call_args.kwargs["timeout"] == 10


def test_sample_pages_keeps_alignment_and_drops_failures_silently() -> None:
    session = MagicMock()
    session.get.side_effect = [_ok("<h2>A</h2>"), requests.ConnectionError("down"), _ok("<h2>C</h2>")]
    results = [_result(f"https://{c}.com") for c in "abcd"]

    samples = sample_pages(results, max_pages=3, session=session)

    assert len(samples) == 3
    assert samples[0].headings == ["A"]
    assert samples[1] is None
    assert samples[2].headings == ["C"]
    called_urls = [c.args[0] for c in session.get.call_args_list]
    assert called_urls == ["https://a.com", "https://b.com", "https://c.com"]
