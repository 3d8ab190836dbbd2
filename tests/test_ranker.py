"""Unit tests for result ranking and authoritative-source detection."""

from __future__ import annotations

from autopost.models import SearchResult
from autopost.research.ranker import is_authoritative, merge_official, rank_results, rerank

ALLOWLIST = ["gov.kr", "python.org"]


def _raw(position: int, link: str) -> dict:
    return {"title": f"t{position}", "link": link, "snippet": f"s{position}", "position": position}


def _sample_raw() -> list[dict]:
    return [
        _raw(1, "https://blog.example.com/post"),
        _raw(2, "https://www.gov.kr/portal"),
        _raw(3, "https://news.example.com/a"),
        _raw(4, "https://docs.python.org/3/"),
        _raw(5, "https://cafe.example.com/b"),
    ]


def test_authoritative_results_come_first_then_by_rank() -> None:
    ranked = rank_results(_sample_raw(), ALLOWLIST)

    assert [r.rank for r in ranked] == [2, 4, 1, 3, 5]
    assert [r.is_authoritative for r in ranked] == [True, True, False, False, False]


def test_authoritative_match_is_plain_substring() -> None:
    assert is_authoritative("https://tracker.example.com/?ref=www.gov.kr", ALLOWLIST)
    assert not is_authoritative("https://WWW.GOV.KR/portal", ALLOWLIST)
    assert not is_authoritative("https://example.com", [])


def test_reranking_is_idempotent() -> None:
    ranked = rank_results(_sample_raw(), ALLOWLIST)

    assert rerank(ranked) == ranked
    assert rerank(rerank(ranked)) == ranked


def test_no_authoritative_entry_after_a_non_authoritative_one() -> None:
    ranked = rank_results(_sample_raw() * 3, ALLOWLIST, limit=15)

    seen_non_authoritative = False
    for result in ranked:
        if not result.is_authoritative:
            seen_non_authoritative = True
        else:
            assert not seen_non_authoritative


def test_truncates_to_limit_but_never_drops_below_it() -> None:
    many = [_raw(i, f"https://example.com/{i}") for i in range(1, 21)]

    assert len(rank_results(many, ALLOWLIST, limit=7)) == 7
    assert len(rank_results(many, ALLOWLIST, limit=5)) == 5
    assert len(rank_results(many[:3], ALLOWLIST, limit=7)) == 3


def test_missing_position_falls_back_to_list_order() -> None:
    raw = [
        {"title": "a", "link": "https://a.com", "snippet": ""},
        {"title": "b", "link": "https://b.com", "snippet": ""},
    ]

    ranked = rank_results(raw, ALLOWLIST)

    assert [r.rank for r in ranked] == [1, 2]
    assert [r.title for r in ranked] == ["a", "b"]


def test_provider_date_is_kept() -> None:
    raw = [{"title": "a", "link": "https://a.com", "snippet": "", "position": 1, "date": "3 days ago"}]

    assert rank_results(raw, ALLOWLIST)[0].publish_date == "3 days ago"


def test_merge_official_moves_official_hits_ahead_of_regular_results() -> None:
    ranked = [
        SearchResult("gov", "https://gov.kr/x", "", 2, True),
        SearchResult("blog", "https://blog.com", "", 1, False),
    ]
    official = [SearchResult("law", "https://law.go.kr/y", "", 1, True)]

    merged = merge_official(ranked, official)

    assert [r.title for r in merged] == ["gov", "law", "blog"]
