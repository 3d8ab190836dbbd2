"""Unit tests for the heading frequency outline."""

from __future__ import annotations

from autopost.models import PageSample
from autopost.research.outline import aggregate_headings, heading_frequencies


def _page(*headings: str) -> PageSample:
    return PageSample(url="u", text_excerpt="", headings=list(headings))


def test_counts_case_insensitively_and_keeps_first_seen_casing() -> None:
    samples = [_page("A", "a", "B"), _page("A", "a")]

    assert heading_frequencies(samples) == {"a": ("A", 4), "b": ("B", 1)}
    assert aggregate_headings(samples) == ["A", "B"]


def test_missing_samples_are_skipped() -> None:
    samples = [None, _page("Cost"), None, _page("cost", "Setup")]

    assert aggregate_headings(samples) == ["Cost", "Setup"]


def test_ties_keep_first_seen_order() -> None:
    samples = [_page("X", "Y"), _page("Y", "X"), _page("Z")]

    assert aggregate_headings(samples) == ["X", "Y", "Z"]


def test_output_is_bounded_unique_and_sorted_by_frequency() -> None:
    samples = [_page(*[f"h{i}" for i in range(12)]), _page("h11", "H11", "h5")]

    outline = aggregate_headings(samples, top_n=8)
    table = heading_frequencies(samples)
    counts = [table[h.lower()][1] for h in outline]

    assert len(outline) == 8
    assert outline[:2] == ["h11", "h5"]
    assert len({h.lower() for h in outline}) == len(outline)
    assert counts == sorted(counts, reverse=True)


def test_empty_input() -> None:
    assert aggregate_headings([]) == []
    assert aggregate_headings([None, None]) == []
