"""Frequency-ranked H2 outline across competitor pages."""

from __future__ import annotations

from typing import Iterable, Optional

from autopost.models import PageSample


def heading_frequencies(samples: Iterable[Optional[PageSample]]) -> dict[str, tuple[str, int]]:
    """Map lower-cased heading -> (first-seen original text, count).

    Keys are in first-seen order. Missing samples are skipped.
    """
    table: dict[str, tuple[str, int]] = {}
    for sample in samples:
        if sample is None:
            continue
        for heading in sample.headings:
            key = heading.lower()
            first_seen, count = table.get(key, (heading, 0))
            table[key] = (first_seen, count + 1)
    return table


def aggregate_headings(samples: Iterable[Optional[PageSample]], top_n: int = 8) -> list[str]:
    """Return the ``top_n`` most common headings, most frequent first.

    Ties keep first-seen order (``sorted`` is stable over the insertion
    ordered table).
    """
    table = heading_frequencies(samples)
    ranked = sorted(table.values(), key=lambda entry: entry[1], reverse=True)
    return [first_seen for first_seen, _ in ranked[:top_n]]
