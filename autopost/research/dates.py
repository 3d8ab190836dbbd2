"""Publish-date parsing and the "recent enough" check."""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Optional

KOREAN_DATE_RE = re.compile(r"(\d{4})년\s*(\d{1,2})월\s*(\d{1,2})일")
NUMERIC_DATE_RE = re.compile(r"(\d{4})[-/.](\d{1,2})[-/.](\d{1,2})")


def parse_date(date_str: Optional[str]) -> Optional[date]:
    """Best-effort parse of the date formats found on scraped pages.

    Handles ISO timestamps (``2025-03-01T09:00:00+09:00``), numeric dates
    with ``-``, ``/`` or ``.`` separators, and ``2025년 3월 1일``.
    Returns None when nothing sensible can be read.
    """
    if not date_str:
        return None
    text = date_str.strip()

    match = KOREAN_DATE_RE.search(text)
    if match is None:
        match = NUMERIC_DATE_RE.search(text)
    if match:
        year, month, day = (int(g) for g in match.groups())
        try:
            return date(year, month, day)
        except ValueError:
            return None

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def months_before(today: date, months: int) -> date:
    """Same day ``months`` calendar months earlier, clamped to month end."""
    month_index = today.year * 12 + (today.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(today.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def is_recent(date_str: Optional[str], today: Optional[date] = None, months: int = 3) -> bool:
    """True if the date is within the last ``months`` months.

    Missing or unreadable dates count as recent.
    """
    parsed = parse_date(date_str)
    if parsed is None:
        return True
    today = today or date.today()
    return parsed >= months_before(today, months)
