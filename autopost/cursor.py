"""Persisted keyword queue position (``keywords.json``).

File format::

    {"currentIndex": 3, "keywords": ["...", "..."]}

The file is read once at the start of a run and overwritten only after the
post for ``keywords[currentIndex]`` was published.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class CursorState:
    position: int = 0
    items: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not 0 <= self.position <= len(self.items):
            raise ValueError(
                f"Cursor position {self.position} outside 0..{len(self.items)}"
            )


def is_exhausted(state: CursorState) -> bool:
    return state.position >= len(state.items)


def current_item(state: CursorState) -> Optional[str]:
    if is_exhausted(state):
        return None
    return state.items[state.position]


def advance(state: CursorState) -> CursorState:
    """Return the state pointing at the next item. Does not persist."""
    return CursorState(position=state.position + 1, items=state.items)


def load_cursor(path: Path) -> CursorState:
    """Read the queue file.

    An index past the end (e.g. after the keyword list was trimmed) loads as
    exhausted; a negative one as the start.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    items = tuple(data.get("keywords", []))
    position = int(data.get("currentIndex", 0))
    return CursorState(position=min(max(position, 0), len(items)), items=items)


def save_cursor(path: Path, state: CursorState) -> None:
    data = {"currentIndex": state.position, "keywords": list(state.items)}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
