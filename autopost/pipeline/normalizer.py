"""Turn a model draft into publishable HTML.

The model is asked for pure HTML but regularly slips into Markdown. The
body goes through a fixed sequence of rewrite passes; each pass is a pure
``str -> str`` function and the order below is significant: the emphasis pass
would otherwise eat the ``**`` of the strong pass.

Passes:
    1. ``^## text$``  -> ``<h2>text</h2>``, ``^### text$`` -> ``<h3>text</h3>``
    2. ``**text**``   -> ``<strong>text</strong>``
    3. ``*text*``     -> ``<em>text</em>``
    4. ``^- text$``   -> ``<li>text</li>`` (no ``<ul>`` wrapper is added)
    5. first ``[IMAGE_PLACEHOLDER]`` -> hero image markup (or nothing)
    6. mid-body block inserted before the third ``<h2>``
    7. ``[CTA_PLACEHOLDER]`` -> CTA block, appended if the token is missing

Running ``normalize`` on its own output is a no-op.
"""

from __future__ import annotations

import re
from typing import Optional

from autopost.models import Draft, PublishableArticle

IMAGE_PLACEHOLDER = "[IMAGE_PLACEHOLDER]"
CTA_PLACEHOLDER = "[CTA_PLACEHOLDER]"

H2_LINE_RE = re.compile(r"^## (.+)$", re.MULTILINE)
H3_LINE_RE = re.compile(r"^### (.+)$", re.MULTILINE)
STRONG_RE = re.compile(r"\*\*([^*]+)\*\*")
EM_RE = re.compile(r"\*([^*]+)\*")
LIST_ITEM_RE = re.compile(r"^- (.+)$", re.MULTILINE)
H2_OPEN_TAG_RE = re.compile(r"<h2[^>]*>", re.IGNORECASE)

MID_BODY_BEFORE_H2 = 3  # 1-based


# ── Markdown passes ───────────────────────────────────────────────────────


def convert_headings(body: str) -> str:
    body = H2_LINE_RE.sub(r"<h2>\1</h2>", body)
    return H3_LINE_RE.sub(r"<h3>\1</h3>", body)


def convert_strong(body: str) -> str:
    return STRONG_RE.sub(r"<strong>\1</strong>", body)


def convert_emphasis(body: str) -> str:
    return EM_RE.sub(r"<em>\1</em>", body)


def convert_list_items(body: str) -> str:
    return LIST_ITEM_RE.sub(r"<li>\1</li>", body)


# ── Placeholder / block passes ────────────────────────────────────────────


def insert_hero_image(body: str, hero_markup: Optional[str]) -> str:
    return body.replace(IMAGE_PLACEHOLDER, hero_markup or "", 1)


def insert_mid_body(body: str, mid_body_markup: Optional[str]) -> str:
    """Insert the block right before the third <h2> opening tag, if there is one."""
    if not mid_body_markup or mid_body_markup in body:
        return body
    tags = list(H2_OPEN_TAG_RE.finditer(body))
    if len(tags) < MID_BODY_BEFORE_H2:
        return body
    at = tags[MID_BODY_BEFORE_H2 - 1].start()
    return body[:at] + mid_body_markup + body[at:]


def insert_cta(body: str, cta_markup: str) -> str:
    if CTA_PLACEHOLDER in body:
        return body.replace(CTA_PLACEHOLDER, cta_markup, 1)
    if cta_markup in body:
        return body
    return body + cta_markup


MARKDOWN_PASSES = (
    convert_headings,
    convert_strong,
    convert_emphasis,
    convert_list_items,
)


def normalize_body(
    body: str,
    hero_markup: Optional[str],
    cta_markup: str,
    mid_body_markup: Optional[str] = None,
) -> str:
    body = body or ""
    for rewrite in MARKDOWN_PASSES:
        body = rewrite(body)
    body = insert_hero_image(body, hero_markup)
    body = insert_mid_body(body, mid_body_markup)
    return insert_cta(body, cta_markup or "")


def normalize(
    draft: Draft,
    hero_markup: Optional[str],
    cta_markup: str,
    mid_body_markup: Optional[str] = None,
) -> PublishableArticle:
    """Resolve placeholders and leftover Markdown in ``draft``'s body."""
    return PublishableArticle(
        title=(draft.title or "").strip(),
        meta_description=(draft.meta_description or "").strip(),
        body_markup=normalize_body(draft.body_markup, hero_markup, cta_markup, mid_body_markup),
    )
