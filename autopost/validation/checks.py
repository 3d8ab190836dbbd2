"""Individual quality checks and the main validate_article orchestrator."""

import re

from autopost.models import PublishableArticle
from autopost.validation.report import compute_grade

TITLE_MAX_CHARS = 55
META_MAX_CHARS = 150
MIN_TEXT_CHARS = 1500
H2_RANGE = (3, 5)
KEYWORD_RANGE = (7, 10)

EMOJI_RE = re.compile(
    "["
    "\U0001F300-\U0001FAFF"  # symbols & pictographs, emoticons, transport, ...
    "\U00002600-\U000027BF"  # misc symbols, dingbats
    "\U0001F1E6-\U0001F1FF"  # flags
    "]"
)
MARKDOWN_RESIDUE_RES = {
    "heading": re.compile(r"^#{1,6} ", re.MULTILINE),
    "bold": re.compile(r"\*\*[^*]+\*\*"),
    "list": re.compile(r"^- ", re.MULTILINE),
}


# ── Main validation entry point ──────────────────────────────────────────


def validate_article(article: PublishableArticle, keyword: str, cta_markup: str = "") -> dict:
    """Run all checks on a normalized article.

    Returns a dict with per-check results, issues, warnings, grade, and
    overall pass/fail. Nothing here blocks publishing.
    """
    body = article.body_markup
    results = {
        "title_length": check_title_length(article.title),
        "meta_length": check_meta_length(article.meta_description),
        "text_length": check_text_length(body),
        "h2_count": check_h2_count(body),
        "keyword_count": check_keyword_count(body, keyword),
        "no_emoji": check_no_emoji(article.title + "\n" + body),
        "no_markdown": check_no_markdown(body),
        "cta": check_cta(body, cta_markup),
    }

    issues, warnings = _collect_issues(results)
    results["issues"] = issues
    results["warnings"] = warnings
    results["pass"] = len(issues) == 0
    results["grade"] = compute_grade(issues, warnings)
    return results


# ── Issue aggregation ─────────────────────────────────────────────────────


def _collect_issues(results: dict) -> tuple[list[str], list[str]]:
    issues = []
    warnings = []

    title = results["title_length"]
    if not title["pass"]:
        warnings.append(f"Title too long: {title['count']} chars (max {TITLE_MAX_CHARS})")

    meta = results["meta_length"]
    if meta["count"] == 0:
        issues.append("Missing meta description")
    elif not meta["pass"]:
        warnings.append(f"Meta description too long: {meta['count']} chars (max {META_MAX_CHARS})")

    text = results["text_length"]
    if not text["pass"]:
        issues.append(f"Too short: {text['count']} chars (need {MIN_TEXT_CHARS}+)")

    h2 = results["h2_count"]
    if h2["count"] < H2_RANGE[0]:
        issues.append(f"Too few H2s: {h2['count']} (need {H2_RANGE[0]}-{H2_RANGE[1]})")
    elif h2["count"] > H2_RANGE[1]:
        warnings.append(f"Many H2s: {h2['count']} (target {H2_RANGE[0]}-{H2_RANGE[1]})")

    kw = results["keyword_count"]
    if kw["count"] < KEYWORD_RANGE[0]:
        warnings.append(f"Keyword used {kw['count']} times (target {KEYWORD_RANGE[0]}-{KEYWORD_RANGE[1]})")
    elif kw["count"] > KEYWORD_RANGE[1]:
        warnings.append(f"Keyword stuffing: {kw['count']} uses (target {KEYWORD_RANGE[0]}-{KEYWORD_RANGE[1]})")

    if not results["no_emoji"]["pass"]:
        warnings.append(f"Contains emoji: {' '.join(results['no_emoji']['found'][:5])}")

    if not results["no_markdown"]["pass"]:
        issues.append(f"Markdown left in body: {', '.join(results['no_markdown']['found'])}")

    if not results["cta"]["pass"]:
        issues.append(f"CTA block appears {results['cta']['count']} times (need exactly 1)")

    return issues, warnings


# ── Individual check functions ────────────────────────────────────────────


def visible_text(html: str) -> str:
    """Strip tags; what a reader (and a character counter) sees."""
    text = re.sub(r"<[^>]+>", "", html)
    return re.sub(r"\s+", " ", text).strip()


def check_title_length(title: str) -> dict:
    return {"count": len(title), "pass": 0 < len(title) <= TITLE_MAX_CHARS}


def check_meta_length(meta: str) -> dict:
    return {"count": len(meta), "pass": 0 < len(meta) <= META_MAX_CHARS}


def check_text_length(body: str) -> dict:
    count = len(visible_text(body))
    return {"count": count, "pass": count >= MIN_TEXT_CHARS}


def check_h2_count(body: str) -> dict:
    h2s = re.findall(r"<h2[^>]*>(.*?)</h2>", body, re.IGNORECASE | re.DOTALL)
    count = len(h2s)
    return {"count": count, "headers": h2s, "pass": H2_RANGE[0] <= count <= H2_RANGE[1]}


def check_keyword_count(body: str, keyword: str) -> dict:
    text = visible_text(body).lower()
    count = text.count(keyword.lower()) if keyword else 0
    return {"count": count, "pass": KEYWORD_RANGE[0] <= count <= KEYWORD_RANGE[1]}


def check_no_emoji(text: str) -> dict:
    found = EMOJI_RE.findall(text)
    return {"pass": not found, "found": found}


def check_no_markdown(body: str) -> dict:
    found = [name for name, pattern in MARKDOWN_RESIDUE_RES.items() if pattern.search(body)]
    return {"pass": not found, "found": found}


def check_cta(body: str, cta_markup: str) -> dict:
    if not cta_markup:
        return {"count": 0, "pass": True}
    count = body.count(cta_markup)
    return {"count": count, "pass": count == 1}
