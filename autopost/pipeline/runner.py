"""Orchestrate one run of the pipeline for the keyword under the cursor.

Steps:
1. Research: search, rank, sample pages, build the analysis
2. Illustration: find an image and upload it to the media library
3. Draft: Claude writes a JSON draft
4. Normalize: leftover Markdown and placeholders resolved
5. Publish: post created on WordPress, then the cursor advances
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from datetime import date
from html import escape
from pathlib import Path
from typing import Optional

import requests

from autopost.config import PipelineConfig
from autopost.cursor import advance, current_item, is_exhausted, load_cursor, save_cursor
from autopost.models import AnalysisRecord, PublishableArticle, SearchResult
from autopost.pipeline.blocks import build_cta_markup, build_hero_markup, build_mid_body_markup
from autopost.pipeline.generator import generate_draft, make_client
from autopost.pipeline.images import download_image, find_image
from autopost.pipeline.normalizer import normalize
from autopost.publishing.wordpress import WordPressClient, WordPressError
from autopost.research.analysis import build_analysis
from autopost.research.ranker import merge_official
from autopost.research.sampler import sample_pages
from autopost.research.search import search_google, search_official_docs
from autopost.validation import format_validation_report, validate_article


@dataclass
class RunResult:
    status: str  # "published", "exhausted" or "dry_run"
    keyword: Optional[str] = None
    post_url: Optional[str] = None
    position: int = 0
    total: int = 0


def _banner(text: str) -> None:
    print(f"\n{'='*60}")
    print(text)
    print(f"{'='*60}")


def research_keyword(
    keyword: str,
    config: PipelineConfig,
    session=None,
    today: Optional[date] = None,
) -> tuple[list[SearchResult], AnalysisRecord]:
    """Search, rank, sample and analyse the competition for ``keyword``."""
    ranked = search_google(
        keyword,
        config.serp_api_key,
        allowlist=config.official_domains,
        limit=config.max_results,
        session=session,
    )
    official = search_official_docs(keyword, config.serp_api_key, session=session)
    results = merge_official(ranked, official)

    print(f"  -> Sampling up to {config.max_pages} of {len(results)} pages...")
    samples = sample_pages(
        results, max_pages=config.max_pages, timeout=config.fetch_timeout, session=session
    )
    analysis = build_analysis(
        keyword,
        results,
        samples,
        outline_size=config.outline_size,
        recent_months=config.recent_months,
        today=today,
    )
    print(
        f"  OK Analysis: {len(analysis.ranked_titles)} titles, "
        f"{len(analysis.outline_hints)} outline hints, "
        f"{len(analysis.authoritative_excerpts)} official, "
        f"{len(analysis.recent_excerpts)} recent"
    )
    return results, analysis


def prepare_image(
    keyword: str,
    config: PipelineConfig,
    wp: WordPressClient,
    session=None,
) -> tuple[Optional[str], Optional[int]]:
    """Find, download and upload an illustration.

    Returns (hero_markup, media_id); (None, None) when any step fails.
    """
    candidate = find_image(keyword, config, session=session)
    if candidate is None:
        return None, None

    downloaded = download_image(candidate.url, session=session)
    if downloaded is None:
        return None, None
    content, content_type = downloaded

    extension = "png" if content_type == "image/png" else "jpg"
    filename = f"blog-image-{int(time.time() * 1000)}.{extension}"
    print(f"  -> Uploading {filename}...")
    try:
        media = wp.upload_media(content, filename, content_type=content_type)
    except (WordPressError, requests.RequestException) as e:
        print(f"  Warning: image upload failed ({e})")
        return None, None

    print(f"  OK Uploaded image: {media.get('source_url')}")
    hero = build_hero_markup(
        media.get("source_url") or candidate.url,
        alt=candidate.alt,
        credit=candidate.credit,
        credit_link=candidate.credit_link,
    )
    return hero, media.get("id")


def save_article_copy(article: PublishableArticle, output_dir: Path, position: int, keyword: str) -> Path:
    """Keep a local copy of exactly what was sent to WordPress."""
    output_dir.mkdir(parents=True, exist_ok=True)
    slug = re.sub(r"\W+", "-", keyword).strip("-") or "article"
    path = output_dir / f"{position + 1:03d}-{slug}.html"
    path.write_text(f"<h1>{escape(article.title)}</h1>\n{article.body_markup}", encoding="utf-8")
    return path


def run_once(
    config: PipelineConfig,
    dry_run: bool = False,
    anthropic_client=None,
    wp_client: Optional[WordPressClient] = None,
    session=None,
    today: Optional[date] = None,
) -> RunResult:
    """Process the keyword under the cursor; advance the cursor on success.

    Raises GenerationError or WordPressError on fatal failures; the cursor
    file is left untouched in that case.
    """
    state = load_cursor(config.keywords_path)
    total = len(state.items)
    if is_exhausted(state):
        print("All keywords have been published.")
        return RunResult(status="exhausted", position=state.position, total=total)

    keyword = current_item(state)
    _banner(f"Keyword {state.position + 1}/{total}: {keyword}")

    # ── 1. Research ───────────────────────────────────────────────────────
    print("\n[1/5] Research")
    _, analysis = research_keyword(keyword, config, session=session, today=today)

    if dry_run:
        print("\n  [DRY RUN] Would generate a post with:")
        print(f"    Titles: {analysis.ranked_titles[:3]}...")
        print(f"    Outline hints: {analysis.outline_hints}")
        print(f"    Official sources: {[s['url'] for s in analysis.authoritative_excerpts]}")
        print(f"    Recent sources: {[s['url'] for s in analysis.recent_excerpts]}")
        print(f"    Variant: image={config.image_source}, profile={config.draft_profile}, status={config.publish_status}")
        return RunResult(status="dry_run", keyword=keyword, position=state.position, total=total)

    wp = wp_client or WordPressClient(config.wp_url, config.wp_user, config.wp_app_password)
    client = anthropic_client or make_client(config.anthropic_api_key)

    # ── 2. Illustration ───────────────────────────────────────────────────
    print(f"\n[2/5] Image ({config.image_source})")
    hero_markup, media_id = prepare_image(keyword, config, wp, session=session)

    # ── 3. Draft ──────────────────────────────────────────────────────────
    print("\n[3/5] Draft")
    draft = generate_draft(client, keyword, analysis, config, today=today)

    # ── 4. Normalize + validate ───────────────────────────────────────────
    print("\n[4/5] Normalize")
    cta_markup = build_cta_markup(config.site_url)
    article = normalize(
        draft,
        hero_markup=hero_markup,
        cta_markup=cta_markup,
        mid_body_markup=build_mid_body_markup(config.site_url),
    )
    validation = validate_article(article, keyword, cta_markup=cta_markup)
    print(f"\n{format_validation_report(validation, keyword)}")

    # ── 5. Publish ────────────────────────────────────────────────────────
    print(f"\n[5/5] Publish ({config.publish_status})")
    post = wp.create_post(article, status=config.publish_status, featured_media=media_id)
    save_cursor(config.keywords_path, advance(state))

    # The post is live; a failed local copy must not stop the cursor.
    try:
        copy_path = save_article_copy(article, config.output_dir, state.position, keyword)
    except OSError as e:
        print(f"  Warning: could not save local copy ({e})")
        copy_path = None

    _banner("Published!")
    print(f"  URL: {post.get('link')}")
    print(f"  Image: {'yes' if hero_markup else 'no'}")
    print(f"  Local copy: {copy_path or 'not saved'}")
    print(f"  Progress: {state.position + 1}/{total}")

    return RunResult(
        status="published",
        keyword=keyword,
        post_url=post.get("link"),
        position=state.position + 1,
        total=total,
    )
