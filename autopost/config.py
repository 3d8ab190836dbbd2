"""Central configuration for the auto-posting pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ── Paths ──────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent.parent
KEYWORDS_JSON = ROOT_DIR / "keywords.json"
ARTICLE_OUTPUT_DIR = ROOT_DIR / "output" / "articles"

# ── Claude settings ────────────────────────────────────────────────────────
CLAUDE_MODEL = "claude-sonnet-4-20250514"
CLAUDE_MAX_TOKENS = 6000

# ── Search settings ───────────────────────────────────────────────────────
SERPAPI_ENDPOINT = "https://serpapi.com/search.json"
SEARCH_LOCALE = {
    "location": "South Korea",
    "hl": "ko",
    "gl": "kr",
    "google_domain": "google.co.kr",
}
SEARCH_NUM_RESULTS = 15
OFFICIAL_SEARCH_NUM_RESULTS = 5
RECENT_FILTER = "qdr:m3"  # last 3 months
OFFICIAL_SITES = [
    "gov.kr", "or.kr", "go.kr", "docs.google.com", "developer.android.com",
]

# ── Research settings ─────────────────────────────────────────────────────
MAX_RANKED_RESULTS = 7  # simpler variants use 5
MAX_SAMPLED_PAGES = 5  # simpler variants use 3
FETCH_TIMEOUT = 10.0  # seconds per page
OUTLINE_SIZE = 8
RECENT_MONTHS = 3

# Substring-matched against the full result URL, not the hostname.
OFFICIAL_DOMAINS = [
    # Technical documentation
    "docs.google.com", "developer.android.com", "developer.apple.com",
    "docs.microsoft.com", "learn.microsoft.com", "aws.amazon.com/docs",
    "cloud.google.com/docs", "docs.aws.amazon.com", "firebase.google.com/docs",
    "reactjs.org", "vuejs.org", "angular.io", "nodejs.org", "python.org",
    "developer.mozilla.org", "w3.org", "github.com/docs",
    # Government / public institutions
    "gov.kr", "korea.kr", "mois.go.kr", "nts.go.kr", "hometax.go.kr",
    "nhis.or.kr", "nps.or.kr", "bokjiro.go.kr", "law.go.kr",
    # Finance
    "fss.or.kr", "kofia.or.kr", "kbstar.com", "shinhan.com", "wooribank.com",
    # Reference
    "wikipedia.org", "namu.wiki", "terms.naver.com", "ko.dict.naver.com",
]

# ── Image settings ────────────────────────────────────────────────────────
OPENAI_IMAGES_ENDPOINT = "https://api.openai.com/v1/images/generations"
OPENAI_IMAGE_MODEL = "dall-e-3"
OPENAI_IMAGE_SIZE = "1792x1024"
UNSPLASH_SEARCH_ENDPOINT = "https://api.unsplash.com/search/photos"

# ── Site / promotion ──────────────────────────────────────────────────────
SITE_URL = "https://wpauto.kr/"
CONTENT_LANGUAGE = "Korean"

# ── Pipeline variants ─────────────────────────────────────────────────────
IMAGE_SOURCES = ("generated", "stock", "none")
DRAFT_PROFILES = ("strict", "permissive")
PUBLISH_STATUSES = ("draft", "publish")


@dataclass(frozen=True)
class PipelineConfig:
    """Settings for a single run, built once at start-up and passed down."""

    anthropic_api_key: str = ""
    serp_api_key: str = ""
    openai_api_key: str = ""
    unsplash_access_key: str = ""
    wp_url: str = ""
    wp_user: str = ""
    wp_app_password: str = ""
    keywords_path: Path = KEYWORDS_JSON
    output_dir: Path = ARTICLE_OUTPUT_DIR
    site_url: str = SITE_URL

    image_source: str = "generated"
    draft_profile: str = "strict"
    publish_status: str = "publish"

    claude_model: str = CLAUDE_MODEL
    claude_max_tokens: int = CLAUDE_MAX_TOKENS
    max_results: int = MAX_RANKED_RESULTS
    max_pages: int = MAX_SAMPLED_PAGES
    fetch_timeout: float = FETCH_TIMEOUT
    outline_size: int = OUTLINE_SIZE
    recent_months: int = RECENT_MONTHS
    official_domains: tuple[str, ...] = tuple(OFFICIAL_DOMAINS)

    def __post_init__(self):
        if self.image_source not in IMAGE_SOURCES:
            raise ValueError(
                f"Unknown image source '{self.image_source}' (expected one of {', '.join(IMAGE_SOURCES)})"
            )
        if self.draft_profile not in DRAFT_PROFILES:
            raise ValueError(
                f"Unknown draft profile '{self.draft_profile}' (expected one of {', '.join(DRAFT_PROFILES)})"
            )
        if self.publish_status not in PUBLISH_STATUSES:
            raise ValueError(
                f"Unknown publish status '{self.publish_status}' (expected one of {', '.join(PUBLISH_STATUSES)})"
            )

    @property
    def wp_configured(self) -> bool:
        return bool(self.wp_url and self.wp_user and self.wp_app_password)

    def with_overrides(self, **overrides) -> "PipelineConfig":
        """Return a copy with the non-empty overrides applied."""
        cleaned = {k: v for k, v in overrides.items() if v not in (None, "")}
        return replace(self, **cleaned)


def load_config(**overrides) -> PipelineConfig:
    """Build the run configuration from the environment (.env included).

    Keyword overrides (e.g. from CLI flags) win over environment values;
    ``None`` and empty strings are ignored.
    """
    env = os.environ
    config = PipelineConfig(
        anthropic_api_key=env.get("CLAUDE_API_KEY") or env.get("ANTHROPIC_API_KEY", ""),
        serp_api_key=env.get("SERP_API_KEY", ""),
        openai_api_key=env.get("OPENAI_API_KEY", ""),
        unsplash_access_key=env.get("UNSPLASH_ACCESS_KEY", ""),
        wp_url=env.get("WP_URL", "").rstrip("/"),
        wp_user=env.get("WP_USER", ""),
        wp_app_password=env.get("WP_APP_PASSWORD", ""),
        keywords_path=Path(env.get("KEYWORDS_PATH", str(KEYWORDS_JSON))),
        site_url=env.get("SITE_URL", SITE_URL),
        image_source=env.get("IMAGE_SOURCE", "generated"),
        draft_profile=env.get("DRAFT_PROFILE", "strict"),
        publish_status=env.get("PUBLISH_STATUS", "publish"),
    )
    return config.with_overrides(**overrides)
