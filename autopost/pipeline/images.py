"""Illustration sources: AI-generated (OpenAI images) or stock (Unsplash).

All failures are soft: the caller gets None and the post goes out without
an image.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from autopost.config import (
    OPENAI_IMAGE_MODEL,
    OPENAI_IMAGE_SIZE,
    OPENAI_IMAGES_ENDPOINT,
    PipelineConfig,
    UNSPLASH_SEARCH_ENDPOINT,
)

# Korean keyword fragment -> English image prompt. First match wins.
PROMPT_MAP = {
    "블로그": "modern blog writing workspace with laptop and coffee, minimalist style",
    "AI": "artificial intelligence concept, neural network visualization, futuristic blue tones",
    "자동화": "automation and robotics concept, gears and technology, modern illustration",
    "워드프레스": "wordpress website design on laptop screen, professional workspace",
    "SEO": "search engine optimization concept, magnifying glass on search bar, digital marketing",
    "글쓰기": "creative writing concept, person typing on laptop, warm lighting",
    "수익": "online business success, growth chart, professional setting",
    "애드센스": "digital advertising concept, website monetization, modern design",
    "프로그램": "software development, code on screen, modern tech workspace",
    "포스팅": "content creation, social media marketing, digital workspace",
}
DEFAULT_PROMPT = "modern technology blog concept, clean minimalist design, professional"


@dataclass
class ImageCandidate:
    url: str
    alt: str
    credit: Optional[str] = None
    credit_link: Optional[str] = None


def build_image_prompt(keyword: str) -> str:
    for fragment, prompt in PROMPT_MAP.items():
        if fragment in keyword:
            return prompt
    return DEFAULT_PROMPT


def generate_image(keyword: str, api_key: str, session=None) -> Optional[ImageCandidate]:
    """Create a 16:9 illustration with DALL-E and return its temporary URL."""
    if not api_key:
        print("  Warning: OPENAI_API_KEY not set, skipping image generation")
        return None

    http = session or requests
    prompt = build_image_prompt(keyword)
    print(f"  -> Generating image ({OPENAI_IMAGE_MODEL}): {prompt[:60]}...")
    try:
        resp = http.post(
            OPENAI_IMAGES_ENDPOINT,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            json={
                "model": OPENAI_IMAGE_MODEL,
                "prompt": prompt + ", high quality, 16:9 aspect ratio, no text",
                "n": 1,
                "size": OPENAI_IMAGE_SIZE,
                "quality": "standard",
            },
            timeout=120,
        )
        resp.raise_for_status()
        data = resp.json().get("data") or []
    except (requests.RequestException, ValueError) as e:
        print(f"  Warning: image generation failed ({e})")
        return None

    if not data or not data[0].get("url"):
        print("  Warning: image generation returned no image")
        return None
    return ImageCandidate(url=data[0]["url"], alt=keyword)


def search_stock_image(keyword: str, access_key: str, session=None) -> Optional[ImageCandidate]:
    """Take the first landscape Unsplash hit for the keyword."""
    if not access_key:
        print("  Warning: UNSPLASH_ACCESS_KEY not set, skipping stock image")
        return None

    http = session or requests
    print(f"  -> Searching stock photos for \"{keyword}\"...")
    try:
        resp = http.get(
            UNSPLASH_SEARCH_ENDPOINT,
            headers={"Authorization": f"Client-ID {access_key}"},
            params={
                "query": keyword,
                "orientation": "landscape",
                "content_filter": "high",
                "per_page": 1,
            },
            timeout=20,
        )
        resp.raise_for_status()
        results = resp.json().get("results") or []
    except (requests.RequestException, ValueError) as e:
        print(f"  Warning: stock photo search failed ({e})")
        return None

    if not results:
        print("  Warning: no stock photo found")
        return None

    photo = results[0]
    url = (photo.get("urls") or {}).get("regular")
    if not url:
        return None
    user = photo.get("user") or {}
    return ImageCandidate(
        url=url,
        alt=keyword,
        credit=user.get("name"),
        credit_link=(user.get("links") or {}).get("html"),
    )


def download_image(url: str, session=None) -> Optional[tuple[bytes, str]]:
    """Fetch image bytes; returns (content, content_type) or None."""
    http = session or requests
    try:
        resp = http.get(url, timeout=30)
        resp.raise_for_status()
    except requests.RequestException as e:
        print(f"  Warning: image download failed ({e})")
        return None
    content_type = resp.headers.get("Content-Type", "image/jpeg").split(";")[0].strip()
    return resp.content, content_type or "image/jpeg"


def find_image(keyword: str, config: PipelineConfig, session=None) -> Optional[ImageCandidate]:
    """Pick an illustration according to ``config.image_source``."""
    if config.image_source == "generated":
        return generate_image(keyword, config.openai_api_key, session=session)
    if config.image_source == "stock":
        return search_stock_image(keyword, config.unsplash_access_key, session=session)
    return None
