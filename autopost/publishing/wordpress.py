"""Minimal WordPress REST API client (application-password auth)."""

from __future__ import annotations

from typing import Optional

import requests

from autopost.models import PublishableArticle


class WordPressError(RuntimeError):
    """Non-success response from the WordPress REST API."""

    def __init__(self, message: str, status_code: int = 0, response_body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class WordPressClient:
    """Posts, pages, media and settings under ``/wp-json/wp/v2``."""

    def __init__(self, base_url: str, user: str, app_password: str, timeout: int = 60, session=None):
        if not (base_url and user and app_password):
            raise ValueError("WP_URL, WP_USER and WP_APP_PASSWORD must all be set.")
        self.api_url = f"{base_url.rstrip('/')}/wp-json/wp/v2"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = (user, app_password)

    # ── Transport ─────────────────────────────────────────────────────────

    def _request(self, method: str, path: str, **kwargs) -> dict:
        url = f"{self.api_url}/{path.lstrip('/')}"
        resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        if not resp.ok:
            raise WordPressError(
                f"WordPress API error: {resp.status_code} - {resp.text}",
                status_code=resp.status_code,
                response_body=resp.text,
            )
        return resp.json()

    # ── Media ─────────────────────────────────────────────────────────────

    def upload_media(self, content: bytes, filename: str, content_type: str = "image/jpeg") -> dict:
        """Upload raw bytes to the media library; returns the media object."""
        return self._request(
            "POST",
            "media",
            headers={
                "Content-Type": content_type,
                "Content-Disposition": f'attachment; filename="{filename}"',
            },
            data=content,
        )

    # ── Posts ─────────────────────────────────────────────────────────────

    def create_post(
        self,
        article: PublishableArticle,
        status: str = "publish",
        featured_media: Optional[int] = None,
    ) -> dict:
        """Create a post; the meta description also feeds the excerpt and Yoast."""
        payload = {
            "title": article.title,
            "content": article.body_markup,
            "status": status,
            "excerpt": article.meta_description,
            "meta": {"_yoast_wpseo_metadesc": article.meta_description},
        }
        if featured_media:
            payload["featured_media"] = featured_media
        return self._request("POST", "posts", json=payload)

    # ── Pages & settings ──────────────────────────────────────────────────

    def create_page(self, title: str, content: str, status: str = "publish") -> dict:
        return self._request("POST", "pages", json={"title": title, "content": content, "status": status})

    def update_page(self, page_id: int, content: str) -> dict:
        return self._request("PUT", f"pages/{page_id}", json={"content": content})

    def set_front_page(self, page_id: int) -> dict:
        """Show ``page_id`` as the static front page."""
        return self._request(
            "POST", "settings", json={"show_on_front": "page", "page_on_front": page_id}
        )
