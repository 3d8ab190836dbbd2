"""Unit tests for run configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from autopost.config import PipelineConfig, load_config

ENV_VARS = [
    "CLAUDE_API_KEY", "ANTHROPIC_API_KEY", "SERP_API_KEY", "OPENAI_API_KEY",
    "UNSPLASH_ACCESS_KEY", "WP_URL", "WP_USER", "WP_APP_PASSWORD", "KEYWORDS_PATH",
    "SITE_URL", "IMAGE_SOURCE", "DRAFT_PROFILE", "PUBLISH_STATUS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("CLAUDE_API_KEY", "sk-claude")
    monkeypatch.setenv("WP_URL", "https://blog.example.com/")
    monkeypatch.setenv("WP_USER", "admin")
    monkeypatch.setenv("WP_APP_PASSWORD", "pw")
    monkeypatch.setenv("IMAGE_SOURCE", "stock")
    monkeypatch.setenv("KEYWORDS_PATH", "/tmp/kw.json")

    config = load_config()

    assert config.anthropic_api_key == "sk-claude"
    assert config.wp_url == "https://blog.example.com"
    assert config.wp_configured
    assert config.image_source == "stock"
    assert config.keywords_path == Path("/tmp/kw.json")


def test_anthropic_key_fallback(monkeypatch) -> None:
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-fallback")

    assert load_config().anthropic_api_key == "sk-fallback"


def test_defaults() -> None:
    config = load_config()

    assert config.image_source == "generated"
    assert config.draft_profile == "strict"
    assert config.publish_status == "publish"
    assert config.max_results == 7
    assert config.max_pages == 5
    assert "gov.kr" in config.official_domains
    assert not config.wp_configured


def test_overrides_win_and_empty_values_are_ignored(monkeypatch) -> None:
    monkeypatch.setenv("PUBLISH_STATUS", "draft")

    config = load_config(publish_status=None, image_source="none", site_url="")

    assert config.publish_status == "draft"
    assert config.image_source == "none"
    assert config.site_url == PipelineConfig().site_url


@pytest.mark.parametrize("field", ["image_source", "draft_profile", "publish_status"])
def test_unknown_variant_is_rejected(field) -> None:
    with pytest.raises(ValueError):
        PipelineConfig(**{field: "bogus"})


def test_config_is_immutable() -> None:
    config = PipelineConfig()

    with pytest.raises(AttributeError):
        config.image_source = "none"
