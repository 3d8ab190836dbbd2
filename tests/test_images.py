"""Unit tests for the illustration sources."""

from __future__ import annotations

from unittest.mock import MagicMock

import requests

from autopost.config import PipelineConfig
from autopost.pipeline.images import (
    DEFAULT_PROMPT,
    build_image_prompt,
    download_image,
    find_image,
    generate_image,
    search_stock_image,
)


def _response(payload=None, content=b"", headers=None) -> MagicMock:
    resp = MagicMock()
    resp.json.return_value = payload or {}
    resp.content = content
    resp.headers = headers or {}
    return resp


def test_prompt_follows_keyword_fragments() -> None:
    assert "wordpress" in build_image_prompt("워드프레스 자동 포스팅")
    assert "automation" in build_image_prompt("업무 자동화 팁")
    assert build_image_prompt("연말정산") == DEFAULT_PROMPT


def test_generate_image_returns_first_url() -> None:
    session = MagicMock()
    session.post.return_value = _response({"data": [{"url": "https://img/1.png"}]})

    image = generate_image("블로그", "sk-test", session=session)

    assert image.url == "https://img/1.png"
    assert image.alt == "블로그"
    call = session.post.call_args
    assert call.kwargs["headers"]["Authorization"] == "Bearer sk-test"
    assert call.kwargs["json"]["model"] == "dall-e-3"
    assert call.kwargs["json"]["size"] == "1792x1024"


def test_generate_image_failures_are_soft() -> None:
    session = MagicMock()
    session.post.side_effect = requests.HTTPError("400")

    assert generate_image("kw", "sk-test", session=session) is None
    assert generate_image("kw", "", session=session) is None

    session.post.side_effect = None
    session.post.return_value = _response({"data": []})
    assert generate_image("kw", "sk-test", session=session) is None


def test_stock_image_carries_photographer_credit() -> None:
    session = MagicMock()
    session.get.return_value = _response({
        "results": [{
            "urls": {"regular": "https://images.unsplash.com/p"},
            "user": {"name": "Kim", "links": {"html": "https://unsplash.com/@kim"}},
        }]
    })

    image = search_stock_image("카페", "access", session=session)

    assert image.url == "https://images.unsplash.com/p"
    assert image.credit == "Kim"
    assert image.credit_link == "https://unsplash.com/@kim"
    assert session.get.call_args.kwargs["params"]["orientation"] == "landscape"


def test_stock_image_without_results() -> None:
    session = MagicMock()
    session.get.return_value = _response({"results": []})

    assert search_stock_image("kw", "access", session=session) is None
    assert search_stock_image("kw", "", session=session) is None


def test_download_image_strips_content_type_parameters() -> None:
    session = MagicMock()
    session.get.return_value = _response(content=b"\x89PNG", headers={"Content-Type": "image/png; charset=binary"})

    assert download_image("https://img/1.png", session=session) == (b"\x89PNG", "image/png")


def test_download_image_failure() -> None:
    session = MagicMock()
    session.get.side_effect = requests.Timeout()

    assert download_image("https://img/1.png", session=session) is None


def test_find_image_dispatches_on_source() -> None:
    session = MagicMock()
    session.post.return_value = _response({"data": [{"url": "https://img/gen.png"}]})
    session.get.return_value = _response({"results": [{"urls": {"regular": "https://img/stock.jpg"}}]})

    generated = find_image("kw", PipelineConfig(image_source="generated", openai_api_key="k"), session=session)
    stock = find_image("kw", PipelineConfig(image_source="stock", unsplash_access_key="k"), session=session)
    none = find_image("kw", PipelineConfig(image_source="none"), session=session)

    assert generated.url == "https://img/gen.png"
    assert stock.url == "https://img/stock.jpg"
    assert stock.credit is None
    assert none is None
