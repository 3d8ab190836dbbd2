"""HTML blocks injected into every post: hero image, mid-body link box, CTA."""

from __future__ import annotations

from html import escape
from typing import Optional


def build_hero_markup(
    image_url: str,
    alt: str,
    credit: Optional[str] = None,
    credit_link: Optional[str] = None,
) -> str:
    """Gutenberg image block; stock photos get a credit caption."""
    caption = ""
    if credit:
        name = escape(credit)
        if credit_link:
            name = f'<a href="{escape(credit_link)}" rel="noopener">{name}</a>'
        caption = f"\n  <figcaption>Photo: {name}</figcaption>"
    return (
        '\n<figure class="wp-block-image size-large">\n'
        f'  <img src="{escape(image_url)}" alt="{escape(alt)}" />{caption}\n'
        "</figure>"
    )


def build_cta_markup(site_url: str) -> str:
    """Closing call-to-action box pointing at the product homepage."""
    url = escape(site_url)
    return f"""
<div style="background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); padding: 50px 40px; border-radius: 20px; margin: 50px 0; text-align: center; box-shadow: 0 20px 60px rgba(102, 126, 234, 0.4);">
  <p style="color: rgba(255,255,255,0.8); font-size: 0.95rem; margin-bottom: 10px; text-transform: uppercase; letter-spacing: 2px;">AI 블로그 자동화 솔루션</p>
  <h3 style="color: #fff; font-size: 1.8rem; margin-bottom: 15px; font-weight: 900;">블로그 글쓰기, AI가 대신해드립니다</h3>
  <p style="color: rgba(255,255,255,0.9); font-size: 1.1rem; margin-bottom: 30px; line-height: 1.7;">키워드 하나로 SEO 최적화 글 작성부터 워드프레스 자동 발행까지!<br><strong style="color: #ffd93d;">월정액 없이 평생 사용</strong>하세요.</p>
  <a href="{url}" style="display: inline-block; background: #ffd93d; color: #1a1a2e; padding: 18px 50px; border-radius: 50px; font-weight: 800; text-decoration: none; font-size: 1.15rem;">무료 상담받기 →</a>
  <p style="color: rgba(255,255,255,0.6); font-size: 0.85rem; margin-top: 15px;">지금 바로 카카오톡으로 문의하세요</p>
</div>"""


def build_mid_body_markup(site_url: str) -> str:
    """Small promo box placed in the middle of the article."""
    url = escape(site_url)
    return f"""
<div style="background: #f8f9fa; border: 2px solid #667eea; padding: 25px; border-radius: 15px; margin: 30px 0; text-align: center;">
  <p style="color: #333; font-size: 1.05rem; margin-bottom: 15px;"><strong>시간 없이 블로그 운영하고 싶다면?</strong></p>
  <a href="{url}" style="display: inline-block; background: #667eea; color: #fff; padding: 12px 30px; border-radius: 8px; font-weight: 700; text-decoration: none; font-size: 1rem;">AI 자동화 프로그램 알아보기</a>
</div>"""
