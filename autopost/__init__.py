"""Keyword-to-WordPress SEO auto-poster.

Package structure:
    autopost/config.py        – paths, API keys, models, variant settings
    autopost/cursor.py        – persisted keyword queue position
    autopost/research/        – SerpAPI search, ranking, page sampling, outline
    autopost/pipeline/        – prompts, Claude draft, images, normalization, run
    autopost/publishing/      – WordPress REST client
    autopost/validation/      – quality checks, grading, and report formatting
"""
