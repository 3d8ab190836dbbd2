#!/usr/bin/env python3
"""Publish one SEO post for the next keyword in keywords.json.

Meant to be run by a scheduler (cron, GitHub Actions); each invocation
handles exactly one keyword and advances the cursor only after the post
is live.

Usage:
    python main.py                          # Next keyword, settings from .env
    python main.py --dry-run                # Research only, no Claude/WordPress calls
    python main.py --image-source stock     # Unsplash photo instead of DALL-E
    python main.py --image-source none --status draft
    python main.py --profile permissive     # Let the model use light Markdown
    python main.py --keywords other.json    # Different keyword queue
"""

import argparse
import sys
from pathlib import Path

from autopost.config import DRAFT_PROFILES, IMAGE_SOURCES, PUBLISH_STATUSES, load_config
from autopost.pipeline import GenerationError, run_once
from autopost.publishing import WordPressError


def main():
    parser = argparse.ArgumentParser(description="Generate and publish one SEO blog post")
    parser.add_argument("--dry-run", action="store_true",
                        help="Search and analyse only; no generation, upload or publish")
    parser.add_argument("--image-source", choices=IMAGE_SOURCES, default=None,
                        help="Illustration source (default: IMAGE_SOURCE or 'generated')")
    parser.add_argument("--profile", choices=DRAFT_PROFILES, default=None,
                        help="Draft strictness (default: DRAFT_PROFILE or 'strict')")
    parser.add_argument("--status", choices=PUBLISH_STATUSES, default=None,
                        help="WordPress post status (default: PUBLISH_STATUS or 'publish')")
    parser.add_argument("--keywords", type=Path, default=None,
                        help="Path to the keyword queue JSON")
    args = parser.parse_args()

    config = load_config(
        image_source=args.image_source,
        draft_profile=args.profile,
        publish_status=args.status,
        keywords_path=args.keywords,
    )

    if not config.keywords_path.exists():
        print(f"Error: keyword file not found: {config.keywords_path}")
        sys.exit(1)
    if not config.serp_api_key:
        print("Warning: SERP_API_KEY not set, research will be empty")
    if not args.dry_run and not config.wp_configured:
        print("Error: WP_URL, WP_USER and WP_APP_PASSWORD must be set in .env")
        sys.exit(1)

    try:
        run_once(config, dry_run=args.dry_run)
    except GenerationError as e:
        print(f"\nERROR: draft generation failed: {e}")
        sys.exit(1)
    except WordPressError as e:
        print(f"\nERROR: publish failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
