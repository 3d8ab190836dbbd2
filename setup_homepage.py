#!/usr/bin/env python3
"""Create or update the WordPress landing page.

Usage:
    python setup_homepage.py create homepage.html            # New page, set as front page
    python setup_homepage.py create homepage.html --title "AutoPost SEO Writer"
    python setup_homepage.py update homepage-inline.html --page-id 17
"""

import argparse
import sys
from pathlib import Path

from autopost.config import load_config
from autopost.publishing import WordPressClient, WordPressError


def create_homepage(client: WordPressClient, html: str, title: str) -> dict:
    """Publish a page and make it the static front page.

    Failing to switch the front page is only a warning; the page exists
    either way.
    """
    print("  -> Creating page...")
    page = client.create_page(title, html)
    print(f"  OK Page created: {page.get('link')} (ID {page.get('id')})")

    print("  -> Setting as front page...")
    try:
        client.set_front_page(page["id"])
        print("  OK Front page set")
    except WordPressError as e:
        print(f"  Warning: could not set front page ({e.status_code})")
        print("    Set it manually: Settings -> Reading -> Your homepage displays: A static page")
    return page


def update_homepage(client: WordPressClient, html: str, page_id: int) -> dict:
    print(f"  -> Updating page {page_id}...")
    page = client.update_page(page_id, html)
    print("  OK Page updated")
    return page


def main():
    parser = argparse.ArgumentParser(description="Create or update the WordPress homepage")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Create a page and set it as the front page")
    create.add_argument("html", type=Path, help="HTML file with the page content")
    create.add_argument("--title", default="AutoPost SEO Writer")

    update = sub.add_parser("update", help="Replace the content of an existing page")
    update.add_argument("html", type=Path, help="HTML file with the page content")
    update.add_argument("--page-id", type=int, required=True)

    args = parser.parse_args()

    config = load_config()
    if not config.wp_configured:
        print("Set these environment variables (or .env):")
        print("  WP_URL=https://your-site.com")
        print("  WP_USER=your-username")
        print("  WP_APP_PASSWORD=your-app-password")
        sys.exit(1)

    html = args.html.read_text(encoding="utf-8")
    client = WordPressClient(config.wp_url, config.wp_user, config.wp_app_password)

    try:
        if args.command == "create":
            create_homepage(client, html, args.title)
        else:
            update_homepage(client, html, args.page_id)
    except WordPressError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print(f"\nDone. Check the site: {config.wp_url}")


if __name__ == "__main__":
    main()
