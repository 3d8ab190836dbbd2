"""Publishing to WordPress via its REST API."""

from autopost.publishing.wordpress import WordPressClient, WordPressError

__all__ = ["WordPressClient", "WordPressError"]
