"""
Extractors for Blogger export files.

This subpackage parses the Atom feed produced by Blogger's "Back up
content" into :class:`~blogger_migrator.models.BlogEntry` objects and
separates blog posts from pages, settings and comments.
"""

from .blogger_extractor import filter_posts, is_blog_post, parse_feed, read_export

__all__ = ["filter_posts", "is_blog_post", "parse_feed", "read_export"]
