"""
Pydantic models shared by the extractor, the migration tool and the
summary reporter.
"""

from .blog_entry import BlogEntry, BlogFeed, MigratedPost, MigrationSummary

__all__ = ["BlogEntry", "BlogFeed", "MigratedPost", "MigrationSummary"]
