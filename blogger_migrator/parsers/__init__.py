"""
Parsers and converters used by the migration pipeline.

Currently this subpackage exposes ``convert_html_to_markdown`` from
:mod:`blogger_migrator.parsers.markdown_parser` and the front-matter helpers
from :mod:`blogger_migrator.parsers.front_matter`.
"""

from .front_matter import build_front_matter, compose_document, display_title, escape_title
from .markdown_parser import convert_html_to_markdown

__all__ = [
    "build_front_matter",
    "compose_document",
    "convert_html_to_markdown",
    "display_title",
    "escape_title",
]
