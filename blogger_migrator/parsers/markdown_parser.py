from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup
from markdownify import ATX, MarkdownConverter


def convert_html_to_markdown(html: Optional[str]) -> str:
    """
    Convert a post body to Markdown.

    Headings use ``#`` markers and ``<pre>`` blocks become fenced code blocks
    delimited by triple backticks.  Malformed markup is converted on a best
    effort basis by BeautifulSoup; empty input yields an empty string.
    """
    if not html or not html.strip():
        return ""
    soup = BeautifulSoup(html, "html.parser")
    converter = MarkdownConverter(heading_style=ATX, bullets="*")
    return converter.convert_soup(soup).strip("\n")
