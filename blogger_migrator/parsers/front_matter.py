"""
Front-matter composition for the generated Markdown files.

The block is written by hand instead of through a YAML dumper so the
output matches what Hugo and similar generators expect from a Blogger
import: a single-quoted title, the raw ``published`` timestamp, a bare
boolean ``draft`` flag and an inline tag list.
"""

from __future__ import annotations

from typing import List, Optional

from blogger_migrator.utils.tags import format_tags_field

DELIMITER = "---"
UNTITLED = "Untitled"


def escape_title(title: str) -> str:
    """Double single quotes so the title can sit inside ``'...'``."""
    return title.replace("'", "''")


def display_title(title: Optional[str]) -> str:
    """Escaped title, or ``Untitled`` when the entry has none."""
    return escape_title(title) if title else UNTITLED


def build_front_matter(title: str, date: str, draft: bool, tags: List[str]) -> str:
    """Compose the delimited metadata block.

    ``title`` must already be escaped with :func:`escape_title`.
    """
    return (
        f"{DELIMITER}\n"
        f"title: '{title}'\n"
        f"date: {date}\n"
        f"draft: {'true' if draft else 'false'}\n"
        f"{format_tags_field(tags)}"
        f"{DELIMITER}"
    )


def compose_document(front_matter: str, body: str) -> str:
    return f"{front_matter}\n\n{body}"
