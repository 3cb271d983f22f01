from __future__ import annotations

from typing import List

from blogger_migrator.models import BlogEntry

# Blogger marks every post with this category; it is not a user label.
POST_KIND_TERM = "http://schemas.google.com/blogger/2008/kind#post"


def extract_tags(entry: BlogEntry) -> List[str]:
    """
    Return the user labels of ``entry`` in feed order.

    - Entries without categories yield an empty list
    - The Blogger ``kind#post`` marker is dropped
    - Duplicates are kept as they appear
    """
    if not entry.categories:
        return []
    return [term for term in entry.categories if term != POST_KIND_TERM]


def format_tags_field(tags: List[str]) -> str:
    """Render ``tags`` as a front-matter line, or ``""`` when there are none.

    Single quotes inside a label are doubled, as in titles.
    """
    if not tags:
        return ""
    quoted = ", ".join("'" + tag.replace("'", "''") + "'" for tag in tags)
    return f"tags: [{quoted}]\n"
