"""
Extraction of entries from a Blogger export.

A Blogger "Back up content" download is an Atom feed in which posts,
static pages, blog settings, layout templates and comments are all sibling
``<entry>`` elements.  :func:`parse_feed` turns the raw bytes into a
:class:`~blogger_migrator.models.BlogFeed`; :func:`filter_posts` keeps only
the entries that are blog posts.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterable, List, Optional

from blogger_migrator.models import BlogEntry, BlogFeed
from blogger_migrator.utils.errors import FeedFormatError, FeedParseError

ATOM_NS = "http://www.w3.org/2005/Atom"
APP_NS = "http://purl.org/atom/app#"
THR_NS = "http://purl.org/syndication/thread/1.0"

POST_MARKER = ".post-"


def _find(element: ET.Element, ns: str, tag: str) -> Optional[ET.Element]:
    """Find ``tag`` in namespace ``ns``, falling back to the bare tag name."""
    found = element.find(f"{{{ns}}}{tag}")
    if found is None:
        found = element.find(tag)
    return found


def _findall(element: ET.Element, ns: str, tag: str) -> List[ET.Element]:
    return element.findall(f"{{{ns}}}{tag}") + element.findall(tag)


def _text(element: Optional[ET.Element]) -> Optional[str]:
    if element is None:
        return None
    return element.text


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _parse_entry(element: ET.Element) -> BlogEntry:
    """Build a :class:`BlogEntry` from one Atom ``<entry>`` element."""
    draft = False
    control = _find(element, APP_NS, "control")
    if control is not None:
        draft = (_text(_find(control, APP_NS, "draft")) or "").strip() == "yes"

    in_reply_to = None
    reply = _find(element, THR_NS, "in-reply-to")
    if reply is not None:
        in_reply_to = reply.get("ref") or reply.get("href") or ""

    categories = [
        cat.get("term") for cat in _findall(element, ATOM_NS, "category") if cat.get("term") is not None
    ]

    return BlogEntry(
        entry_id=(_text(_find(element, ATOM_NS, "id")) or "").strip(),
        title=_text(_find(element, ATOM_NS, "title")),
        published=(_text(_find(element, ATOM_NS, "published")) or "").strip(),
        draft=draft,
        in_reply_to=in_reply_to,
        content=_text(_find(element, ATOM_NS, "content")),
        categories=categories,
    )


def parse_feed(data: bytes) -> BlogFeed:
    """Parse the raw bytes of a Blogger export.

    Args:
        data: The export file contents.

    Returns:
        BlogFeed: Every entry of the feed, in document order.

    Raises:
        FeedParseError: If ``data`` is not well-formed XML.
        FeedFormatError: If the document is not a feed holding entries.
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise FeedParseError(f"Malformed export XML: {e}") from e

    if _local_name(root.tag) != "feed":
        raise FeedFormatError("Invalid Blogger export file")
    entries = _findall(root, ATOM_NS, "entry")
    if not entries:
        raise FeedFormatError("Invalid Blogger export file")

    return BlogFeed(entries=[_parse_entry(entry) for entry in entries])


def read_export(file_path: str) -> bytes:
    """Read the whole export into memory.  ``OSError`` propagates to the caller."""
    with open(file_path, "rb") as f:
        return f.read()


def is_blog_post(entry: BlogEntry) -> bool:
    """True for top-level posts; pages, settings and comments are rejected."""
    if POST_MARKER not in entry.entry_id:
        return False
    if entry.in_reply_to is not None:
        return False
    return True


def filter_posts(entries: Iterable[BlogEntry]) -> List[BlogEntry]:
    return [entry for entry in entries if is_blog_post(entry)]
