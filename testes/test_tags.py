import os
import sys

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from blogger_migrator.models import BlogEntry
from blogger_migrator.utils.tags import POST_KIND_TERM, extract_tags, format_tags_field


def _entry(categories=None):
    return BlogEntry(entry_id="tag:blogger.com,1999:blog-1.post-123", categories=categories)


def test_kind_marker_is_excluded_and_order_preserved():
    entry = _entry([POST_KIND_TERM, "travel", "food"])
    assert extract_tags(entry) == ["travel", "food"]


def test_entry_without_categories_has_no_tags():
    assert extract_tags(_entry()) == []


def test_duplicates_are_preserved():
    assert extract_tags(_entry(["food", "travel", "food"])) == ["food", "travel", "food"]


def test_only_kind_marker_yields_empty_list():
    assert extract_tags(_entry([POST_KIND_TERM])) == []


def test_format_tags_field_quotes_and_joins():
    assert format_tags_field(["travel", "food"]) == "tags: ['travel', 'food']\n"


def test_format_tags_field_empty():
    assert format_tags_field([]) == ""


def test_format_tags_field_doubles_single_quotes():
    assert format_tags_field(["Mom's food", "travel"]) == "tags: ['Mom''s food', 'travel']\n"
