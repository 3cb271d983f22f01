import os
import re
import sys

# Ensure project root is on sys.path for imports when running tests directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import pytest

from blogger_migrator.utils.filenames import is_usable_filename, sanitize_filename


TITLES = [
    "Hello World",
    'What? A "quoted" <title>: part 1/2',
    "back\\slash | pipe * star",
    "Dashes --- everywhere -- here",
    "  Padded Title  ",
    "Ünïcödé Café",
    "a/-/b",
]


@pytest.mark.parametrize("title", TITLES)
def test_output_has_no_invalid_chars_no_hyphen_runs_and_is_lowercase(title):
    name = sanitize_filename(title)
    assert not re.search(r'[<>:"/\\|?*]', name)
    assert "--" not in name
    assert name == name.lower()


def test_simple_title_is_lowercased():
    assert sanitize_filename("Hello World") == "hello world"


def test_hyphen_runs_are_collapsed():
    assert sanitize_filename("Part 1 -- The Start") == "part 1 - the start"


def test_surrounding_whitespace_is_trimmed():
    assert sanitize_filename("  My Trip  ") == "my trip"


def test_control_characters_are_removed():
    assert sanitize_filename("tab\there\x00") == "tabhere"


def test_windows_reserved_names_are_removed():
    assert sanitize_filename("CON") == ""
    assert sanitize_filename("nul.txt") == ""


def test_long_titles_are_truncated_to_255_bytes():
    name = sanitize_filename("é" * 300)
    assert len(name.encode("utf-8")) <= 255


@pytest.mark.parametrize("title", ["", "???", "---", " -- ", "***"])
def test_titles_without_usable_characters_are_unusable(title):
    assert not is_usable_filename(sanitize_filename(title))


def test_regular_name_is_usable():
    assert is_usable_filename("cat''s diary")
