import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from blogger_migrator.parsers.markdown_parser import convert_html_to_markdown


def test_empty_body_gives_empty_markdown():
    assert convert_html_to_markdown("") == ""
    assert convert_html_to_markdown(None) == ""
    assert convert_html_to_markdown("   ") == ""


def test_headings_use_atx_markers():
    md = convert_html_to_markdown("<h2>Travel notes</h2><p>Day one.</p>")
    assert "## Travel notes" in md
    assert "Day one." in md


def test_code_blocks_are_fenced():
    md = convert_html_to_markdown("<pre><code>print('hi')</code></pre>")
    assert "```" in md
    assert "print('hi')" in md


def test_links_and_emphasis():
    md = convert_html_to_markdown('<p>See <a href="https://example.com">this</a> <strong>now</strong></p>')
    assert "[this](https://example.com)" in md
    assert "**now**" in md


def test_malformed_html_does_not_raise():
    md = convert_html_to_markdown("<p>unclosed <b>bold")
    assert "unclosed" in md


def test_no_surrounding_blank_lines():
    md = convert_html_to_markdown("<p>Only paragraph</p>")
    assert md == md.strip("\n")
