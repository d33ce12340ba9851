"""Test standalone HTML export."""

import pytest
from mkdocs_admonitions.export import render_page
from mkdocs_admonitions.markdown_parser import MarkdownParser
from mkdocs_admonitions.theme_loader import load_callout_css


def test_page_wraps_body_and_inlines_css():
    body = MarkdownParser().parse('!!! tip "T"\n    Body')

    page = render_page(body, title="Notes")

    assert page.startswith("<!DOCTYPE html>")
    assert "<title>Notes</title>" in page
    assert body in page
    assert load_callout_css("default") in page


def test_title_is_escaped():
    page = render_page("<p>x</p>", title="<script>")

    assert "<title>&lt;script&gt;</title>" in page
    assert "<p>x</p>" in page


def test_dark_theme():
    assert "#1e1e1e" in render_page("", theme="dark")


def test_unknown_theme():
    with pytest.raises(FileNotFoundError):
        render_page("", theme="missing")
    with pytest.raises(ValueError):
        render_page("", theme="../default")
