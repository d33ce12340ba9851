"""Test admonition header parsing."""

from dataclasses import FrozenInstanceError

import pytest
from mkdocs_admonitions.header import DEFAULT_TYPE, VALID_TYPES, parse_header, parse_title
from mkdocs_admonitions.models import AdmonitionMeta


def test_basic_header_with_quoted_title():
    meta = parse_header('!!! note "Hi"')

    assert meta == AdmonitionMeta(callout_type="note", title="Hi", collapsible=False, open=True)


@pytest.mark.parametrize("raw_type", sorted(VALID_TYPES))
def test_whitelisted_types_are_lowercased(raw_type):
    """Whitelisted types survive in any letter case."""
    assert parse_header(f"!!! {raw_type.upper()}").callout_type == raw_type
    assert parse_header(f"!!! {raw_type.capitalize()}").callout_type == raw_type


@pytest.mark.parametrize("raw_type", ["bogus", "abstract", "note-x", "Tip_2", "hint"])
def test_unknown_types_fall_back_to_note(raw_type):
    meta = parse_header(f"!!! {raw_type} Title")

    assert meta is not None
    assert meta.callout_type == DEFAULT_TYPE
    assert meta.title == "Title"


def test_markers_set_collapsible_and_open():
    plain = parse_header("!!! tip")
    collapsed = parse_header("??? tip")
    expanded = parse_header("???+ tip")

    assert (plain.collapsible, plain.open) == (False, True)
    assert (collapsed.collapsible, collapsed.open) == (True, False)
    assert (expanded.collapsible, expanded.open) == (True, True)


@pytest.mark.parametrize("line", [
    "",
    "!! note",
    "!!!note",
    "!!! ",
    "!!! 1note",
    "!!!+ note",
    "?? note",
    "????+ note",
    "Some text !!! note",
    "::: note",
])
def test_non_headers_are_rejected(line):
    """Malformed markers or missing type tokens are not headers."""
    assert parse_header(line) is None


def test_type_token_allows_digits_hyphens_underscores():
    meta = parse_header("!!! warning-2_b rest of title")

    # Not whitelisted, so it falls back, but the title starts after the token
    assert meta.callout_type == "note"
    assert meta.title == "rest of title"


def test_tab_after_marker():
    meta = parse_header("???\twarning")

    assert meta.callout_type == "warning"
    assert meta.collapsible


class TestTitleParsing:
    """Title region parsing."""

    def test_empty_title(self):
        assert parse_title("") is None
        assert parse_title("   ") is None
        assert parse_header("!!! note   ").title is None

    def test_double_and_single_quotes(self):
        assert parse_title(' "Did you know?"') == "Did you know?"
        assert parse_title(" 'Single quoted'") == "Single quoted"

    def test_text_after_closing_quote_is_dropped(self):
        assert parse_title('"Title" trailing words') == "Title"

    def test_other_quote_kind_is_kept(self):
        assert parse_title('"It\'s here"') == "It's here"

    def test_unterminated_quote_keeps_remainder(self):
        assert parse_title('"Unclosed title') == "Unclosed title"
        assert parse_header("!!! tip 'Oops").title == "Oops"

    def test_unquoted_title_is_trimmed(self):
        assert parse_title("   Plain title  ") == "Plain title"

    def test_empty_quoted_title(self):
        assert parse_title('""') == ""


def test_title_without_space_after_type():
    meta = parse_header('!!! note"Hi"')

    assert meta.callout_type == "note"
    assert meta.title == "Hi"


def test_meta_is_immutable():
    meta = parse_header("!!! note")

    with pytest.raises(FrozenInstanceError):
        meta.title = "changed"
