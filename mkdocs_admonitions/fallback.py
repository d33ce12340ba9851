"""
Fallback post-processor for hosts that render sections without the
admonition rule.

The host hands over the element it rendered for one section together with
the source text and the section's line span.  Elements carry
``data-line`` attributes (0-based first source line) that map them back to
the source.  Admonitions found in the section are rendered with our own
parser and swapped in for the elements they cover.

This mode is best-effort: whenever the mapping is ambiguous the block is
left as the host rendered it.
"""
import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from .callout import build_callout_container
from .extractor import extract_content_from_lines
from .header import parse_header
from .live_preview import split_lines
from .markdown_parser import MarkdownParser
from .models import ParseOptions, SectionInfo

logger = logging.getLogger(__name__)


def _line_of(element: Tag) -> Optional[int]:
    raw = element.get("data-line")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def find_element_by_line(root: Tag, line: int) -> Optional[Tag]:
    """Element stamped with *line*, or with the line after it."""
    return (
        root.find(attrs={"data-line": str(line)})
        or root.find(attrs={"data-line": str(line + 1)})
    )


def find_element_at_or_after_line(root: Tag, line: int) -> Optional[Tag]:
    """First element (by stamped line) that starts at or after *line*."""
    best = None
    best_line = float("inf")
    for element in root.find_all(attrs={"data-line": True}):
        value = _line_of(element)
        if value is None:
            continue
        if line <= value < best_line:
            best = element
            best_line = value
        if line <= value + 1 < best_line:
            best = element
            best_line = value + 1
    return best


def replace_range_with_html(root: Tag, start_el: Tag, end_el: Optional[Tag], html: str) -> None:
    """Replace the siblings from *start_el* up to (not including) *end_el*."""
    fragment = BeautifulSoup(html, "html.parser")

    node = start_el
    while node is not None and node is not end_el:
        following = node.find_next_sibling()
        node.extract()
        node = following

    nodes = [child.extract() for child in list(fragment.contents)]
    if end_el is None:
        for child in nodes:
            root.append(child)
    else:
        for child in nodes:
            end_el.insert_before(child)


class FallbackProcessor:
    """
    Post-processor that renders admonitions the host left as plain text.
    """

    def __init__(self, parse_options: Optional[ParseOptions] = None):
        self.parse_options = parse_options or ParseOptions()
        self.parser = MarkdownParser(self.parse_options)

    def process(self, element: Tag, source: str, section: Optional[SectionInfo]) -> Tag:
        """
        Rewrite *element* in place.

        Args:
            element: Host rendering of one section
            source: Full text of the source file
            section: Line span of the section, None when the host has none

        Returns:
            The same element
        """
        if section is None:
            return element

        lines = split_lines(source)
        start_line = max(0, section.line_start)
        end_line = min(len(lines), section.line_end + 1)

        if element.find(attrs={"data-line": True}) is None:
            self._process_unmapped(element, lines, start_line)
            return element

        line = start_line
        while line < end_line:
            raw_line = lines[line]
            meta = parse_header(raw_line.strip())
            if meta is None:
                line += 1
                continue

            extracted = extract_content_from_lines(lines, line + 1, self.parse_options)
            if extracted is None:
                line += 1
                continue

            block_text = "\n".join(
                [raw_line.rstrip()] + [f"    {content_line}" for content_line in extracted.content_lines]
            )
            html = self.parser.parse(block_text)

            start_el = find_element_by_line(element, line)
            end_el = find_element_at_or_after_line(element, extracted.end_line)
            if start_el is None:
                logger.info("No element found for admonition at line %d, leaving it as rendered", line)
            elif start_el.parent is not element or (end_el is not None and end_el.parent is not element):
                logger.info("Admonition at line %d maps to nested elements, leaving it as rendered", line)
            else:
                replace_range_with_html(element, start_el, end_el, html)

            line = extracted.end_line

        return element

    def _process_unmapped(self, element: Tag, lines, start_line: int) -> None:
        """The whole section is one block: replace the element's children."""
        if start_line >= len(lines):
            return

        meta = parse_header(lines[start_line].strip())
        if meta is None:
            return

        extracted = extract_content_from_lines(lines, start_line + 1, self.parse_options)
        if extracted is None:
            return

        container = build_callout_container(meta)
        self.parser.render_into(extracted.content, container.content)
        element.clear()
        element.append(container.root)
