"""
Content extraction for admonition bodies.

The body of an admonition is the run of lines after the header that are
indented by at least four columns, with blank lines in between.  Two
renditions share the same rules:

* :func:`extract_content_from_lines` works on a plain list of lines and is
  used by the live preview and the fallback post-processor.
* :func:`extract_content_from_state` works on a markdown-it-py
  ``StateBlock`` so indentation is measured relative to the current block
  indent (e.g. inside a list item).
"""
from typing import List, Optional, Sequence

from markdown_it.rules_block import StateBlock

from .models import ExtractedBlock, ParseOptions

INDENT_WIDTH = 4


def indent_width(text: str) -> int:
    """Column width of the leading whitespace, tabs stopping every 4 columns."""
    column = 0
    for char in text:
        if char == " ":
            column += 1
        elif char == "\t":
            column += INDENT_WIDTH - column % INDENT_WIDTH
        else:
            break
    return column


def strip_indent(text: str, start_column: int = 0) -> str:
    """
    Remove four columns of leading whitespace, as counted by
    :func:`indent_width`.  *start_column* is the column *text* begins at,
    so tab stops line up with the full source line.
    """
    column = start_column
    target = start_column + INDENT_WIDTH
    pos = 0
    while pos < len(text) and column < target:
        char = text[pos]
        if char == " ":
            column += 1
        elif char == "\t":
            column += INDENT_WIDTH - column % INDENT_WIDTH
        else:
            break
        pos += 1
    return text[pos:]


def extract_content_from_lines(
    lines: Sequence[str],
    start_line: int,
    options: Optional[ParseOptions] = None,
    end_line: Optional[int] = None,
) -> Optional[ExtractedBlock]:
    """
    Consume the indented block that starts at *start_line*.

    Args:
        lines: Document as a list of lines without trailing newlines
        start_line: Index of the first line after the header
        options: Parse options; ``end_on_double_blank`` stops the block at
            the second of two consecutive blank lines
        end_line: Exclusive upper bound, defaults to ``len(lines)``

    Returns:
        ExtractedBlock, or None when no indented line was found
    """
    options = options or ParseOptions()
    limit = len(lines) if end_line is None else min(end_line, len(lines))

    content_lines: List[str] = []
    line = start_line
    saw_indented = False
    empty_run = 0

    while line < limit:
        text = lines[line]
        if not text.strip():
            empty_run += 1
            if options.end_on_double_blank and empty_run >= 2:
                break
            content_lines.append("")
            line += 1
            continue

        empty_run = 0
        if indent_width(text) < INDENT_WIDTH:
            break

        saw_indented = True
        content_lines.append(strip_indent(text))
        line += 1

    if not saw_indented:
        return None

    return ExtractedBlock(content_lines=content_lines, end_line=line)


def extract_content_from_state(
    state: StateBlock,
    start_line: int,
    end_line: int,
    options: Optional[ParseOptions] = None,
) -> Optional[ExtractedBlock]:
    """
    Same as :func:`extract_content_from_lines`, reading markdown-it's line
    tables.  Indentation is counted from ``state.blkIndent``.
    """
    options = options or ParseOptions()

    content_lines: List[str] = []
    line = start_line
    saw_indented = False
    empty_run = 0

    while line < end_line:
        if state.isEmpty(line):
            empty_run += 1
            if options.end_on_double_blank and empty_run >= 2:
                break
            content_lines.append("")
            line += 1
            continue

        empty_run = 0
        if state.sCount[line] - state.blkIndent < INDENT_WIDTH:
            break

        saw_indented = True
        line_start = state.bMarks[line] + state.blkIndent
        line_end = state.eMarks[line]
        content_lines.append(strip_indent(state.src[line_start:line_end], state.blkIndent))
        line += 1

    if not saw_indented:
        return None

    return ExtractedBlock(content_lines=content_lines, end_line=line)
