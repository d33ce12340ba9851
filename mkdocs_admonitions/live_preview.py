"""
Live preview support: selection-aware admonition ranges for an editor.

The core is :func:`compute_live_ranges`, a pure function from
``(document, selection, options)`` to the list of spans that can be shown
as rendered callouts.  A block touched by any selection range stays raw
source text so it remains editable.  :class:`LivePreviewField` wraps the
function the way an editor state field would: it recomputes wholesale on
every document or selection change and keeps the previous decorations
otherwise.
"""
import asyncio
import inspect
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from bs4 import BeautifulSoup, Tag

from .callout import build_callout_container
from .extractor import extract_content_from_lines
from .header import parse_header
from .markdown_parser import RenderMarkdown, run_renderer
from .models import AdmonitionMeta, LiveRange, ParseOptions, SelectionRange

logger = logging.getLogger(__name__)

LINE_BREAK_RE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class LivePreviewOptions:
    """Options for the live preview; ``enabled=False`` turns it off."""
    end_on_double_blank: bool = True
    enabled: bool = True

    def parse_options(self) -> ParseOptions:
        return ParseOptions(end_on_double_blank=self.end_on_double_blank)


def split_lines(text: str) -> List[str]:
    """Split a document into lines without their line breaks."""
    return LINE_BREAK_RE.split(text)


def line_start_offsets(document: Union[str, Sequence[str]]) -> List[int]:
    """
    Offset of the first character of every line.

    For text the offsets follow its real line breaks, so ``\\r\\n`` counts as
    two characters.  A line sequence is taken as ``\\n``-joined.
    """
    if isinstance(document, str):
        return [0] + [m.end() for m in LINE_BREAK_RE.finditer(document)]

    offsets = []
    pos = 0
    for line in document:
        offsets.append(pos)
        pos += len(line) + 1
    return offsets


def selection_intersects(selection: Iterable[SelectionRange], start: int, end: int) -> bool:
    """True if any selection range overlaps or touches ``[start, end]``."""
    for sel in selection:
        if sel.start <= end and sel.end >= start:
            return True
    return False


def compute_live_ranges(
    document: Union[str, Sequence[str]],
    selection: Iterable[SelectionRange] = (),
    options: Optional[LivePreviewOptions] = None,
) -> List[LiveRange]:
    """
    Find the admonitions of *document* that can be rendered in place.

    Args:
        document: Full document text, or its lines
        selection: Snapshot of the current caret/selection ranges
        options: Live preview options

    Returns:
        Ordered, non-overlapping ranges for blocks that no selection touches
    """
    options = options or LivePreviewOptions()
    if not options.enabled:
        return []

    lines = split_lines(document) if isinstance(document, str) else list(document)
    selection = tuple(selection)
    starts = line_start_offsets(document if isinstance(document, str) else lines)
    parse_options = options.parse_options()

    ranges: List[LiveRange] = []
    line = 0
    while line < len(lines):
        meta = parse_header(lines[line].strip())
        if meta is None:
            line += 1
            continue

        extracted = extract_content_from_lines(lines, line + 1, parse_options)
        if extracted is None:
            line += 1
            continue

        last_line = extracted.end_line - 1
        start = starts[line]
        end = starts[last_line] + len(lines[last_line])

        if selection_intersects(selection, start, end):
            logger.debug("Admonition at line %d is being edited, leaving source", line)
        else:
            ranges.append(LiveRange(
                start=start,
                end=end,
                meta=meta,
                content=extracted.content,
                header_line=line,
                end_line=extracted.end_line,
            ))

        line = extracted.end_line

    logger.debug("Computed %d live admonition ranges over %d lines", len(ranges), len(lines))
    return ranges


class AdmonitionWidget:
    """
    Rendered stand-in for one admonition in the live view.
    """

    def __init__(self, meta: AdmonitionMeta, content: str, source_path: str = "", anchor: int = 0):
        self.meta = meta
        self.content = content
        self.source_path = source_path
        self.anchor = anchor
        self.pending: Optional[asyncio.Task] = None

    def eq(self, other: "AdmonitionWidget") -> bool:
        """Widgets showing the same thing can reuse each other's DOM."""
        return (
            self.content == other.content
            and self.source_path == other.source_path
            and self.meta == other.meta
        )

    def __eq__(self, other):
        if not isinstance(other, AdmonitionWidget):
            return NotImplemented
        return self.eq(other)

    def __hash__(self):
        return hash((self.content, self.source_path, self.meta))

    def _container(self, soup: Optional[BeautifulSoup]):
        container = build_callout_container(self.meta, soup)
        container.root["class"].append("markdown-rendered")
        return container

    def to_dom(self, render_markdown: RenderMarkdown, soup: Optional[BeautifulSoup] = None) -> Tag:
        """
        Build the callout and fill its content region.

        The structure is returned right away.  If *render_markdown* is
        asynchronous and an event loop is running, the content region is
        filled by the task kept in :attr:`pending`.
        """
        container = self._container(soup)
        result = render_markdown(self.content, container.content)
        if inspect.isawaitable(result):
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                asyncio.run(_wait_for(result))
            else:
                self.pending = loop.create_task(_wait_for(result))
        return container.root

    async def to_dom_async(self, render_markdown: RenderMarkdown, soup: Optional[BeautifulSoup] = None) -> Tag:
        """Build the callout and wait until its content region is filled."""
        container = self._container(soup)
        await run_renderer(render_markdown, self.content, container.content)
        return container.root

    def click_selection(self) -> SelectionRange:
        """Caret to place when the widget is clicked: start of the block source."""
        return SelectionRange.cursor(self.anchor)

    def __repr__(self):
        return f"AdmonitionWidget({self.meta.callout_type!r}, anchor={self.anchor})"


async def _wait_for(awaitable):
    return await awaitable


@dataclass(frozen=True)
class Decoration:
    """Replace-decoration covering ``[start, end]`` with a block widget."""
    start: int
    end: int
    widget: AdmonitionWidget
    block: bool = True


@dataclass(frozen=True)
class EditorState:
    """Snapshot of an editor: document text and selection ranges."""
    doc: str
    selection: Tuple[SelectionRange, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Transaction:
    """Change from one editor state to the next."""
    state: EditorState
    doc_changed: bool = False
    selection_set: bool = False


class LivePreviewField:
    """
    Decoration field for the live preview.

    Args:
        get_options: Returns the current options; read on every recompute
            so settings changes apply on the next edit or caret move
        source_path: Path of the document, handed to the widgets
    """

    def __init__(self, get_options: Callable[[], LivePreviewOptions], source_path: str = ""):
        self.get_options = get_options
        self.source_path = source_path

    def build_decorations(self, state: EditorState) -> List[Decoration]:
        ranges = compute_live_ranges(state.doc, state.selection, self.get_options())
        return [
            Decoration(
                start=r.start,
                end=r.end,
                widget=AdmonitionWidget(r.meta, r.content, self.source_path, r.start),
            )
            for r in ranges
        ]

    def create(self, state: EditorState) -> List[Decoration]:
        return self.build_decorations(state)

    def update(self, decorations: List[Decoration], tr: Transaction) -> List[Decoration]:
        if tr.doc_changed or tr.selection_set:
            return self.build_decorations(tr.state)
        return decorations
