"""
Data models shared by the admonition parser, renderer and live preview.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class AdmonitionMeta:
    """
    Parsed header of an admonition block.
    """
    callout_type: str
    title: Optional[str] = None
    collapsible: bool = False
    open: bool = True  # also True for "!!!", where nothing reads it


@dataclass(frozen=True)
class ParseOptions:
    """Options consumed by the content extractor."""
    end_on_double_blank: bool = True


@dataclass(frozen=True)
class ExtractedBlock:
    """
    Indented body of an admonition.

    ``end_line`` is exclusive: the first line that does not belong to the
    block.  The header line is never part of ``content_lines``.
    """
    content_lines: List[str] = field(default_factory=list)
    end_line: int = 0

    @property
    def content(self) -> str:
        """Body text with the lines joined by newlines."""
        return "\n".join(self.content_lines)


@dataclass(frozen=True)
class SelectionRange:
    """A caret or selection interval over the live document."""
    start: int
    end: int

    @classmethod
    def cursor(cls, pos: int) -> "SelectionRange":
        """Empty selection at *pos*."""
        return cls(pos, pos)


@dataclass(frozen=True)
class LiveRange:
    """
    Span of live document text that can be replaced by a rendered widget.

    ``start``/``end`` are character offsets covering the header line through
    the last consumed content line; ``header_line``/``end_line`` are the
    matching line indexes (``end_line`` exclusive).
    """
    start: int
    end: int
    meta: AdmonitionMeta
    content: str
    header_line: int
    end_line: int


@dataclass(frozen=True)
class SectionInfo:
    """Inclusive line span of a rendered section in the source file."""
    line_start: int
    line_end: int
