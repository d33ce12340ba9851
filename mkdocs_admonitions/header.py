"""
Header line recognition for MkDocs-style admonitions.

A header is a single line of the form::

    !!! type "Optional title"
    ??? type 'Collapsed by default'
    ???+ type Expanded by default

Anything that does not fit this shape is *not* a header; callers get
``None`` back and let other grammar rules claim the line.
"""
import re
from typing import FrozenSet, Optional

from .models import AdmonitionMeta

DEFAULT_TYPE = "note"

VALID_TYPES: FrozenSet[str] = frozenset({
    "note",
    "info",
    "tip",
    "warning",
    "important",
    "caution",
    "danger",
    "bug",
    "example",
    "quote",
    "failure",
    "success",
    "question",
})

HEADER_RE = re.compile(r"^(!!!|\?\?\?\+?)\s+([A-Za-z][\w-]*)(.*)$", re.ASCII)


def parse_title(raw: str) -> Optional[str]:
    """
    Parse the title region that follows the type token.

    Quoted titles run to the next matching quote; an unterminated quote
    keeps everything after the opening quote.
    """
    trimmed = raw.strip()
    if not trimmed:
        return None

    quote = trimmed[0]
    if quote in ('"', "'"):
        end = trimmed.find(quote, 1)
        if end > 0:
            return trimmed[1:end]
        return trimmed[1:]

    return trimmed


def parse_header(line: str) -> Optional[AdmonitionMeta]:
    """
    Classify a trimmed line as an admonition header.

    Args:
        line: Single line of text, already stripped by the caller

    Returns:
        AdmonitionMeta for a header, None otherwise. Unknown types fall
        back to ``DEFAULT_TYPE`` instead of rejecting the line.
    """
    match = HEADER_RE.match(line)
    if not match:
        return None

    marker = match.group(1)
    raw_type = match.group(2).lower()
    title = parse_title(match.group(3) or "")

    callout_type = raw_type if raw_type in VALID_TYPES else DEFAULT_TYPE
    collapsible = marker.startswith("???")
    is_open = marker in ("???+", "!!!")

    return AdmonitionMeta(
        callout_type=callout_type,
        title=title,
        collapsible=collapsible,
        open=is_open,
    )
