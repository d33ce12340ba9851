"""
Presentational container for admonitions.

Two renditions of the same markup:

* :func:`render_callout_html` returns an HTML string and is used by the
  markdown-it rendering rule.
* :func:`build_callout_container` builds BeautifulSoup tags so a caller can
  fill the content region later (live preview widgets, fallback mode).

Non-collapsible::

    <div class="callout mkdocs-admonition" data-callout="note">
      <div class="callout-title"><div class="callout-title-inner">…</div></div>
      <div class="callout-content">…</div>
    </div>

Collapsible::

    <details class="callout mkdocs-admonition" data-callout="tip" open>
      <summary class="callout-title"><span class="callout-title-inner">…</span></summary>
      <div class="callout-content">…</div>
    </details>
"""
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup, Tag
from markdown_it.common.utils import escapeHtml

from .models import AdmonitionMeta

CONTAINER_CLASSES = ["callout", "mkdocs-admonition"]


@dataclass
class CalloutContainer:
    """Root tag of a callout plus the region that receives its body."""
    root: Tag
    content: Tag


def render_callout_html(meta: AdmonitionMeta, inner_html: str) -> str:
    """Wrap already rendered body HTML in the callout markup."""
    title = escapeHtml(meta.title) if meta.title else ""
    classes = " ".join(CONTAINER_CLASSES)

    if meta.collapsible:
        open_attr = " open" if meta.open else ""
        title_html = (
            f'<summary class="callout-title"><span class="callout-title-inner">{title}</span></summary>'
        )
        return (
            f'<details class="{classes}" data-callout="{meta.callout_type}"{open_attr}>'
            f'{title_html}<div class="callout-content">{inner_html}</div></details>'
        )

    title_html = (
        f'<div class="callout-title"><div class="callout-title-inner">{title}</div></div>'
        if title
        else ""
    )
    return (
        f'<div class="{classes}" data-callout="{meta.callout_type}">'
        f'{title_html}<div class="callout-content">{inner_html}</div></div>'
    )


def build_callout_container(meta: AdmonitionMeta, soup: Optional[BeautifulSoup] = None) -> CalloutContainer:
    """
    Build the callout structure as tags with an empty content region.

    Args:
        meta: Parsed admonition header
        soup: Document that owns the new tags; a fresh one is created if omitted

    Returns:
        CalloutContainer with the root tag and the ``callout-content`` tag
    """
    if soup is None:
        soup = BeautifulSoup("", "html.parser")

    root = soup.new_tag("details" if meta.collapsible else "div")
    root["class"] = list(CONTAINER_CLASSES)
    root["data-callout"] = meta.callout_type
    if meta.collapsible and meta.open:
        root["open"] = ""

    if meta.collapsible:
        summary = soup.new_tag("summary")
        summary["class"] = ["callout-title"]
        inner = soup.new_tag("span")
        inner["class"] = ["callout-title-inner"]
        inner.string = meta.title or ""
        summary.append(inner)
        root.append(summary)
    elif meta.title:
        title = soup.new_tag("div")
        title["class"] = ["callout-title"]
        inner = soup.new_tag("div")
        inner["class"] = ["callout-title-inner"]
        inner.string = meta.title
        title.append(inner)
        root.append(title)

    content = soup.new_tag("div")
    content["class"] = ["callout-content"]
    root.append(content)

    return CalloutContainer(root=root, content=content)
