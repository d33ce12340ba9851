"""
MkDocs Admonitions Package

Recognizes MkDocs-style ``!!!`` / ``???`` admonition blocks in Markdown and
renders them as nested, optionally collapsible callouts.
"""

from .callout import build_callout_container, render_callout_html
from .config import Settings, load_settings, save_settings
from .extractor import extract_content_from_lines, extract_content_from_state
from .fallback import FallbackProcessor
from .header import parse_header
from .live_preview import LivePreviewField, LivePreviewOptions, compute_live_ranges
from .markdown_parser import MarkdownParser
from .markdown_plugins.admonition import admonition_plugin
from .models import AdmonitionMeta, ExtractedBlock, LiveRange, ParseOptions, SelectionRange

__all__ = [
    'AdmonitionMeta',
    'ExtractedBlock',
    'FallbackProcessor',
    'LivePreviewField',
    'LivePreviewOptions',
    'LiveRange',
    'MarkdownParser',
    'ParseOptions',
    'SelectionRange',
    'Settings',
    'admonition_plugin',
    'build_callout_container',
    'compute_live_ranges',
    'extract_content_from_lines',
    'extract_content_from_state',
    'load_settings',
    'parse_header',
    'render_callout_html',
    'save_settings',
]
