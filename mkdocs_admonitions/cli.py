#!/usr/bin/env python3
"""
Command-line entry point: render markdown with admonitions, or inspect the
live preview ranges of a document.
"""
import argparse
import json
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from .config import DEFAULT_SETTINGS, load_settings
from .export import render_page
from .live_preview import compute_live_ranges
from .markdown_parser import MarkdownParser
from .models import SelectionRange
from .theme_loader import DEFAULT_THEME, callout_themes

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mkdocs-admonitions",
        description="Render MkDocs-style admonitions in Markdown.",
    )
    p.add_argument("--config", type=Path, help="Settings JSON file")
    p.add_argument("--no-double-blank", action="store_true",
                   help="Do not end admonitions on two consecutive blank lines")
    p.add_argument("--debug", action="store_true", help="Enable verbose logging")

    sub = p.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a Markdown file to HTML")
    render.add_argument("markdown", type=Path, help="Markdown file to render")
    render.add_argument("--output", "-o", type=Path, help="Destination HTML path (default: stdout)")
    render.add_argument("--standalone", action="store_true", help="Wrap the output in a themed HTML page")
    render.add_argument("--theme", "-t", default=DEFAULT_THEME,
                        help=f"Callout theme for --standalone ({', '.join(callout_themes())})")

    ranges = sub.add_parser("ranges", help="Print live preview ranges as JSON")
    ranges.add_argument("markdown", type=Path, help="Markdown file to scan")
    ranges.add_argument("--cursor", type=int, action="append", default=[],
                        help="Caret offset; may be given several times")
    return p


def _load_settings(args):
    settings = load_settings(args.config) if args.config else DEFAULT_SETTINGS
    if args.no_double_blank:
        settings = replace(settings, end_on_double_blank=False)
    return settings


def _render(args, settings) -> int:
    markdown_text = args.markdown.read_text(encoding="utf-8")
    parser = MarkdownParser(settings.parse_options())
    html = parser.parse(markdown_text)

    if args.standalone:
        html = render_page(html, title=args.markdown.stem, theme=args.theme)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(html, encoding="utf-8")
        logger.info("✅ HTML written to %s", args.output)
    else:
        sys.stdout.write(html)
    return 0


def _ranges(args, settings) -> int:
    markdown_text = args.markdown.read_text(encoding="utf-8")
    selection = [SelectionRange.cursor(pos) for pos in args.cursor]
    ranges = compute_live_ranges(markdown_text, selection, settings.live_preview_options())

    payload = [
        {
            "from": r.start,
            "to": r.end,
            "lines": [r.header_line, r.end_line],
            "callout": r.meta.callout_type,
            "title": r.meta.title,
            "collapsible": r.meta.collapsible,
            "open": r.meta.open,
            "content": r.content,
        }
        for r in ranges
    ]
    sys.stdout.write(json.dumps(payload, indent=2) + "\n")
    return 0


def main(argv=None) -> int:
    """Command-line entry point."""
    args = _build_parser().parse_args(argv)

    level = "DEBUG" if args.debug else os.getenv("MKDOCS_ADMONITIONS_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format="%(levelname)s  %(message)s")

    if not args.markdown.exists():
        logger.error("Markdown file '%s' not found", args.markdown)
        return 1

    try:
        settings = _load_settings(args)
    except ValueError as e:
        logger.error(str(e))
        return 1

    if args.command == "render":
        try:
            return _render(args, settings)
        except (FileNotFoundError, ValueError) as e:
            logger.error(str(e))
            return 1
    return _ranges(args, settings)


if __name__ == "__main__":
    sys.exit(main())
