"""
Markdown parser with MkDocs-style admonition support.

This is the "render markdown text" capability the rest of the package
relies on: batch HTML rendering, and filling the content region of a
callout container built with BeautifulSoup.
"""
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Union

from bs4 import BeautifulSoup, Tag
from markdown_it import MarkdownIt
from mdit_py_plugins.front_matter import front_matter_plugin

from .markdown_plugins.admonition import DEFAULT_MAX_DEPTH, admonition_plugin
from .markdown_plugins.source_lines import source_line_plugin
from .models import ParseOptions

logger = logging.getLogger(__name__)

# Signature of a host renderer: fill *target* with the rendering of *text*.
# May be a coroutine function when the host renders asynchronously.
RenderMarkdown = Callable[[str, Tag], Union[None, Awaitable[None]]]


class MarkdownParser:
    """
    Markdown to HTML parser built on markdown-it-py.
    """

    def __init__(
        self,
        parse_options: Optional[ParseOptions] = None,
        *,
        admonitions: bool = True,
        source_lines: bool = False,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        """
        Initialize the markdown parser.

        Args:
            parse_options: Options for the admonition content extractor
            admonitions: Register the admonition block rule
            source_lines: Stamp ``data-line`` attributes on block tags
            max_depth: Nesting limit for admonitions
        """
        self.parse_options = parse_options or ParseOptions()

        self.markdown_processor = MarkdownIt('commonmark', {
            'html': True,          # Enable HTML tags
        })

        # Enable additional features
        self.markdown_processor.enable(['table', 'strikethrough'])

        # ---------------------------------------------------------
        # Plugin registration chain
        # ---------------------------------------------------------
        # front_matter_plugin : YAML front-matter (`---`) is kept out of the output.
        # admonition_plugin   : `!!! type "title"` blocks with an indented body.
        # source_line_plugin  : `data-line` stamps, only for host-style renderings
        #                       that the fallback post-processor works on.
        self.markdown_processor.use(front_matter_plugin)
        if admonitions:
            self.markdown_processor.use(
                admonition_plugin,
                end_on_double_blank=self.parse_options.end_on_double_blank,
                max_depth=max_depth,
            )
        if source_lines:
            self.markdown_processor.use(source_line_plugin)

        logger.debug(
            "Markdown parser ready (admonitions=%s, source_lines=%s, end_on_double_blank=%s)",
            admonitions, source_lines, self.parse_options.end_on_double_blank,
        )

    def parse(self, markdown_text: str, env: Optional[dict] = None) -> str:
        """
        Parse markdown text to HTML.

        Args:
            markdown_text: Raw markdown content
            env: Optional markdown-it environment shared with nested renders

        Returns:
            HTML string
        """
        return self.markdown_processor.render(markdown_text, env)

    def render_into(self, markdown_text: str, target: Tag) -> Tag:
        """Render *markdown_text* and append the resulting nodes to *target*."""
        html = self.parse(markdown_text)
        fragment = BeautifulSoup(html, "html.parser")
        for node in list(fragment.contents):
            target.append(node.extract())
        return target

    async def render_into_async(self, markdown_text: str, target: Tag) -> Tag:
        """Coroutine flavour of :meth:`render_into` for asynchronous hosts."""
        return self.render_into(markdown_text, target)

    def __call__(self, markdown_text: str, target: Tag) -> Tag:
        return self.render_into(markdown_text, target)


async def run_renderer(render: RenderMarkdown, text: str, target: Tag) -> Any:
    """Call a host renderer and wait for it if it returned an awaitable."""
    result = render(text, target)
    if inspect.isawaitable(result):
        result = await result
    return result
