from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore


def source_line_plugin(md: MarkdownIt):
    """Stamp ``data-line="<n>"`` (0-based first source line) on block tags,
    the same section-to-element mapping an editor preview exposes.  The
    fallback post-processor uses it to find the elements an admonition
    spans.
    """

    def _stamp_source_lines(state: StateCore):
        for token in state.tokens:
            if not token.block or token.map is None:
                continue
            if token.nesting < 0 or token.type == "inline":
                continue
            token.attrSet("data-line", str(token.map[0]))

    md.core.ruler.after("block", "source_lines", _stamp_source_lines)
