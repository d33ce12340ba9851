from markdown_it import MarkdownIt
from markdown_it.rules_block import StateBlock

from ..callout import render_callout_html
from ..extractor import extract_content_from_state
from ..header import parse_header
from ..models import ParseOptions

TOKEN_TYPE = "mkdocs_admonition"
DEPTH_ENV_KEY = "mkdocs_admonition_depth"
DEFAULT_MAX_DEPTH = 64
# Block rules that only make sense at the top of the whole document
DOCUMENT_ONLY_RULES = ("front_matter",)


def admonition_plugin(
    md: MarkdownIt,
    end_on_double_blank: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
    document_only_rules=DOCUMENT_ONLY_RULES,
):
    """Markdown-it-py plugin for MkDocs-style ``!!!`` / ``???`` / ``???+``
    admonitions.  The header line is followed by a body indented by four
    spaces (or a tab); the body is rendered through the *whole* grammar so
    admonitions nest.

    ``max_depth`` bounds the nesting: once the body of the ``max_depth``-th
    nested admonition is parsed, further headers are left to the other rules.

    Rules named in ``document_only_rules`` (front matter by default) are
    switched off while a body is rendered, so a body starting with ``---``
    keeps its thematic break.
    """
    options = ParseOptions(end_on_double_blank=end_on_double_blank)

    def _admonition_block(state: StateBlock, start_line: int, end_line: int, silent: bool):
        start = state.bMarks[start_line] + state.tShift[start_line]
        max_pos = state.eMarks[start_line]
        if start + 3 > max_pos:
            return False

        line_text = state.src[start:max_pos]
        if not line_text.startswith(("!!!", "???")):
            return False

        if state.env.get(DEPTH_ENV_KEY, 0) >= max_depth:
            return False

        meta = parse_header(line_text.strip())
        if meta is None:
            return False

        # Termination probe from another rule: the header alone decides
        if silent:
            return True

        extracted = extract_content_from_state(state, start_line + 1, end_line, options)
        if extracted is None:
            return False

        token = state.push(TOKEN_TYPE, "", 0)
        token.block = True
        token.map = [start_line, extracted.end_line]
        token.meta = {"admonition": meta}
        token.content = extracted.content

        state.line = extracted.end_line
        return True

    def _render_admonition(self, tokens, idx, _options, env):
        token = tokens[idx]
        depth = env.get(DEPTH_ENV_KEY, 0)

        active = md.block.ruler.get_active_rules()
        suspended = [name for name in document_only_rules if name in active]
        if suspended:
            md.block.ruler.disable(suspended)

        env[DEPTH_ENV_KEY] = depth + 1
        try:
            inner = md.render(token.content, env)
        finally:
            env[DEPTH_ENV_KEY] = depth
            if suspended:
                md.block.ruler.enable(suspended)

        return render_callout_html(token.meta["admonition"], inner)

    # Ahead of fences so a header is never taken for fence text; may
    # interrupt paragraphs, references, blockquotes and lists
    md.block.ruler.before(
        "fence",
        TOKEN_TYPE,
        _admonition_block,
        {"alt": ["paragraph", "reference", "blockquote", "list"]},
    )
    md.add_render_rule(TOKEN_TYPE, _render_admonition)
