"""
Standalone HTML export: rendered markdown wrapped in a themed page.
"""
from jinja2 import DictLoader, Environment, select_autoescape

from .theme_loader import DEFAULT_THEME, load_callout_css

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>
{{ css | safe }}
</style>
</head>
<body>
<main class="markdown-rendered">
{{ body | safe }}
</main>
</body>
</html>
"""

_env = Environment(
    loader=DictLoader({"page.html": PAGE_TEMPLATE}),
    autoescape=select_autoescape(default=True, default_for_string=True),
    keep_trailing_newline=True,
)


def render_page(body_html: str, title: str = "Document", theme: str = DEFAULT_THEME) -> str:
    """
    Wrap rendered HTML in a complete page.

    Args:
        body_html: Rendered markdown (inserted as-is)
        title: Page title (escaped)
        theme: Callout theme whose CSS is inlined into the page

    Raises:
        FileNotFoundError, ValueError: From :func:`load_callout_css` for a bad theme
    """
    return _env.get_template("page.html").render(
        title=title,
        css=load_callout_css(theme),
        body=body_html,
    )
