"""
Callout stylesheets shipped as package data.

Each ``themes/<name>.css`` resource styles the callout container markup
(``.callout``, ``.callout-title``, ``.callout-content`` and the per-type
``data-callout`` variants) for one look.  Themes are looked up through
:mod:`importlib.resources`, so they resolve the same way from a source
checkout, an installed wheel or a zip import.
"""
import logging
import re
from importlib import resources
from typing import List

logger = logging.getLogger(__name__)

THEME_SUFFIX = ".css"
DEFAULT_THEME = "default"
# Names map straight onto resource files: no separators, no dots
THEME_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")


def _themes_root():
    return resources.files(__package__).joinpath("themes")


def callout_themes() -> List[str]:
    """Sorted names of the callout themes bundled with the package."""
    root = _themes_root()
    if not root.is_dir():
        return []
    return sorted(
        entry.name[: -len(THEME_SUFFIX)]
        for entry in root.iterdir()
        if entry.is_file() and entry.name.endswith(THEME_SUFFIX)
    )


def load_callout_css(theme: str = DEFAULT_THEME) -> str:
    """
    Return the stylesheet of a bundled callout theme.

    Raises:
        ValueError: If *theme* is not a plain theme name
        FileNotFoundError: If no callout theme has that name
    """
    if not THEME_NAME_RE.match(theme):
        raise ValueError(f"Invalid callout theme name {theme!r}")

    resource = _themes_root().joinpath(theme + THEME_SUFFIX)
    if not resource.is_file():
        available = ", ".join(callout_themes()) or "none"
        raise FileNotFoundError(
            f"No callout theme named {theme!r} (available: {available})"
        )

    logger.debug("Loading callout theme %s", theme)
    return resource.read_text(encoding="utf-8")


def is_callout_theme(theme: str) -> bool:
    return bool(THEME_NAME_RE.match(theme)) and theme in callout_themes()
