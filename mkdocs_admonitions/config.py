"""
User settings for admonition rendering.

Settings are stored as a small JSON object.  Stored values are merged over
the defaults, so a settings file only needs the keys it changes.
"""
import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Union

from .live_preview import LivePreviewOptions
from .models import ParseOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """
    Attributes:
        end_on_double_blank: Two consecutive blank lines end an admonition
        live_preview_enabled: Render admonitions in the live preview; when
            off the live view shows the source text
    """
    end_on_double_blank: bool = True
    live_preview_enabled: bool = True

    def parse_options(self) -> ParseOptions:
        return ParseOptions(end_on_double_blank=self.end_on_double_blank)

    def live_preview_options(self) -> LivePreviewOptions:
        return LivePreviewOptions(
            end_on_double_blank=self.end_on_double_blank,
            enabled=self.live_preview_enabled,
        )


DEFAULT_SETTINGS = Settings()


def settings_from_dict(data: Dict[str, Any]) -> Settings:
    """
    Merge *data* over the defaults.

    Raises:
        ValueError: If the data is not an object or a value is not a boolean
    """
    if not isinstance(data, dict):
        raise ValueError(f"Settings must be a JSON object, got {type(data).__name__}")

    known = {f.name for f in fields(Settings)}
    updates = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown setting '%s'", key)
            continue
        if not isinstance(value, bool):
            raise ValueError(f"Setting '{key}' must be true or false, got {value!r}")
        updates[key] = value

    return replace(DEFAULT_SETTINGS, **updates)


def load_settings(path: Union[str, Path]) -> Settings:
    """
    Load settings from a JSON file.

    A missing file yields the defaults.

    Raises:
        ValueError: If the file is not valid JSON or holds invalid values
    """
    settings_path = Path(path)
    if not settings_path.exists():
        logger.debug("No settings at %s, using defaults", settings_path)
        return DEFAULT_SETTINGS

    with open(settings_path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid settings file {settings_path}: {e}") from e

    return settings_from_dict(data)


def save_settings(settings: Settings, path: Union[str, Path]) -> Path:
    """Write *settings* as JSON, creating parent directories as needed."""
    settings_path = Path(path)
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    with open(settings_path, 'w', encoding='utf-8') as f:
        json.dump(asdict(settings), f, indent=2)
    return settings_path
