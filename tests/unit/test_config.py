"""Test settings loading and saving."""

import json
import logging

import pytest
from mkdocs_admonitions.config import (
    DEFAULT_SETTINGS,
    Settings,
    load_settings,
    save_settings,
    settings_from_dict,
)
from mkdocs_admonitions.live_preview import LivePreviewOptions
from mkdocs_admonitions.models import ParseOptions


def test_defaults():
    assert DEFAULT_SETTINGS.end_on_double_blank is True
    assert DEFAULT_SETTINGS.live_preview_enabled is True


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "absent.json") == DEFAULT_SETTINGS


def test_stored_values_merge_over_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"live_preview_enabled": False}), encoding="utf-8")

    settings = load_settings(path)

    assert settings == Settings(end_on_double_blank=True, live_preview_enabled=False)


def test_unknown_keys_are_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        settings = settings_from_dict({"theme": "dark", "end_on_double_blank": False})

    assert settings.end_on_double_blank is False
    assert "theme" in caplog.text


@pytest.mark.parametrize("data", [
    {"end_on_double_blank": "yes"},
    {"live_preview_enabled": 1},
    ["end_on_double_blank"],
])
def test_invalid_values_raise(data):
    with pytest.raises(ValueError):
        settings_from_dict(data)


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid settings file"):
        load_settings(path)


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "settings.json"
    settings = Settings(end_on_double_blank=False, live_preview_enabled=False)

    save_settings(settings, path)

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "end_on_double_blank": False,
        "live_preview_enabled": False,
    }
    assert load_settings(path) == settings


def test_projections():
    settings = Settings(end_on_double_blank=False, live_preview_enabled=False)

    assert settings.parse_options() == ParseOptions(end_on_double_blank=False)
    assert settings.live_preview_options() == LivePreviewOptions(end_on_double_blank=False, enabled=False)
