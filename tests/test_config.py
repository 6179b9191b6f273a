import json
import logging
from pathlib import Path

import pytest

from mathbuddy.config import DEFAULTS, config_path, load_config, save_config


def test_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "nope.json") == DEFAULTS


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "config.json"
    config = dict(DEFAULTS, dark_mode=True, display_font_size=32)
    save_config(config, path)
    assert json.loads(path.read_text(encoding="utf-8"))["dark_mode"] is True
    assert load_config(path) == config


def test_partial_file_is_merged_over_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"dark_mode": True, "unknown": 1}), encoding="utf-8")
    config = load_config(path)
    assert config["dark_mode"] is True
    assert config["font_family"] == DEFAULTS["font_family"]
    assert "unknown" not in config


def test_malformed_file_is_logged_and_ignored(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="mathbuddy.config"):
        assert load_config(path) == DEFAULTS
    assert "Error loading config" in caplog.text


@pytest.mark.parametrize("key,value", [
    ("display_font_size", "big"),
    ("display_font_size", None),
    ("display_font_size", True),
    ("display_font_size", 0),
    ("display_font_size", 12.5),
    ("font_family", 5),
    ("dark_mode", "yes"),
    ("dark_mode", 1),
])
def test_wrongly_typed_value_falls_back_to_default(tmp_path, caplog, key, value):
    path = tmp_path / "config.json"
    other = {"font_family": "Inter"} if key == "dark_mode" else {"dark_mode": True}
    path.write_text(json.dumps(dict(other, **{key: value})), encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="mathbuddy.config"):
        config = load_config(path)
    assert config[key] == DEFAULTS[key]
    assert "Ignoring config value %s" % key in caplog.text
    # the valid key next to it still loads
    for k, v in other.items():
        assert config[k] == v


def test_non_object_file_is_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(path) == DEFAULTS


def test_env_var_overrides_location(config_file):
    assert config_path() == config_file
    save_config(dict(DEFAULTS, dark_mode=True))
    assert load_config()["dark_mode"] is True


def test_default_location_is_in_home(monkeypatch):
    monkeypatch.delenv("MATHBUDDY_CONFIG", raising=False)
    assert config_path() == Path.home() / ".mathbuddy" / "config.json"
