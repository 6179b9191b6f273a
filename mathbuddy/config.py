"""Settings file for the calculator window (theme and display font)."""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULTS = {
    "dark_mode": False,
    "font_family": "Segoe UI",
    "display_font_size": 28,
}


def config_path() -> Path:
    env = os.getenv("MATHBUDDY_CONFIG")
    if env:
        return Path(env)
    return Path.home() / ".mathbuddy" / "config.json"


def load_config(path=None) -> dict:
    """Load settings from JSON, falling back to DEFAULTS for anything missing."""
    path = Path(path) if path else config_path()
    config = dict(DEFAULTS)
    if not path.exists():
        return config
    try:
        with open(path, "r", encoding="utf-8") as f:
            saved = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Error loading config %s: %s", path, e)
        return config
    if not isinstance(saved, dict):
        logger.warning("Ignoring config %s: expected a JSON object", path)
        return config
    for key, value in saved.items():
        if key not in DEFAULTS:
            continue
        if _valid(key, value):
            config[key] = value
        else:
            logger.warning("Ignoring config value %s=%r in %s", key, value, path)
    return config


def _valid(key, value) -> bool:
    default = DEFAULTS[key]
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        # bool is an int subclass, a font size of True is not a size
        return isinstance(value, int) and not isinstance(value, bool) and value > 0
    return isinstance(value, type(default))


def save_config(config: dict, path=None) -> None:
    path = Path(path) if path else config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=4)
    except OSError as e:
        logger.warning("Error saving config %s: %s", path, e)
