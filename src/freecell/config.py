# config.py - persisted settings for the engine and the hint viewer
import json
import logging
import os
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

CARD_SIZES = ("Small", "Medium", "Large")
BACK_COLORS = ("Blue", "Grey", "Red")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Defaults (may be overridden by persisted settings, then by the environment)
_DEFAULT_SETTINGS = {
    "card_size": "Medium",   # Small | Medium | Large
    "back_color": "Blue",    # Blue | Grey | Red
    "log_level": "WARNING",
    "enforce_move_capacity": True,
}

_ENV_OVERRIDES = {
    "card_size": "FREECELL_CARD_SIZE",
    "log_level": "FREECELL_LOG_LEVEL",
}

_CURRENT_SETTINGS = dict(_DEFAULT_SETTINGS)


def _settings_dir() -> str:
    # Prefer %APPDATA% on Windows, else ~/.freecell_engine
    base = os.environ.get("APPDATA")
    if base:
        return os.path.join(base, "FreecellEngine")
    return os.path.join(os.path.expanduser("~"), ".freecell_engine")


def _settings_path() -> str:
    return os.path.join(_settings_dir(), "settings.json")


def _normalise(key: str, value):
    if key == "card_size":
        value = str(value).capitalize()
        return value if value in CARD_SIZES else None
    if key == "back_color":
        value = str(value).capitalize()
        return value if value in BACK_COLORS else None
    if key == "log_level":
        value = str(value).upper()
        return value if value in LOG_LEVELS else None
    if key == "enforce_move_capacity":
        return value if isinstance(value, bool) else None
    return None


def get_current_settings() -> dict:
    return dict(_CURRENT_SETTINGS)


def reset_settings():
    global _CURRENT_SETTINGS
    _CURRENT_SETTINGS = dict(_DEFAULT_SETTINGS)


def load_settings(path: Optional[str] = None) -> dict:
    """Merge the settings file and environment overrides into the current settings.

    A missing file is normal; an unreadable or malformed one is logged and
    ignored so the defaults stay in force.
    """
    path = path or _settings_path()
    data = {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        pass
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring settings file %s: %s", path, exc)
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected an object", path)
        data = {}

    for key in _DEFAULT_SETTINGS:
        if key in data:
            value = _normalise(key, data[key])
            if value is None:
                logger.warning("Ignoring invalid setting %s=%r", key, data[key])
            else:
                _CURRENT_SETTINGS[key] = value

    for key, env_name in _ENV_OVERRIDES.items():
        raw = os.environ.get(env_name, "").strip()
        if raw:
            value = _normalise(key, raw)
            if value is None:
                logger.warning("Ignoring invalid %s=%r", env_name, raw)
            else:
                _CURRENT_SETTINGS[key] = value
    return get_current_settings()


def save_settings(new_values: dict, path: Optional[str] = None):
    # Merge and write to disk
    for key, raw in new_values.items():
        if key not in _DEFAULT_SETTINGS:
            raise KeyError(f"Unknown setting {key!r}")
        value = _normalise(key, raw)
        if value is None:
            raise ValueError(f"Invalid value for {key}: {raw!r}")
        _CURRENT_SETTINGS[key] = value
    path = path or _settings_path()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(_CURRENT_SETTINGS, f, indent=2)


def card_dimensions(size_name: Optional[str] = None) -> Tuple[int, int]:
    size_name = (size_name or _CURRENT_SETTINGS["card_size"]).capitalize()
    if size_name == "Small":
        return 75, 105
    if size_name == "Large":
        return 150, 210
    return 100, 140
