"""Persisted user preferences for the front-ends.

The extraction core never reads these; a front-end loads them at startup,
passes the values in explicitly and saves them back after a run.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)

PREFS_ENV_VAR = 'JS_FORMULA_EXTRACTOR_PREFS'
DEFAULT_PREFS_PATH = Path('~/.js_formula_extractor/preferences.json')


@dataclass
class UserPreferences:
    last_input_file: str = ''
    last_output_dir: str = ''
    add_comments: bool = True
    open_folder: bool = True


def default_preferences_path() -> Path:
    return Path(os.environ.get(PREFS_ENV_VAR) or DEFAULT_PREFS_PATH).expanduser()


def load_preferences(path=None) -> UserPreferences:
    """Load preferences, falling back to defaults if the file is missing or unreadable."""
    path = Path(path) if path is not None else default_preferences_path()
    if not path.is_file():
        return UserPreferences()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable preferences file %s: %s", path, exc)
        return UserPreferences()
    if not isinstance(raw, dict):
        logger.warning("Ignoring preferences file %s: expected an object", path)
        return UserPreferences()

    prefs = UserPreferences()
    for f in fields(UserPreferences):
        value = raw.get(f.name)
        if isinstance(value, type(getattr(prefs, f.name))):
            setattr(prefs, f.name, value)
    return prefs


def save_preferences(prefs: UserPreferences, path=None) -> Path:
    path = Path(path) if path is not None else default_preferences_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(asdict(prefs), f, indent=2)
    return path
