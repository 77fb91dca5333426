from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from swiftywords.core.game import DEFAULT_BUTTON_COUNT, DEFAULT_LEVEL_COMPLETE_EVERY

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


@dataclass(frozen=True)
class GameSettings:
    button_count: int = DEFAULT_BUTTON_COUNT
    level_complete_every: int = DEFAULT_LEVEL_COMPLETE_EVERY
    start_level: int = 1
    levels_dir: Optional[Path] = None
    seed: Optional[int] = None


def _positive_int(name: str, value: object, source: str) -> int:
    # bool is an int subclass; "true" is never a valid count
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{source}: '{name}' must be a positive integer, got {value!r}")
    return value


def load_settings(path: Optional[Path] = None) -> GameSettings:
    """Read game settings from YAML.

    Without ``path`` the bundled ``data/settings.yaml`` is used, and defaults
    apply if it is missing. An explicit path must exist.
    """
    settings_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Settings file not found: {settings_path}")
        logger.info("No settings file at %s, using defaults", settings_path)
        return GameSettings()

    try:
        raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"{settings_path.name}: invalid YAML: {e}") from e
    if raw is None:
        return GameSettings()
    if not isinstance(raw, dict):
        raise ValueError(f"{settings_path.name}: expected a YAML mapping")

    known = {f.name for f in fields(GameSettings)}
    unknown = sorted(set(raw) - known, key=str)
    if unknown:
        raise ValueError(f"{settings_path.name}: unknown settings {', '.join(map(str, unknown))}")

    source = settings_path.name
    values = {}
    for name in ("button_count", "level_complete_every", "start_level"):
        if raw.get(name) is not None:
            values[name] = _positive_int(name, raw[name], source)

    seed = raw.get("seed")
    if seed is not None:
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise ValueError(f"{source}: 'seed' must be an integer, got {seed!r}")
        values["seed"] = seed

    levels_dir = raw.get("levels_dir")
    if levels_dir is not None:
        if not isinstance(levels_dir, str) or not levels_dir.strip():
            raise ValueError(f"{source}: 'levels_dir' must be a path string")
        resolved = Path(levels_dir.strip()).expanduser()
        if not resolved.is_absolute():
            resolved = settings_path.resolve().parent / resolved
        values["levels_dir"] = resolved

    return GameSettings(**values)
