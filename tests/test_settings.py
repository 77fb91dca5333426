"""Tests for swiftywords.core.settings – YAML game settings."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from swiftywords.core import settings as settings_module
from swiftywords.core.settings import GameSettings, load_settings


def _write_yaml(path: Path, data) -> Path:
    path.write_text(yaml.dump(data, default_flow_style=False), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Defaults and bundled file
# ---------------------------------------------------------------------------

class TestDefaults:
    def test_dataclass_defaults(self):
        s = GameSettings()
        assert s.button_count == 20
        assert s.level_complete_every == 7
        assert s.start_level == 1
        assert s.levels_dir is None
        assert s.seed is None

    def test_missing_default_file_uses_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(settings_module, "DEFAULT_SETTINGS_PATH", tmp_path / "absent.yaml")
        assert load_settings() == GameSettings()

    def test_bundled_settings(self):
        s = load_settings()
        assert s.button_count == 20
        assert s.level_complete_every == 7
        assert s.levels_dir is not None
        assert (s.levels_dir / "level1.txt").is_file()


# ---------------------------------------------------------------------------
# Explicit files – happy paths
# ---------------------------------------------------------------------------

class TestLoadSettings:
    def test_all_keys(self, tmp_path: Path):
        path = _write_yaml(
            tmp_path / "settings.yaml",
            {"button_count": 12, "level_complete_every": 3, "start_level": 2, "seed": 99},
        )
        s = load_settings(path)
        assert s == GameSettings(button_count=12, level_complete_every=3, start_level=2, seed=99)

    def test_partial_file_keeps_defaults(self, tmp_path: Path):
        s = load_settings(_write_yaml(tmp_path / "s.yaml", {"button_count": 8}))
        assert s.button_count == 8
        assert s.level_complete_every == 7

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "s.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path) == GameSettings()

    def test_relative_levels_dir(self, tmp_path: Path):
        s = load_settings(_write_yaml(tmp_path / "s.yaml", {"levels_dir": "puzzles"}))
        assert s.levels_dir == tmp_path.resolve() / "puzzles"

    def test_absolute_levels_dir(self, tmp_path: Path):
        target = tmp_path / "elsewhere"
        s = load_settings(_write_yaml(tmp_path / "s.yaml", {"levels_dir": str(target)}))
        assert s.levels_dir == target

    def test_null_values_ignored(self, tmp_path: Path):
        s = load_settings(_write_yaml(tmp_path / "s.yaml", {"seed": None, "levels_dir": None}))
        assert s == GameSettings()

    def test_mixed_key_types_reported_as_unknown(self, tmp_path: Path):
        path = tmp_path / "s.yaml"
        path.write_text("1: 2\ncolour: teal\n", encoding="utf-8")
        with pytest.raises(ValueError, match="unknown settings 1, colour"):
            load_settings(path)


# ---------------------------------------------------------------------------
# Explicit files – error paths
# ---------------------------------------------------------------------------

class TestLoadSettingsErrors:
    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "s.yaml"
        path.write_text("- item\n", encoding="utf-8")
        with pytest.raises(ValueError, match="expected a YAML mapping"):
            load_settings(path)

    def test_unknown_key(self, tmp_path: Path):
        with pytest.raises(ValueError, match="unknown settings colour"):
            load_settings(_write_yaml(tmp_path / "s.yaml", {"colour": "teal"}))

    @pytest.mark.parametrize("value", [0, -3, "twenty", True, 2.5])
    def test_bad_button_count(self, tmp_path: Path, value):
        with pytest.raises(ValueError, match="'button_count' must be a positive integer"):
            load_settings(_write_yaml(tmp_path / "s.yaml", {"button_count": value}))

    def test_bad_interval(self, tmp_path: Path):
        with pytest.raises(ValueError, match="level_complete_every"):
            load_settings(_write_yaml(tmp_path / "s.yaml", {"level_complete_every": 0}))

    def test_bad_seed(self, tmp_path: Path):
        with pytest.raises(ValueError, match="'seed' must be an integer"):
            load_settings(_write_yaml(tmp_path / "s.yaml", {"seed": "abc"}))

    def test_bad_levels_dir(self, tmp_path: Path):
        with pytest.raises(ValueError, match="levels_dir"):
            load_settings(_write_yaml(tmp_path / "s.yaml", {"levels_dir": 5}))

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "s.yaml"
        path.write_text("button_count: [1,\n", encoding="utf-8")
        with pytest.raises(ValueError, match="s.yaml: invalid YAML"):
            load_settings(path)
