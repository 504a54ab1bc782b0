"""Unit tests for walk settings loading and saving."""

import tomllib
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError
from walkctl.core.settings import (
    SettingsError,
    SettingsParseError,
    WalkSettings,
    check_extension,
    load_settings,
    save_settings,
    settings_to_dict,
)


class TestWalkSettings:
    """Tests for the WalkSettings model."""

    def test_defaults(self) -> None:
        """Defaults disable every filter and log to stdout."""
        settings = WalkSettings()
        assert settings.extensions == []
        assert settings.min_size == 0
        assert settings.name_length == 0
        assert settings.log_file is None

    def test_rejects_unknown_keys(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            WalkSettings.model_validate({"extension": [".log"]})

    def test_rejects_negative_size(self) -> None:
        """min_size must be non-negative."""
        with pytest.raises(ValidationError):
            WalkSettings(min_size=-1)

    @pytest.mark.parametrize("ext", ["log", ".", ""])
    def test_rejects_extension_without_dot(self, ext: str) -> None:
        """Extensions must start with a dot and name something."""
        with pytest.raises(ValidationError, match="extension must start with"):
            WalkSettings(extensions=[ext])

    def test_accepts_multiple_extensions(self) -> None:
        """Several extensions may be configured."""
        settings = WalkSettings(extensions=[".log", ".tmp"])
        assert settings.extensions == [".log", ".tmp"]


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        """A missing settings file yields defaults."""
        assert load_settings(tmp_path / "config.toml") == WalkSettings()

    def test_loads_values(self, tmp_path: Path) -> None:
        """Values from the file are loaded and validated."""
        path = tmp_path / "config.toml"
        path.write_text(
            'extensions = [".log"]\nmin_size = 1024\nname_length = 3\n'
            'log_file = "/var/log/walk-deletes.log"\n'
        )

        settings = load_settings(path)

        assert settings.extensions == [".log"]
        assert settings.min_size == 1024
        assert settings.name_length == 3
        assert settings.log_file == Path("/var/log/walk-deletes.log")

    def test_invalid_toml_raises_parse_error(self, tmp_path: Path) -> None:
        """Broken TOML raises SettingsParseError."""
        path = tmp_path / "config.toml"
        path.write_text("extensions = [\n")

        with pytest.raises(SettingsParseError, match="Invalid TOML"):
            load_settings(path)

    def test_invalid_content_raises(self, tmp_path: Path) -> None:
        """Schema violations raise SettingsError."""
        path = tmp_path / "config.toml"
        path.write_text('min_size = "big"\n')

        with pytest.raises(SettingsError, match="Invalid settings content"):
            load_settings(path)

    def test_read_error_raises(self, tmp_path: Path) -> None:
        """I/O errors raise SettingsError."""
        path = tmp_path / "config.toml"
        path.write_text("min_size = 1\n")

        with (
            patch("builtins.open", side_effect=PermissionError("denied")),
            pytest.raises(SettingsError, match="Failed to read"),
        ):
            load_settings(path)

    def test_uses_default_path(self, isolated_config: Path) -> None:
        """Without a path, the XDG settings file is read."""
        path = isolated_config / "walkctl" / "config.toml"
        path.parent.mkdir(parents=True)
        path.write_text("min_size = 7\n")

        assert load_settings().min_size == 7


class TestSaveSettings:
    """Tests for save_settings."""

    def test_round_trip(self, tmp_path: Path) -> None:
        """Saved settings load back unchanged."""
        path = tmp_path / "nested" / "config.toml"
        settings = WalkSettings(
            extensions=[".log"], min_size=10, log_file=tmp_path / "deleted.log"
        )

        saved = save_settings(settings, path)

        assert saved == path
        assert load_settings(path) == settings

    def test_omits_unset_log_file(self, tmp_path: Path) -> None:
        """TOML output has no log_file key when it is unset."""
        path = tmp_path / "config.toml"
        save_settings(WalkSettings(), path)

        data = tomllib.loads(path.read_text())
        assert "log_file" not in data
        assert data == {"extensions": [], "min_size": 0, "name_length": 0}

    def test_write_failure_raises_and_cleans_up(self, tmp_path: Path) -> None:
        """A failed replace leaves no temporary file behind."""
        path = tmp_path / "config.toml"

        with (
            patch("walkctl.core.settings.os.replace", side_effect=OSError("read-only")),
            pytest.raises(SettingsError, match="Failed to write"),
        ):
            save_settings(WalkSettings(), path)

        assert list(tmp_path.iterdir()) == []

    def test_settings_to_dict(self, tmp_path: Path) -> None:
        """log_file is serialized as a string."""
        data = settings_to_dict(WalkSettings(log_file=tmp_path / "d.log"))
        assert data["log_file"] == str(tmp_path / "d.log")


class TestCheckExtension:
    """Tests for check_extension."""

    def test_returns_valid_extension(self) -> None:
        """A dotted suffix is returned unchanged."""
        assert check_extension(".bashrc") == ".bashrc"

    @pytest.mark.parametrize("ext", ["log", ".", ""])
    def test_rejects_invalid_extension(self, ext: str) -> None:
        """Entries without a dot or without a suffix raise ValueError."""
        with pytest.raises(ValueError, match="extension must start with"):
            check_extension(ext)
