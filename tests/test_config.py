"""Tests for user settings."""

import json

import pytest

from pathlex.config import CONFIG_VERSION
from pathlex.config import Settings
from pathlex.exceptions import ConfigValidationError
from pathlex.exceptions import ConfigVersionError
from pathlex.operations.absolute import DEFAULT_SCHEMES


class TestSettingsLoad:
    """Tests for Settings.load()."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """Test that a missing config file is not an error."""
        settings = Settings.load(tmp_path / "config.json")

        assert settings.version == CONFIG_VERSION
        assert settings.schemes == DEFAULT_SCHEMES
        assert settings.log_level == "WARNING"

    def test_loads_values(self, tmp_path):
        """Test that values from the file are used."""
        path = tmp_path / "config.json"
        path.write_text(
            json.dumps({"version": 1, "schemes": ["S3", "file"], "log_level": "info"})
        )

        settings = Settings.load(path)

        assert settings.schemes == ("s3", "file")
        assert settings.log_level == "INFO"

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON is reported."""
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigValidationError) as exc_info:
            Settings.load(path)

        assert "Invalid JSON" in str(exc_info.value)

    def test_missing_version(self, tmp_path):
        """Test that the version key is required."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"schemes": []}))

        with pytest.raises(ConfigValidationError):
            Settings.load(path)

    def test_newer_version(self, tmp_path):
        """Test that configs from a newer pathlex are rejected."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"version": CONFIG_VERSION + 1}))

        with pytest.raises(ConfigVersionError):
            Settings.load(path)

    def test_bad_schemes(self):
        """Test that schemes must be a list of names."""
        with pytest.raises(ConfigValidationError):
            Settings.from_dict({"version": 1, "schemes": "http"})
        with pytest.raises(ConfigValidationError):
            Settings.from_dict({"version": 1, "schemes": ["http", ""]})

    def test_bad_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ConfigValidationError):
            Settings.from_dict({"version": 1, "log_level": "LOUD"})

    def test_binary_file(self, tmp_path):
        """Test that a file that is not text is reported as invalid."""
        path = tmp_path / "config.json"
        path.write_bytes(b"\xff\xfe\x00\x81")

        with pytest.raises(ConfigValidationError):
            Settings.load(path)

    def test_from_dict_defaults(self):
        """Test that only the version key is required."""
        assert Settings.from_dict({"version": 1}) == Settings()

    def test_default_path_is_in_user_config_dir(self):
        """Test that the default location is named after the project."""
        path = Settings.default_path()

        assert path.name == "config.json"
        assert "pathlex" in path.parts
