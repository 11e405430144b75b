"""
Tests for the Settings configuration object.
"""

import pytest

from catserver.config.settings import DEFAULT_MAX_FILE_SIZE, Settings
from catserver.exceptions import ConfigurationError

ENV_KEYS = (
    "CAT_SERVER_DIR",
    "CAT_SERVER_MAX_FILE_SIZE",
    "CAT_SERVER_ALLOW_HIDDEN",
    "CAT_SERVER_LOG_LEVEL",
    "CAT_SERVER_HOST",
    "CAT_SERVER_PORT",
    "CAT_SERVER_PREVIEW_SIZE",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every CAT_SERVER_* variable for the duration of a test."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, clean_env):
        """Test default values."""
        settings = Settings()

        assert settings.base_directory == "./files/"
        assert settings.max_file_size == DEFAULT_MAX_FILE_SIZE == 10 * 1024 * 1024
        assert settings.allow_hidden is False
        assert settings.log_level == "info"
        assert settings.host == "127.0.0.1"
        assert settings.port == 8080
        assert settings.preview_size == 1000

    def test_environment_overrides(self, clean_env, tmp_path):
        """Test values read from the environment."""
        clean_env.setenv("CAT_SERVER_DIR", str(tmp_path))
        clean_env.setenv("CAT_SERVER_MAX_FILE_SIZE", "2048")
        clean_env.setenv("CAT_SERVER_ALLOW_HIDDEN", "yes")
        clean_env.setenv("CAT_SERVER_LOG_LEVEL", "DEBUG")
        clean_env.setenv("CAT_SERVER_PORT", "9000")

        settings = Settings()

        assert settings.base_directory == str(tmp_path)
        assert settings.max_file_size == 2048
        assert settings.allow_hidden is True
        assert settings.log_level == "debug"
        assert settings.port == 9000
        settings.validate()

    def test_blank_values_use_defaults(self, clean_env):
        """Test that empty numeric and boolean values fall back to defaults."""
        clean_env.setenv("CAT_SERVER_PORT", "  ")
        clean_env.setenv("CAT_SERVER_ALLOW_HIDDEN", "")

        settings = Settings()

        assert settings.port == 8080
        assert settings.allow_hidden is False

    @pytest.mark.parametrize(
        "key,value",
        [
            ("CAT_SERVER_MAX_FILE_SIZE", "ten"),
            ("CAT_SERVER_PORT", "80.5"),
            ("CAT_SERVER_ALLOW_HIDDEN", "maybe"),
            ("CAT_SERVER_LOG_LEVEL", "verbose"),
        ],
    )
    def test_malformed_values(self, clean_env, key, value):
        """Test that malformed values raise ConfigurationError."""
        clean_env.setenv(key, value)

        with pytest.raises(ConfigurationError):
            Settings()

    def test_validate_missing_directory(self, clean_env, tmp_path):
        """Test validation of a base directory that does not exist."""
        clean_env.setenv("CAT_SERVER_DIR", str(tmp_path / "missing"))

        with pytest.raises(ConfigurationError, match="does not exist"):
            Settings().validate()

    def test_validate_file_as_directory(self, clean_env, tmp_path):
        """Test validation of a base directory that is a file."""
        target = tmp_path / "file.txt"
        target.write_text("x")
        clean_env.setenv("CAT_SERVER_DIR", str(target))

        with pytest.raises(ConfigurationError, match="not a directory"):
            Settings().validate()

    def test_validate_non_positive_size(self, clean_env, tmp_path):
        """Test validation of the size limit."""
        clean_env.setenv("CAT_SERVER_DIR", str(tmp_path))
        clean_env.setenv("CAT_SERVER_MAX_FILE_SIZE", "0")

        with pytest.raises(ConfigurationError, match="must be positive"):
            Settings().validate()
