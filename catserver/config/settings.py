"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from catserver.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
VALID_LOG_LEVELS = ("debug", "info", "warning", "error")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.base_directory: str = self._get_env("CAT_SERVER_DIR", "./files/")
        self.max_file_size: int = self._get_int_env(
            "CAT_SERVER_MAX_FILE_SIZE", DEFAULT_MAX_FILE_SIZE
        )
        self.allow_hidden: bool = self._get_bool_env("CAT_SERVER_ALLOW_HIDDEN", False)
        self.log_level: str = self._get_env("CAT_SERVER_LOG_LEVEL", "info").lower()
        self.host: str = self._get_env("CAT_SERVER_HOST", "127.0.0.1")
        self.port: int = self._get_int_env("CAT_SERVER_PORT", 8080)
        self.preview_size: int = self._get_int_env("CAT_SERVER_PREVIEW_SIZE", 1000)

        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.log_level}")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if malformed."""
        value = os.getenv(key)
        if value is None or value.strip() == "":
            return default
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(f"Invalid {key}: {value!r} is not an integer")

    def _get_bool_env(self, key: str, default: bool) -> bool:
        """Get a boolean environment variable, raise error if malformed."""
        value = os.getenv(key)
        if value is None or value.strip() == "":
            return default
        normalized = value.strip().lower()
        if normalized in ("1", "true", "yes", "on"):
            return True
        if normalized in ("0", "false", "no", "off"):
            return False
        raise ConfigurationError(f"Invalid {key}: {value!r} is not a boolean")

    def validate(self) -> None:
        """
        Check settings that depend on the filesystem.

        Raises:
            ConfigurationError: If the base directory is unusable or the size limit is not positive
        """
        if not self.base_directory:
            raise ConfigurationError("Base directory cannot be empty")
        if not os.path.exists(self.base_directory):
            raise ConfigurationError(
                f"Base directory does not exist: {self.base_directory}"
            )
        if not os.path.isdir(self.base_directory):
            raise ConfigurationError(
                f"Base directory is not a directory: {self.base_directory}"
            )
        if self.max_file_size <= 0:
            raise ConfigurationError("Max file size must be positive")


# Global settings instance
settings = Settings()
