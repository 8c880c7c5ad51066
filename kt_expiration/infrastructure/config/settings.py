"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from ...domain.value_objects import ExpirationConfig
from ..adapters.key_transparency import KeyTransparencyClientConfig


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Application settings container."""

    # Key transparency server
    kt_server_url: str = field(default_factory=lambda: _env_str("KT_SERVER_URL", "http://localhost:8080"))
    kt_directory_id: str = field(default_factory=lambda: _env_str("KT_DIRECTORY_ID", "default"))
    kt_auth_token: str = field(default_factory=lambda: _env_str("KT_AUTH_TOKEN"))
    kt_timeout: float = field(default_factory=lambda: _env_float("KT_TIMEOUT", 30.0))

    # Expiration check
    warning_days: int = field(default_factory=lambda: _env_int("WARNING_DAYS", 30))

    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))
    verbose: bool = field(default_factory=lambda: _env_bool("VERBOSE"))

    # API settings
    api_host: str = field(default_factory=lambda: _env_str("API_HOST", "0.0.0.0"))  # noqa: S104
    api_port: int = field(default_factory=lambda: _env_int("API_PORT", 8080))

    def validate(self) -> None:
        """Validate settings."""
        problems: list[str] = []

        if not self.kt_server_url:
            problems.append("KT_SERVER_URL is required")
        if not self.kt_directory_id:
            problems.append("KT_DIRECTORY_ID is required")
        if self.kt_timeout <= 0:
            problems.append(f"KT_TIMEOUT must be positive, got {self.kt_timeout}")
        if self.warning_days < 0:
            problems.append(f"WARNING_DAYS must be non-negative, got {self.warning_days}")

        if problems:
            msg = f"Invalid configuration: {'; '.join(problems)}"
            raise ValueError(msg)

    @property
    def effective_log_level(self) -> str:
        """Log level, lowered to DEBUG when verbose output is requested."""
        return "DEBUG" if self.verbose else self.log_level.upper()

    @cached_property
    def client_config(self) -> KeyTransparencyClientConfig:
        """Get key transparency client configuration."""
        return KeyTransparencyClientConfig(
            base_url=self.kt_server_url,
            directory_id=self.kt_directory_id,
            auth_token=self.kt_auth_token,
            timeout=self.kt_timeout,
        )

    @cached_property
    def expiration_config(self) -> ExpirationConfig:
        """Get expiration checker configuration."""
        return ExpirationConfig.from_days(self.warning_days)


def load_settings(**overrides: object) -> Settings:
    """
    Load and validate settings from environment.

    Keyword arguments override the environment, skipping ``None`` values.
    """
    settings = Settings(**{k: v for k, v in overrides.items() if v is not None})
    settings.validate()
    return settings
