"""Expiration configuration value object."""

from dataclasses import dataclass
from datetime import timedelta
from typing import Self

DEFAULT_WARNING_DAYS = 30


@dataclass(frozen=True, slots=True)
class ExpirationConfig:
    """Configuration for the key expiration checker."""

    # Time before expiration below which a still-valid key is flagged.
    warning_threshold: timedelta = timedelta(days=DEFAULT_WARNING_DAYS)

    def __post_init__(self) -> None:
        """Validate the warning threshold is non-negative."""
        if self.warning_threshold < timedelta(0):
            msg = f"Warning threshold must be non-negative, got {self.warning_threshold}"
            raise ValueError(msg)

    @property
    def warning_days(self) -> int:
        """Warning threshold expressed in whole days."""
        return self.warning_threshold.days

    @classmethod
    def default(cls) -> Self:
        """Configuration with a 30 day warning threshold."""
        return cls()

    @classmethod
    def from_days(cls, days: int) -> Self:
        """Build a configuration from a day count."""
        if days < 0:
            msg = f"Warning days must be non-negative, got {days}"
            raise ValueError(msg)
        return cls(warning_threshold=timedelta(days=days))
