"""Key information entity describing the expiration state of one key."""

from dataclasses import dataclass
from datetime import datetime

from ..value_objects import KeyStatus

MAX_KEY_ID = 2**32 - 1


@dataclass(frozen=True, slots=True)
class KeyInfo:
    """Expiration status of a single authorized key at a point in time."""

    key_id: int
    status: KeyStatus
    expire_time: datetime
    days_left: int

    def __post_init__(self) -> None:
        """Validate the key id fits in an unsigned 32-bit integer."""
        if not 0 <= self.key_id <= MAX_KEY_ID:
            msg = f"Key ID must be an unsigned 32-bit integer, got {self.key_id}"
            raise ValueError(msg)

    @property
    def is_expired(self) -> bool:
        """Check if the key has expired."""
        return self.status is KeyStatus.EXPIRED

    @property
    def expire_date(self) -> str:
        """Expiration date formatted as YYYY-MM-DD."""
        return self.expire_time.strftime("%Y-%m-%d")
