"""Port for per-key expiration lookup - driven/secondary port."""

from datetime import datetime
from typing import Protocol


class ExpirationLookup(Protocol):
    """Port for resolving the expiration instant of a key."""

    def expiration_for(self, key_id: int, now: datetime) -> datetime:
        """Return the instant at which ``key_id`` expires."""
        ...
