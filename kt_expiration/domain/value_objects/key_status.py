"""Key status value object."""

from enum import StrEnum, auto


class KeyStatus(StrEnum):
    """Status of an authorized key based on its expiration."""

    VALID = auto()
    WARNING = auto()
    EXPIRED = auto()

    @property
    def requires_attention(self) -> bool:
        """Check if this status requires the key to be rotated."""
        return self in {KeyStatus.WARNING, KeyStatus.EXPIRED}

    def __str__(self) -> str:
        return self.value
