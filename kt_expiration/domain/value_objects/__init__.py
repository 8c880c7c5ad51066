"""Domain value objects - Immutable objects defined by their attributes."""

from .key_status import KeyStatus
from .thresholds import ExpirationConfig

__all__ = [
    "ExpirationConfig",
    "KeyStatus",
]
