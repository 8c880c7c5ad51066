"""Key transparency server adapters."""

from .client import KeyTransparencyClient, KeyTransparencyClientConfig
from .directory import KeyTransparencyUserDirectory

__all__ = [
    "KeyTransparencyClient",
    "KeyTransparencyClientConfig",
    "KeyTransparencyUserDirectory",
]
