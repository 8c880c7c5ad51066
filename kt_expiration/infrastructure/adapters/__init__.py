"""Infrastructure adapters - Implementations of application ports."""

from .key_transparency import (
    KeyTransparencyClient,
    KeyTransparencyClientConfig,
    KeyTransparencyUserDirectory,
)
from .keyset import TinkJsonKeysetResolver

__all__ = [
    "KeyTransparencyClient",
    "KeyTransparencyClientConfig",
    "KeyTransparencyUserDirectory",
    "TinkJsonKeysetResolver",
]
