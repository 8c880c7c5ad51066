"""User entity as published in the key transparency directory."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class User:
    """A directory user and the keys authorized to update its profile."""

    user_id: str
    public_key_data: bytes = b""
    # Opaque keyset handle, interpreted only by a KeysetResolver.
    authorized_keys: Any | None = None
