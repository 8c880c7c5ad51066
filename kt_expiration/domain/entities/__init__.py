"""Domain entities - Objects with identity and lifecycle."""

from .key_info import KeyInfo
from .user import User

__all__ = [
    "KeyInfo",
    "User",
]
