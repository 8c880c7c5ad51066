"""Application ports - Interfaces for external adapters."""

from .expiration_lookup import ExpirationLookup
from .keyset_resolver import KeysetResolver
from .user_directory import UserDirectory

__all__ = [
    "ExpirationLookup",
    "KeysetResolver",
    "UserDirectory",
]
