"""Application use cases."""

from .check_key_expiration import CheckKeyExpiration, CheckResult

__all__ = [
    "CheckKeyExpiration",
    "CheckResult",
]
