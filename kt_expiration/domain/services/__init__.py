"""Domain services - Stateless operations on domain objects."""

from .expiration_checker import (
    Checker,
    KeysetInfoResolver,
    ParityExpirationLookup,
    classify,
    days_between,
)
from .notification_formatter import format_notification, summarize

__all__ = [
    "Checker",
    "KeysetInfoResolver",
    "ParityExpirationLookup",
    "classify",
    "days_between",
    "format_notification",
    "summarize",
]
