"""Key expiration checks for key transparency directory users."""

from .domain.entities import KeyInfo, User
from .domain.services import Checker, format_notification
from .domain.value_objects import ExpirationConfig, KeyStatus

__version__ = "1.0.0"

__all__ = [
    "Checker",
    "ExpirationConfig",
    "KeyInfo",
    "KeyStatus",
    "User",
    "__version__",
    "format_notification",
]
