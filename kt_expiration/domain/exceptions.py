"""Domain exceptions."""

from typing import ClassVar


class DomainError(Exception):
    """Base exception for domain errors."""

    kind: ClassVar[str] = "domain_error"


class InvalidArgumentError(DomainError):
    """Raised when an operation receives an absent or invalid argument."""

    kind: ClassVar[str] = "invalid_argument"


class KeysetResolutionError(DomainError):
    """Raised when keyset metadata cannot be resolved from a keyset handle."""

    kind: ClassVar[str] = "resolution_failure"
