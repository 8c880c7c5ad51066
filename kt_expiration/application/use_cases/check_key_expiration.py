"""Use case for checking a user's authorized keys for expiration."""

import logging
from dataclasses import dataclass

from ...domain.entities import KeyInfo
from ...domain.services import Checker, format_notification, summarize
from ..ports import UserDirectory

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of the key expiration check use case."""

    user_id: str
    keys: list[KeyInfo]
    notification: str
    summary: str

    @property
    def requires_attention(self) -> bool:
        """Check if any key is expired or about to expire."""
        return any(info.status.requires_attention for info in self.keys)


class CheckKeyExpiration:
    """
    Use case for checking the authorized keys of a directory user.

    Fetches the user's profile, checks every authorized key and renders
    the notification. Printing or sending it is left to the caller.
    """

    def __init__(self, directory: UserDirectory, checker: Checker) -> None:
        """
        Initialize the use case.

        Args:
            directory: Adapter for retrieving user profiles.
            checker: Domain service classifying key expirations.
        """
        self._directory = directory
        self._checker = checker

    async def execute(self, user_id: str) -> CheckResult:
        """
        Execute the key expiration check for one user.

        Raises:
            UserDirectoryError: If the profile cannot be retrieved.
            DomainError: If the keys cannot be checked.
        """
        logger.info("Checking key expiration for %s...", user_id)

        user = await self._directory.get_user(user_id)
        keys = self._checker.check_user(user)
        summary = summarize(keys)
        logger.info("Check complete for %s: %s", user_id, summary)

        return CheckResult(
            user_id=user_id,
            keys=keys,
            notification=format_notification(keys),
            summary=summary,
        )
