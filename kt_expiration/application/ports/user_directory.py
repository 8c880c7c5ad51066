"""Port for user profile retrieval - driven/secondary port."""

from typing import Protocol

from ...domain.entities import User


class UserDirectory(Protocol):
    """
    Port for retrieving user profiles from a key transparency server.

    This is a driven (secondary) port that defines how the application
    fetches the authorized keys published for a user.
    """

    async def get_user(self, user_id: str) -> User:
        """
        Retrieve the current profile of a user.

        Args:
            user_id: Identifier of the user in the directory.

        Returns:
            The user with its authorized keys handle, if any.

        Raises:
            UserDirectoryError: If retrieval fails.
        """
        ...
