"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class UserDirectoryError(ApplicationError):
    """Raised when a user profile cannot be retrieved from the directory."""


class DirectoryConnectionError(UserDirectoryError):
    """Raised when the key transparency server cannot be reached."""
