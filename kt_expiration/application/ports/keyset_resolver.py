"""Port for keyset metadata resolution - driven/secondary port."""

from typing import Any, Protocol


class KeysetResolver(Protocol):
    """
    Port for reading key metadata out of an authorized keys handle.

    The handle is opaque to the application; only the resolver knows
    how it is constructed or stored.
    """

    def key_ids(self, handle: Any) -> list[int]:
        """
        Resolve the ids of the keys held by a keyset handle.

        Args:
            handle: The user's authorized keys handle.

        Returns:
            Unsigned 32-bit key ids in keyset order.

        Raises:
            ValueError: If the keyset is malformed.
        """
        ...
