"""User directory implementation backed by a key transparency server."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any

import httpx

from ....application.exceptions import DirectoryConnectionError, UserDirectoryError
from ....domain.entities import User
from .client import KeyTransparencyClient, KeyTransparencyClientConfig

logger = logging.getLogger(__name__)


class KeyTransparencyUserDirectory:
    """
    User directory using the key transparency REST gateway.

    Implements the UserDirectory port.
    """

    def __init__(
        self,
        config: KeyTransparencyClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the directory with a client for ``config``."""
        self._client = KeyTransparencyClient(config, transport=transport)

    async def get_user(self, user_id: str) -> User:
        """
        Retrieve a user's profile and authorized keys.

        Raises:
            DirectoryConnectionError: If the server cannot be reached.
            UserDirectoryError: If retrieval or decoding fails.
        """
        try:
            raw = await self._client.get_user(user_id)
        except (httpx.ConnectError, httpx.ConnectTimeout) as e:
            msg = f"Failed to connect to key transparency server: {e}"
            logger.exception(msg)
            raise DirectoryConnectionError(msg) from e
        except (httpx.HTTPError, ValueError) as e:
            msg = f"Failed to retrieve user {user_id}: {e}"
            logger.exception(msg)
            raise UserDirectoryError(msg) from e

        return self._map_user(raw, user_id)

    def _map_user(self, raw: dict[str, Any], user_id: str) -> User:
        """
        Map a raw gateway profile to the domain entity.

        ``authorized_keys`` is passed through untouched; it is only
        interpreted by the keyset resolver.
        """
        return User(
            user_id=raw.get("user_id") or user_id,
            public_key_data=self._decode_public_key(raw.get("public_key_data"), user_id),
            authorized_keys=raw.get("authorized_keys"),
        )

    @staticmethod
    def _decode_public_key(value: str | None, user_id: str) -> bytes:
        """Decode the base64 profile data."""
        if not value:
            return b""
        try:
            return base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            msg = f"User {user_id} has malformed public_key_data: {e}"
            raise UserDirectoryError(msg) from e
