"""HTTP client for the key transparency server's JSON gateway."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KeyTransparencyClientConfig:
    """Configuration for the key transparency client."""

    base_url: str
    directory_id: str = "default"
    auth_token: str = ""
    timeout: float = 30.0


class KeyTransparencyClient:
    """
    Async client for the key transparency REST gateway.

    Only reads user profiles; proof verification is left to the server
    side tooling.
    """

    def __init__(
        self,
        config: KeyTransparencyClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Server location, directory and credentials.
            transport: Optional httpx transport, used to stub the server in tests.
        """
        self._config = config
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._config.auth_token:
            headers["Authorization"] = f"Bearer {self._config.auth_token}"
        return headers

    def user_path(self, user_id: str) -> str:
        """Gateway path of a user's profile in the configured directory."""
        directory = quote(self._config.directory_id, safe="")
        return f"/v1/directories/{directory}/users/{quote(user_id, safe='')}"

    async def get_user(self, user_id: str) -> dict[str, Any]:
        """
        Retrieve the raw profile of a user.

        Returns:
            The decoded JSON profile.

        Raises:
            httpx.HTTPError: If the request fails or returns an error status.
            ValueError: If the response body is not a JSON object.
        """
        logger.info("Fetching profile of %s from %s...", user_id, self._config.base_url)

        async with httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
            transport=self._transport,
        ) as client:
            response = await client.get(self.user_path(user_id), headers=self._headers())
            response.raise_for_status()
            data = response.json()

        if not isinstance(data, dict):
            msg = f"unexpected profile response of type {type(data).__name__}"
            raise ValueError(msg)
        return data
