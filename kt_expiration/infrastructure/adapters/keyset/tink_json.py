"""Keyset resolver for Tink keysets in their JSON serialization."""

from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

MAX_KEY_ID = 2**32 - 1


class TinkJsonKeysetResolver:
    """
    Resolve key ids from a Tink JSON keyset or keyset info document.

    Accepts either a full keyset (``{"primaryKeyId": ..., "key": [...]}``)
    or its public metadata (``{"primaryKeyId": ..., "keyInfo": [...]}``),
    as a JSON string, bytes or an already decoded mapping.

    Implements the KeysetResolver port.
    """

    def key_ids(self, handle: Any) -> list[int]:
        """
        Return the key ids of the keyset in document order.

        Raises:
            ValueError: If the document is not a well-formed keyset.
        """
        document = self._decode(handle)

        entries = document.get("key")
        if entries is None:
            entries = document.get("keyInfo")
        if not isinstance(entries, list):
            msg = "keyset has no 'key' or 'keyInfo' list"
            raise ValueError(msg)

        return [self._key_id(entry) for entry in entries]

    @staticmethod
    def _decode(handle: Any) -> dict[str, Any]:
        """Decode the handle into a keyset mapping."""
        if isinstance(handle, bytes | bytearray):
            handle = handle.decode("utf-8")
        if isinstance(handle, str):
            try:
                handle = json.loads(handle)
            except json.JSONDecodeError as e:
                msg = f"keyset is not valid JSON: {e}"
                raise ValueError(msg) from e
        if not isinstance(handle, dict):
            msg = f"unsupported keyset handle type: {type(handle).__name__}"
            raise ValueError(msg)
        return handle

    @staticmethod
    def _key_id(entry: Any) -> int:
        """Extract and validate the id of one keyset entry."""
        if not isinstance(entry, dict):
            msg = f"keyset entry must be an object, got {type(entry).__name__}"
            raise ValueError(msg)

        key_id = entry.get("keyId")
        # bool is an int subclass
        if not isinstance(key_id, int) or isinstance(key_id, bool):
            msg = f"keyset entry has invalid keyId: {key_id!r}"
            raise ValueError(msg)
        if not 0 <= key_id <= MAX_KEY_ID:
            msg = f"keyId {key_id} is not an unsigned 32-bit integer"
            raise ValueError(msg)

        if entry.get("status") not in (None, "ENABLED"):
            logger.debug("Key %d has status %s", key_id, entry["status"])

        return key_id
