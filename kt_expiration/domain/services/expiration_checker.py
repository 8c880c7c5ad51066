"""Domain service for checking authorized key expirations."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from ..entities import KeyInfo, User
from ..entities.key_info import MAX_KEY_ID
from ..exceptions import InvalidArgumentError, KeysetResolutionError
from ..value_objects import ExpirationConfig, KeyStatus

if TYPE_CHECKING:
    from ...application.ports import ExpirationLookup, KeysetResolver

logger = logging.getLogger(__name__)

_HOUR = timedelta(hours=1)


def _checked_key_id(key_id: Any) -> int:
    """Reject ids that are not unsigned 32-bit integers."""
    # bool is an int subclass
    if not isinstance(key_id, int) or isinstance(key_id, bool):
        msg = f"invalid key id: {key_id!r}"
        raise ValueError(msg)
    if not 0 <= key_id <= MAX_KEY_ID:
        msg = f"key id {key_id} is not an unsigned 32-bit integer"
        raise ValueError(msg)
    return key_id


def classify(expire_time: datetime, now: datetime, warning_threshold: timedelta) -> KeyStatus:
    """Determine the status of a key expiring at ``expire_time``."""
    if expire_time <= now:
        return KeyStatus.EXPIRED
    if expire_time - now < warning_threshold:
        return KeyStatus.WARNING
    return KeyStatus.VALID


def days_between(now: datetime, expire_time: datetime) -> int:
    """Whole days until ``expire_time``, truncated toward zero."""
    hours = (expire_time - now) / _HOUR
    return int(hours / 24)


class KeysetInfoResolver:
    """
    Resolve key ids from a keyset handle exposing ``keyset_info()``.

    Works with Tink keyset handles, whose keyset info lists one entry
    per key with a ``key_id`` attribute.
    """

    def key_ids(self, handle: Any) -> list[int]:
        """Return the key ids of ``handle`` in keyset order."""
        info = handle.keyset_info()
        return [key.key_id for key in info.key_info]


class ParityExpirationLookup:
    """
    Stand-in expiration lookup until keys carry real expiration metadata.

    Keys with even ids expire in 10 days, odd ids in 40 days.
    """

    def expiration_for(self, key_id: int, now: datetime) -> datetime:
        """Return the expiration instant of ``key_id`` relative to ``now``."""
        days = 10 if key_id % 2 == 0 else 40
        return now + timedelta(days=days)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class Checker:
    """Domain service that checks the expiration of a user's authorized keys."""

    def __init__(
        self,
        config: ExpirationConfig | None = None,
        *,
        resolver: KeysetResolver | None = None,
        lookup: ExpirationLookup | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Initialize the checker.

        Args:
            config: Expiration configuration. Defaults to a 30 day warning threshold.
            resolver: Resolves key ids from a user's authorized keys handle.
            lookup: Resolves the expiration instant of a key.
            clock: Returns the current time.
        """
        self._config = config if config is not None else ExpirationConfig.default()
        self._resolver = resolver or KeysetInfoResolver()
        self._lookup = lookup or ParityExpirationLookup()
        self._clock = clock or _utc_now

    @property
    def config(self) -> ExpirationConfig:
        """The configuration this checker evaluates keys against."""
        return self._config

    def check_user(self, user: User | None) -> list[KeyInfo]:
        """
        Check the expiration status of all authorized keys of a user.

        Args:
            user: The user whose authorized keys are checked.

        Returns:
            One KeyInfo per authorized key, in keyset order.

        Raises:
            InvalidArgumentError: If ``user`` is None.
            KeysetResolutionError: If the keyset metadata cannot be resolved.
        """
        if user is None:
            msg = "user cannot be None"
            raise InvalidArgumentError(msg)

        if user.authorized_keys is None:
            return []

        try:
            key_ids = [_checked_key_id(k) for k in self._resolver.key_ids(user.authorized_keys)]
        except Exception as e:
            msg = f"error reading key info for {user.user_id}: {e}"
            raise KeysetResolutionError(msg) from e

        # One instant for the whole report
        now = self._clock()
        threshold = self._config.warning_threshold

        results: list[KeyInfo] = []
        for key_id in key_ids:
            expire_time = self._lookup.expiration_for(key_id, now)
            results.append(
                KeyInfo(
                    key_id=key_id,
                    status=classify(expire_time, now, threshold),
                    expire_time=expire_time,
                    days_left=days_between(now, expire_time),
                )
            )

        logger.debug("Checked %d keys for %s", len(results), user.user_id)
        return results
