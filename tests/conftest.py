"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from types import SimpleNamespace
from typing import Any

import pytest

from kt_expiration.domain.entities import KeyInfo, User
from kt_expiration.domain.value_objects import ExpirationConfig, KeyStatus

FIXED_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


class FakeKeysetHandle:
    """Stand-in for a Tink keyset handle exposing keyset_info()."""

    def __init__(self, key_ids: list[int]) -> None:
        self._key_ids = key_ids

    def keyset_info(self) -> Any:
        return SimpleNamespace(key_info=[SimpleNamespace(key_id=k) for k in self._key_ids])


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed point in time used as the checker clock."""
    return FIXED_NOW


@pytest.fixture
def default_config() -> ExpirationConfig:
    """Default expiration configuration."""
    return ExpirationConfig.default()


@pytest.fixture
def keyset_json() -> dict[str, Any]:
    """A Tink JSON keyset with one even and one odd key id."""
    return {
        "primaryKeyId": 3,
        "key": [
            {
                "keyData": {
                    "typeUrl": "type.googleapis.com/google.crypto.tink.EcdsaPrivateKey",
                    "value": "EgYIAxACGAI=",
                    "keyMaterialType": "ASYMMETRIC_PRIVATE",
                },
                "status": "ENABLED",
                "keyId": 2,
                "outputPrefixType": "TINK",
            },
            {
                "keyData": {
                    "typeUrl": "type.googleapis.com/google.crypto.tink.EcdsaPrivateKey",
                    "value": "EgYIAxACGAI=",
                    "keyMaterialType": "ASYMMETRIC_PRIVATE",
                },
                "status": "ENABLED",
                "keyId": 3,
                "outputPrefixType": "TINK",
            },
        ],
    }


@pytest.fixture
def user_with_keys() -> User:
    """A user whose authorized keys handle holds key ids 2 and 3."""
    return User(
        user_id="test@example.com",
        public_key_data=b"test-key-data",
        authorized_keys=FakeKeysetHandle([2, 3]),
    )


@pytest.fixture
def user_without_keys() -> User:
    """A user with no authorized keys."""
    return User(user_id="nokeys@example.com", public_key_data=b"test-key-data")


@pytest.fixture
def valid_key() -> KeyInfo:
    """A key far from expiration."""
    return KeyInfo(
        key_id=1,
        status=KeyStatus.VALID,
        expire_time=FIXED_NOW + timedelta(days=100),
        days_left=100,
    )


@pytest.fixture
def warning_key() -> KeyInfo:
    """A key expiring within the warning threshold."""
    return KeyInfo(
        key_id=2,
        status=KeyStatus.WARNING,
        expire_time=FIXED_NOW + timedelta(days=10),
        days_left=10,
    )


@pytest.fixture
def expired_key() -> KeyInfo:
    """A key that has already expired."""
    return KeyInfo(
        key_id=2,
        status=KeyStatus.EXPIRED,
        expire_time=FIXED_NOW - timedelta(days=10),
        days_left=-10,
    )
