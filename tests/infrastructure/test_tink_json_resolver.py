"""Tests for the Tink JSON keyset resolver."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

import pytest

from kt_expiration.domain.entities import User
from kt_expiration.domain.exceptions import KeysetResolutionError
from kt_expiration.domain.services import Checker
from kt_expiration.domain.value_objects import KeyStatus
from kt_expiration.infrastructure.adapters import TinkJsonKeysetResolver


class TestTinkJsonKeysetResolver:
    """Tests for TinkJsonKeysetResolver."""

    def test_keyset_mapping(self, keyset_json: dict[str, Any]) -> None:
        """Key ids are read from a decoded keyset in order."""
        assert TinkJsonKeysetResolver().key_ids(keyset_json) == [2, 3]

    def test_keyset_string_and_bytes(self, keyset_json: dict[str, Any]) -> None:
        """Serialized keysets are decoded first."""
        resolver = TinkJsonKeysetResolver()
        text = json.dumps(keyset_json)
        assert resolver.key_ids(text) == [2, 3]
        assert resolver.key_ids(text.encode()) == [2, 3]

    def test_keyset_info_document(self) -> None:
        """Keyset info documents are accepted."""
        info = {
            "primaryKeyId": 4294967295,
            "keyInfo": [
                {"typeUrl": "type.googleapis.com/google.crypto.tink.EcdsaPrivateKey", "keyId": 4294967295},
                {"typeUrl": "type.googleapis.com/google.crypto.tink.EcdsaPrivateKey", "keyId": 17},
            ],
        }
        assert TinkJsonKeysetResolver().key_ids(info) == [4294967295, 17]

    def test_empty_keyset(self) -> None:
        """A keyset without keys resolves to no ids."""
        assert TinkJsonKeysetResolver().key_ids({"key": []}) == []

    @pytest.mark.parametrize(
        "handle",
        [
            "{not json",
            42,
            {"primaryKeyId": 1},
            {"key": "abc"},
            {"key": [{"status": "ENABLED"}]},
            {"key": [{"keyId": "7"}]},
            {"key": [{"keyId": True}]},
            {"key": [{"keyId": -1}]},
            {"key": [{"keyId": 2**32}]},
            {"key": ["oops"]},
        ],
    )
    def test_malformed_keysets(self, handle: Any) -> None:
        """Malformed keysets raise ValueError."""
        with pytest.raises(ValueError):
            TinkJsonKeysetResolver().key_ids(handle)

    def test_checker_with_json_keyset(self, keyset_json: dict[str, Any], fixed_now: datetime) -> None:
        """The checker reads keysets published as JSON."""
        user = User(user_id="json@example.com", authorized_keys=json.dumps(keyset_json))
        checker = Checker(resolver=TinkJsonKeysetResolver(), clock=lambda: fixed_now)
        statuses = [r.status for r in checker.check_user(user)]
        assert statuses == [KeyStatus.WARNING, KeyStatus.VALID]

    def test_checker_wraps_malformed_keyset(self) -> None:
        """Malformed keysets fail the whole check."""
        user = User(user_id="bad@example.com", authorized_keys="{not json")
        checker = Checker(resolver=TinkJsonKeysetResolver())
        with pytest.raises(KeysetResolutionError, match="not valid JSON"):
            checker.check_user(user)
