"""Tests for KeyStatus value object."""

from __future__ import annotations

from kt_expiration.domain.value_objects import KeyStatus


class TestKeyStatus:
    """Tests for KeyStatus enum."""

    def test_expired_requires_attention(self) -> None:
        """EXPIRED status should require attention."""
        assert KeyStatus.EXPIRED.requires_attention is True

    def test_warning_requires_attention(self) -> None:
        """WARNING status should require attention."""
        assert KeyStatus.WARNING.requires_attention is True

    def test_valid_does_not_require_attention(self) -> None:
        """VALID status should not require attention."""
        assert KeyStatus.VALID.requires_attention is False

    def test_status_string_representation(self) -> None:
        """Status should have lowercase string representation."""
        assert str(KeyStatus.VALID) == "valid"
        assert str(KeyStatus.WARNING) == "warning"
        assert str(KeyStatus.EXPIRED) == "expired"

    def test_exactly_three_statuses(self) -> None:
        """Statuses are valid, warning and expired."""
        assert {s.value for s in KeyStatus} == {"valid", "warning", "expired"}
