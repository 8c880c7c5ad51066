"""API response models."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    timestamp: datetime


class KeyResponse(BaseModel):
    """Expiration status of one authorized key."""

    key_id: int = Field(ge=0, le=2**32 - 1, description="Key id within the user's keyset")
    status: Literal["valid", "warning", "expired"]
    expire_time: datetime
    days_left: int = Field(description="Whole days until expiration, negative if expired")


class CheckResponse(BaseModel):
    """Result of a key expiration check for one user."""

    user_id: str
    checked_at: datetime
    warning_days: int = Field(description="Warning threshold used for the check")
    keys: list[KeyResponse]
    summary: str = Field(description="Human-readable summary")
    notification: str = Field(description="Notification text as printed by the CLI")
    requires_attention: bool


class ErrorResponse(BaseModel):
    """Error response."""

    error: str
    detail: str | None = None
