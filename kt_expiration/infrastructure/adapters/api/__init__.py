"""API adapter for HTTP endpoints."""

from .app import create_app
from .models import CheckResponse, HealthResponse, KeyResponse

__all__ = [
    "CheckResponse",
    "HealthResponse",
    "KeyResponse",
    "create_app",
]
