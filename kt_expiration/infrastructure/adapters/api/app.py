"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import FastAPI, HTTPException, Query, status
from fastapi.responses import JSONResponse

from ....application.exceptions import UserDirectoryError
from ....domain.exceptions import InvalidArgumentError, KeysetResolutionError
from .models import CheckResponse, ErrorResponse, HealthResponse, KeyResponse

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable, Coroutine

    from ....application.use_cases import CheckResult

    CheckFunc = Callable[[str, int], Coroutine[None, None, CheckResult]]

logger = logging.getLogger(__name__)


def _result_to_response(result: CheckResult, warning_days: int) -> CheckResponse:
    """Convert a use case result to an API response."""
    return CheckResponse(
        user_id=result.user_id,
        checked_at=datetime.now(UTC),
        warning_days=warning_days,
        keys=[
            KeyResponse(
                key_id=info.key_id,
                status=info.status.value,
                expire_time=info.expire_time,
                days_left=info.days_left,
            )
            for info in result.keys
        ],
        summary=result.summary,
        notification=result.notification,
        requires_attention=result.requires_attention,
    )


class ApiState:
    """Shared state for API endpoints."""

    def __init__(self, check_func: CheckFunc, default_warning_days: int, version: str) -> None:
        """Initialize API state."""
        self.check_func = check_func
        self.default_warning_days = default_warning_days
        self.version = version
        self.last_check: CheckResponse | None = None


def create_app(
    check_func: CheckFunc,
    *,
    default_warning_days: int = 30,
    version: str = "1.0.0",
) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        check_func: Async function checking a user's keys with a warning threshold in days.
        default_warning_days: Threshold used when a request does not specify one.
        version: Application version string.

    Returns:
        Configured FastAPI application.
    """
    state = ApiState(check_func, default_warning_days, version)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        logger.info("API server starting...")
        yield
        logger.info("API server shutting down...")

    app = FastAPI(
        title="Key Transparency Expiration API",
        description="Check whether a user's authorized keys are expired or about to expire.",
        version=version,
        lifespan=lifespan,
        responses={
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=state.version,
            timestamp=datetime.now(UTC),
        )

    @app.get(
        "/api/v1/users/{user_id}/expiration",
        response_model=CheckResponse,
        tags=["Expiration"],
        summary="Check a user's keys",
        responses={
            400: {"model": ErrorResponse, "description": "Invalid argument"},
            422: {"model": ErrorResponse, "description": "Keyset could not be read"},
            502: {"model": ErrorResponse, "description": "Key transparency server failure"},
        },
    )
    async def check_user(
        user_id: str,
        warning_days: int | None = Query(default=None, ge=0, description="Warning threshold in days"),
    ) -> CheckResponse:
        days = state.default_warning_days if warning_days is None else warning_days
        try:
            result = await state.check_func(user_id, days)
        except InvalidArgumentError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except KeysetResolutionError as e:
            logger.warning("API: Keyset of %s could not be read: %s", user_id, e)
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"key expiration check failed: {e}",
            ) from e
        except UserDirectoryError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"GetUser failed: {e}",
            ) from e

        response = _result_to_response(result, days)
        state.last_check = response
        return response

    @app.get(
        "/api/v1/report",
        response_model=CheckResponse,
        tags=["Expiration"],
        summary="Get the latest check",
        responses={
            404: {"model": ErrorResponse, "description": "No check performed yet"},
        },
    )
    async def get_report() -> CheckResponse:
        if state.last_check is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="No check performed yet",
            )
        return state.last_check

    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc: Exception) -> JSONResponse:  # noqa: ARG001
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception in API")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "detail": str(exc)},
        )

    return app
