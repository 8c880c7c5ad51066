"""
Key Transparency Expiration Checker

Composition root. Wires together all layers following hexagonal
architecture principles.
"""

from __future__ import annotations

import logging
import sys

from . import __version__
from .application.use_cases import CheckKeyExpiration, CheckResult
from .domain.services import Checker
from .domain.value_objects import ExpirationConfig
from .infrastructure.adapters import KeyTransparencyUserDirectory, TinkJsonKeysetResolver
from .infrastructure.config import Settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging; stdout is reserved for notifications."""
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_user_directory(self) -> KeyTransparencyUserDirectory:
        """Create the user directory adapter."""
        return KeyTransparencyUserDirectory(self._settings.client_config)

    def create_checker(self, config: ExpirationConfig | None = None) -> Checker:
        """Create the expiration checker, reading keysets published as Tink JSON."""
        return Checker(
            config or self._settings.expiration_config,
            resolver=TinkJsonKeysetResolver(),
        )

    def create_check_use_case(self, config: ExpirationConfig | None = None) -> CheckKeyExpiration:
        """Create the main use case with all dependencies."""
        return CheckKeyExpiration(
            directory=self.create_user_directory(),
            checker=self.create_checker(config),
        )


class Application:
    """
    Main application orchestrator.

    Runs single checks for the CLI or serves them over HTTP.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    async def check(self, user_id: str, warning_days: int | None = None) -> CheckResult:
        """Check the keys of one user, optionally with a custom warning threshold."""
        config = None if warning_days is None else ExpirationConfig.from_days(warning_days)
        use_case = self._container.create_check_use_case(config)
        return await use_case.execute(user_id)

    def run_api(self) -> None:
        """Run in API server mode."""
        import uvicorn

        from .infrastructure.adapters.api import create_app

        logger.info(
            "Starting API server on %s:%d",
            self._settings.api_host,
            self._settings.api_port,
        )

        app = create_app(
            check_func=self.check,
            default_warning_days=self._settings.warning_days,
            version=__version__,
        )

        uvicorn.run(
            app,
            host=self._settings.api_host,
            port=self._settings.api_port,
            log_level=self._settings.effective_log_level.lower(),
        )
