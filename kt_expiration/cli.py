"""Command line interface."""

from __future__ import annotations

import asyncio
from typing import Optional

import typer

from . import __version__
from .application.exceptions import DirectoryConnectionError, UserDirectoryError
from .domain.exceptions import DomainError
from .infrastructure.config import load_settings
from .main import Application, configure_logging

app = typer.Typer(help="Check authorized keys in a key transparency directory for expiration.")


def _load_application(
    *,
    server: str | None = None,
    directory: str | None = None,
    timeout: float | None = None,
    warning_days: int | None = None,
    verbose: bool = False,
    api_host: str | None = None,
    api_port: int | None = None,
) -> Application:
    try:
        settings = load_settings(
            kt_server_url=server,
            kt_directory_id=directory,
            kt_timeout=timeout,
            warning_days=warning_days,
            verbose=verbose or None,
            api_host=api_host,
            api_port=api_port,
        )
    except ValueError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1) from e

    configure_logging(settings.effective_log_level)
    return Application(settings)


def _fail(message: str) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(code=1)


@app.command("check-expiration")
def check_expiration(
    user_id: str = typer.Argument(..., help="Directory user whose keys are checked"),
    warning_days: Optional[int] = typer.Option(
        None, "--warning-days", min=0, help="Number of days before expiration to show warnings [default: 30]"
    ),
    server: Optional[str] = typer.Option(None, "--server", help="Key transparency server URL"),
    directory: Optional[str] = typer.Option(None, "--directory", help="Directory id"),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0.001, help="Request timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Check if any authorized keys of a user are expired or will expire soon"""
    application = _load_application(
        server=server,
        directory=directory,
        timeout=timeout,
        warning_days=warning_days,
        verbose=verbose,
    )

    try:
        result = asyncio.run(application.check(user_id))
    except DirectoryConnectionError as e:
        raise _fail(f"error connecting: {e}") from e
    except UserDirectoryError as e:
        raise _fail(f"GetUser failed: {e}") from e
    except DomainError as e:
        raise _fail(f"key expiration check failed: {e}") from e

    typer.echo(result.notification)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Address to bind"),
    port: Optional[int] = typer.Option(None, "--port", help="Port to listen on"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Serve expiration checks over HTTP"""
    application = _load_application(api_host=host, api_port=port, verbose=verbose)
    application.run_api()


@app.command("version")
def version():
    """Print the version"""
    typer.echo(__version__)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
