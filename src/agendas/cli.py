#!/usr/bin/env python3
"""
Main CLI entry point for the Agenda API server.
"""

import asyncio
import os
from uuid import UUID

import click
import uvicorn

from agendas import __version__
from agendas.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="agendas")
def cli() -> None:
    """Agendas CLI - run the API server and mint development tokens."""
    pass


@cli.command()
@click.option("--host", default="0.0.0.0", help="Host to bind to (default: 0.0.0.0)")
@click.option("--port", default=8090, type=int, help="Port to bind to (default: 8090)")
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option("--workers", default=1, type=int, help="Number of worker processes (default: 1)")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the Agenda API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Agenda API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # Reloaded/forked workers re-import settings from the environment
    if log_level == "debug":
        os.environ["AGENDAS_DEBUG"] = "true"
        os.environ["AGENDAS_LOG_LEVEL"] = "debug"

    uvicorn.run(
        "agendas.api.app:app",
        host=host,
        port=port,
        reload=reload,
        workers=workers if not reload else 1,
        log_level=log_level,
    )


@cli.command("issue-token")
@click.argument("user_id", type=click.UUID)
@click.option("--email", default=None, help="Email claim to include")
def issue_token(user_id: UUID, email: str | None) -> None:
    """Issue a bearer token for USER_ID with the configured auth provider."""
    from agendas.auth.factory import get_auth_adapter

    adapter = get_auth_adapter()
    claims = {"email": email} if email else None
    token = asyncio.run(adapter.issue_token(user_id=user_id, claims=claims))
    click.echo(token)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
