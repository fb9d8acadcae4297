#!/usr/bin/env python3
"""
Main CLI entry point for the Vehicle Shop server.
"""

import os
import sys

import click
import uvicorn

from vehicleshop import __version__
from vehicleshop.config import settings
from vehicleshop.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="vehicleshop")
def cli() -> None:
    """Vehicle Shop CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Vehicle Shop API server."""

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Vehicle Shop API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The app reads these when it is imported by the server process
    if log_level == "debug":
        os.environ["VEHICLESHOP_DEBUG"] = "true"
        os.environ["VEHICLESHOP_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("VEHICLESHOP_DEBUG", "false")
        os.environ.setdefault("VEHICLESHOP_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            "vehicleshop.api.app:app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from vehicleshop.graphql.schema import schema as graphql_schema

    click.echo(graphql_schema.as_str())


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
