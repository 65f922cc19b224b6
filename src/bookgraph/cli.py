#!/usr/bin/env python3
"""
Main CLI entry point for the bookgraph server.
"""

import json
import os
import sys

import click
import uvicorn

from bookgraph import __version__
from bookgraph.config import settings
from bookgraph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookgraph")
def cli() -> None:
    """bookgraph CLI - run the server and inspect the resolver stack."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, help="Port to bind to")
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
    """Start the bookgraph API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting bookgraph API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # bookgraph.api.app configures logging from settings when first imported
    settings.debug = log_level == "debug"
    settings.log_level = log_level.upper()

    try:
        if reload:
            # The reload worker is a fresh process that rebuilds settings from the environment
            os.environ["BOOKGRAPH_DEBUG"] = "true" if settings.debug else "false"
            os.environ["BOOKGRAPH_LOG_LEVEL"] = log_level

            uvicorn.run(
                "bookgraph.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from bookgraph.api.app import app

            uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema (SDL)."""
    from bookgraph.graphql.schema import schema as graphql_schema

    click.echo(graphql_schema.as_str())


@cli.command()
@click.option(
    "--format",
    "output_format",
    default="table",
    type=click.Choice(["table", "json"]),
    help="Output format",
)
def layers(output_format: str) -> None:
    """Show which layers wrap each operation, outermost first."""
    from bookgraph.resolvers import OPERATIONS, default_layers, describe_stack

    chains = describe_stack(OPERATIONS, default_layers(settings.redaction_marker))

    if output_format == "json":
        payload = {
            operation: [{"layer": name, "delegation": d.value} for name, d in chain]
            for operation, chain in chains.items()
        }
        click.echo(json.dumps(payload, indent=2))
        return

    for operation, chain in chains.items():
        wrapped = " -> ".join(f"{name} ({d.value})" for name, d in chain)
        click.echo(f"{operation:<14} {wrapped + ' -> ' if wrapped else ''}data-access")


@cli.command()
@click.argument("username")
@click.password_option(confirmation_prompt=False)
def token(username: str, password: str) -> None:
    """Issue a token for USERNAME using the bundled store."""
    from bookgraph.auth import Credentials, TokenService
    from bookgraph.resolvers import build_resolvers, default_layers, resolve
    from bookgraph.store import create_seeded_store

    resolvers = build_resolvers(
        create_seeded_store(),
        TokenService.from_settings(settings),
        default_layers(settings.redaction_marker),
    )
    result = resolve(
        resolvers,
        "authenticate",
        {"credentials": Credentials(username=username, password=password)},
    )

    if result.token is None:
        click.echo("✗ Invalid username or password", err=True)
        sys.exit(1)

    click.echo(result.token)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
