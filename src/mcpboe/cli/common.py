"""
Shared plumbing for the CLI commands.

Every command builds the configuration from the environment, creates one
upstream client, runs a single boundary handler and prints the JSON envelope.
The process exits with status 1 when the envelope reports a failure.
"""

import asyncio
import sys
from typing import Awaitable, Callable

import click
from dotenv import load_dotenv

from ..server import BoeServices, HandlerResult, create_services
from ..utils import BoeApiConfig, setup_logging


def run_handler(call: Callable[[BoeServices], Awaitable[HandlerResult]]) -> None:
    """
    Run one handler against freshly built services and echo its envelope.

    Args:
        call: Coroutine function receiving the services container.
    """
    load_dotenv()
    setup_logging()

    try:
        config = BoeApiConfig()
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    async def _main() -> HandlerResult:
        async with create_services(config) as services:
            return await call(services)

    try:
        result = asyncio.run(_main())
    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        sys.exit(130)

    click.echo(result.body.model_dump_json(indent=2))
    if not result.success:
        sys.exit(1)
