"""
Legislation CLI commands: search, law and structure.
"""

import click

from ..server import handlers
from .common import run_handler


@click.command()
@click.argument("query_text")
@click.option("--limit", type=int, default=10, help="Results per page (1-100, default: 10)")
@click.option("--offset", type=int, default=0, help="Results to skip (default: 0)")
def search(query_text: str, limit: int, offset: int):
    """
    Search consolidated legislation.

    Examples:
        mcpboe search "protección de datos"
        mcpboe search "ley de costas" --limit 20 --offset 20
    """
    run_handler(
        lambda services: handlers.handle_search_legislation(
            services.legislation,
            {"query": query_text, "limit": limit, "offset": offset},
        )
    )


@click.command()
@click.argument("law_id")
@click.option("--metadata/--no-metadata", default=True, help="Include derived metadata")
@click.option("--analysis", is_flag=True, help="Include text and structure analysis")
@click.option("--full-text", is_flag=True, help="Ask the upstream API for the full text")
def law(law_id: str, metadata: bool, analysis: bool, full_text: bool):
    """
    Fetch one consolidated law by identifier.

    Example:
        mcpboe law BOE-A-2018-16673 --analysis --full-text
    """
    run_handler(
        lambda services: handlers.handle_get_law(
            services.legislation,
            {
                "law_id": law_id,
                "include_metadata": metadata,
                "include_analysis": analysis,
                "include_full_text": full_text,
            },
        )
    )


@click.command()
@click.argument("law_id")
def structure(law_id: str):
    """Fetch the title/chapter/article structure of a law."""
    run_handler(
        lambda services: handlers.handle_get_law_structure(
            services.legislation, {"law_id": law_id}
        )
    )
