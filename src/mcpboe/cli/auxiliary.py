"""
Auxiliary CLI commands: departments, legal ranges and codes.
"""

from datetime import date as _date

import click

from ..server import handlers
from .common import run_handler


@click.command()
@click.option("--search", "search_term", default="", help="Filter departments by text")
@click.option("--limit", type=int, default=100, help="Maximum rows (1-1000, default: 100)")
def departments(search_term: str, limit: int):
    """List government departments, optionally filtered."""
    if search_term:
        run_handler(
            lambda services: handlers.handle_search_departments(
                services.auxiliary, {"search_term": search_term, "limit": limit}
            )
        )
    else:
        run_handler(lambda services: handlers.handle_get_departments(services.auxiliary))


@click.command()
@click.option(
    "--date",
    default=lambda: _date.today().strftime("%Y%m%d"),
    show_default="today",
    help="Reference date (YYYYMMDD)",
)
@click.option("--limit", type=int, default=100, help="Maximum rows (1-1000, default: 100)")
def ranges(date: str, limit: int):
    """List legal ranges (ley, real decreto, orden...)."""
    run_handler(
        lambda services: handlers.handle_get_legal_ranges(
            services.auxiliary, {"date": date, "limit": limit}
        )
    )


@click.command()
@click.argument("codes", nargs=-1, required=True)
def codes(codes):
    """
    Describe one or more auxiliary codes.

    Codes that cannot be fetched are skipped; the output reports how many
    were requested and how many were found.
    """
    if len(codes) == 1:
        run_handler(
            lambda services: handlers.handle_get_code_description(
                services.auxiliary, {"code": codes[0]}
            )
        )
    else:
        run_handler(
            lambda services: handlers.handle_get_code_descriptions(
                services.auxiliary, {"codes": list(codes)}
            )
        )


@click.command(name="aux-search")
@click.argument("query_text")
def aux_search(query_text: str):
    """Full-text search over the auxiliary tables."""
    run_handler(
        lambda services: handlers.handle_search_auxiliary(
            services.auxiliary, {"query": query_text}
        )
    )
