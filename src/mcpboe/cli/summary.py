"""
Summary CLI commands: daily gazette summaries and recent search.
"""

import click

from ..server import handlers
from .common import run_handler


@click.command()
@click.argument("date")
@click.option("--max-items", type=int, default=50, help="Maximum items (1-1000, default: 50)")
@click.option("--borme", is_flag=True, help="Use the company registry gazette (BORME)")
def summary(date: str, max_items: int, borme: bool):
    """
    Fetch the BOE (or BORME) summary for a YYYYMMDD date.

    Examples:
        mcpboe summary 20240115
        mcpboe summary 20240115 --borme --max-items 200
    """
    handler = handlers.handle_get_borme_summary if borme else handlers.handle_get_boe_summary
    run_handler(
        lambda services: handler(
            services.summary, {"date": date, "max_items": max_items}
        )
    )


@click.command()
@click.argument("terms", nargs=-1, required=True)
@click.option("--days", type=int, default=7, help="Days to look back (1-30, default: 7)")
def recent(terms, days: int):
    """
    Search recent BOE publications for any of TERMS.

    Example:
        mcpboe recent "inteligencia artificial" subvenciones --days 14
    """
    run_handler(
        lambda services: handlers.handle_search_recent_boe(
            services.summary, {"days_back": days, "search_terms": list(terms)}
        )
    )
