"""
Main CLI entry point for MCPBoe.

This module provides the primary command-line interface using Click.
Each subcommand runs one boundary handler and prints its JSON envelope.
"""

import click

from .. import __version__
from .auxiliary import aux_search, codes, departments, ranges
from .legislation import law, search, structure
from .summary import recent, summary


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mcpboe")
@click.pass_context
def main(ctx):
    """
    MCPBoe - client for the Spanish BOE open-data API.

    Searches consolidated legislation, fetches BOE/BORME daily summaries and
    queries the auxiliary lookup tables. Configure with BOE_API_* environment
    variables or a .env file.
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register subcommands
main.add_command(search)
main.add_command(law)
main.add_command(structure)
main.add_command(summary)
main.add_command(recent)
main.add_command(departments)
main.add_command(ranges)
main.add_command(codes)
main.add_command(aux_search)


if __name__ == "__main__":
    main()
