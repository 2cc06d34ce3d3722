import logging

import click

from raidcalc.cli.capacity import calculate, compare, schemes
from raidcalc.cli.info import version
from raidcalc.config.settings import config


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx, verbose):
    """RAID capacity calculator CLI"""
    ctx.ensure_object(dict)
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.INFO)
    logging.basicConfig(level=level)

main.add_command(calculate)
main.add_command(schemes)
main.add_command(compare)
main.add_command(version)


@main.command()
@click.option('--host', default='127.0.0.1', help='The host to bind to.')
@click.option('--port', default=8000, help='The port to bind to.')
def server(host, port):
    """Run the FastAPI server."""
    import uvicorn

    from raidcalc.api.server import app
    uvicorn.run(app, host=host, port=port)

if __name__ == "__main__":
    main()
