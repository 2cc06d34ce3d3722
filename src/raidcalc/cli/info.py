import click
import json


@click.command(name="version")
@click.option("--write", is_flag=True, help="Write the version info file as well.")
def version(write):
    """Show build version information."""
    from raidcalc.config.settings import config
    from raidcalc.version import get_version_info, write_version_file

    if write:
        info = write_version_file(config.version_file)
        click.echo(f"{config.version_file} updated.")
    else:
        info = get_version_info()
    click.echo(json.dumps(info, indent=4))
