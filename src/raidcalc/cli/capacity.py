import json

import click

from raidcalc.capacity.errors import CapacityError
from raidcalc.cli.utils import (
    MutuallyExclusiveOption,
    find_layout_file,
    load_layout,
    parse_drives,
    resolve_drives,
)


def drive_options(func):
    func = click.option(
        "--size",
        type=float,
        cls=MutuallyExclusiveOption,
        mutually_exclusive=["drives"],
        help="Size of every drive in TB when using --count.",
    )(func)
    func = click.option(
        "--count",
        type=click.IntRange(min=1),
        cls=MutuallyExclusiveOption,
        mutually_exclusive=["drives"],
        help="Number of identical drives.",
    )(func)
    func = click.option(
        "--drives",
        cls=MutuallyExclusiveOption,
        mutually_exclusive=["count", "size"],
        help="Comma separated drive sizes in TB, e.g. 4,4,8.",
    )(func)
    return func


@click.command(name="calculate")
@click.argument("scheme", required=False)
@drive_options
@click.option("--vdevs", type=click.IntRange(min=1), help="Number of vdevs (ZFS mirror/RAIDZ only).")
@click.option("--drives-per-vdev", type=click.IntRange(min=1), help="Drives in each vdev.")
@click.option("--config", "config_file", type=click.Path(exists=True, dir_okay=False),
              help="Path to a YAML drive layout.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def calculate(scheme, drives, count, size, vdevs, drives_per_vdev, config_file, as_json):
    """Calculate usable capacity for a storage scheme."""
    from raidcalc.capacity.calculators import calculate as run_calculation
    from raidcalc.capacity.formatting import render_report
    from raidcalc.capacity.models import GroupTopology
    from raidcalc.capacity.registry import lookup

    layout = {}
    if config_file is None and scheme is None:
        config_file = find_layout_file()
        if config_file is None:
            raise click.UsageError("Missing SCHEME and no layout file found.")
    if config_file is not None:
        layout = load_layout(config_file)

    scheme = scheme or layout.get("scheme")
    if not scheme:
        raise click.UsageError("No scheme given on the command line or in the layout file.")

    vdevs = vdevs or layout.get("vdevs")
    drives_per_vdev = drives_per_vdev or layout.get("drives_per_vdev")
    if (vdevs is None) != (drives_per_vdev is None):
        raise click.UsageError("--vdevs and --drives-per-vdev must be used together.")

    topology = None
    if vdevs is not None:
        try:
            topology = GroupTopology(groups=vdevs, per_group=drives_per_vdev)
        except ValueError as e:
            raise click.UsageError(f"Invalid vdev layout: {e}")
        if drives is None and count is None and not layout.get("drives"):
            count = topology.total_drives

    if drives is not None:
        drive_list = parse_drives(drives)
    elif count is None and layout.get("drives"):
        drive_list = layout["drives"]
    else:
        drive_list = None
    drive_list = resolve_drives(drive_list, count, size)

    try:
        descriptor = lookup(scheme)
        result = run_calculation(scheme, drive_list, topology)
    except CapacityError as e:
        raise click.ClickException(e.message)

    if as_json:
        click.echo(json.dumps({
            "scheme": descriptor.model_dump(mode="json"),
            "drives": drive_list,
            "result": result.model_dump(),
        }, indent=4))
    else:
        click.echo(render_report(descriptor, drive_list, result, topology))


@click.command(name="schemes")
@click.option("--count", type=click.IntRange(min=0),
              help="Show whether each scheme can be built from this many drives.")
@click.option("--json", "as_json", is_flag=True, help="Print full scheme metadata as JSON.")
def schemes(count, as_json):
    """List the supported storage schemes."""
    from raidcalc.capacity.registry import check_configuration, list_schemes

    descriptors = list_schemes()
    if as_json:
        click.echo(json.dumps([d.model_dump(mode="json") for d in descriptors], indent=4))
        return

    for d in descriptors:
        line = f"{d.scheme_id:<11} {d.name:<24} min {d.min_drives} drives - {d.description}"
        if count is not None:
            reason = check_configuration(d.scheme_id, count)
            line += f" [{reason}]" if reason else " [ok]"
        click.echo(line)


@click.command(name="compare")
@drive_options
def compare(drives, count, size):
    """Compare every scheme the given drives can be used with."""
    from raidcalc.capacity.formatting import format_capacity, format_percentage
    from raidcalc.capacity.strategies import generate_strategies

    drive_list = resolve_drives(parse_drives(drives) if drives is not None else None, count, size)

    try:
        strategies = generate_strategies(drive_list)
    except CapacityError as e:
        raise click.ClickException(e.message)

    if not strategies:
        click.echo("No scheme can be built from these drives.")
        return

    for s in strategies:
        usable = format_capacity(s.usable_capacity, show_both=False)
        click.echo(f"{s.name:<24} {usable:>12} {format_percentage(s.efficiency):>7}  {s.redundancy}")
