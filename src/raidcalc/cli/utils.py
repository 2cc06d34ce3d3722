import os

import click
import yaml

from raidcalc.config.settings import config


def _flag(name):
    return "--" + name.replace("_", "-")


class MutuallyExclusiveOption(click.Option):
    """
    Option that can't be combined with the drive options listed in
    `mutually_exclusive` (given by parameter name, e.g. "count").
    """

    def __init__(self, *args, **kwargs):
        self.mutually_exclusive = kwargs.pop("mutually_exclusive", [])
        if self.mutually_exclusive:
            others = "/".join(_flag(name) for name in self.mutually_exclusive)
            kwargs["help"] = f"{kwargs.get('help', '')} Cannot be used with {others}.".strip()
        super().__init__(*args, **kwargs)

    def handle_parse_result(self, ctx, opts, args):
        if self.name in opts:
            clashes = [name for name in self.mutually_exclusive if name in opts]
            if clashes:
                raise click.UsageError(
                    f"{_flag(self.name)} is mutually exclusive with "
                    f"{', '.join(_flag(name) for name in clashes)}.",
                    ctx=ctx,
                )

        return super().handle_parse_result(ctx, opts, args)


LAYOUT_SEARCH_PATHS = [
    "raidcalc.yaml",
    os.path.expanduser("~/.config/raidcalc/raidcalc.yaml"),
    "/etc/raidcalc/raidcalc.yaml",
]


def find_layout_file():
    for path in LAYOUT_SEARCH_PATHS:
        if os.path.exists(path):
            return path
    return None


def load_layout(path):
    """Reads a YAML drive layout (scheme, drives, vdevs, drives_per_vdev)."""
    with open(path, "r") as f:
        layout = yaml.safe_load(f) or {}

    if not isinstance(layout, dict):
        raise click.FileError(path, hint="Layout file must contain a mapping.")

    drives = layout.get("drives")
    if drives is not None and not isinstance(drives, list):
        raise click.FileError(path, hint="`drives` must be a list of sizes in TB.")

    return layout


def parse_drives(value):
    """Parses "4,4,8" into [4.0, 4.0, 8.0]."""
    try:
        return [float(item) for item in value.split(",") if item.strip()]
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a comma separated list of sizes.", param_hint="--drives")


def resolve_drives(drives, count, size):
    """
    Builds the drive list from either an explicit list or a count of
    identical drives.
    """
    if drives is not None:
        result = list(drives)
    elif count is not None:
        result = [size if size is not None else config.default_drive_size] * count
    else:
        raise click.UsageError("Either --drives or --count must be provided.")

    if len(result) > config.max_drives:
        raise click.UsageError(f"At most {config.max_drives} drives are supported, got {len(result)}.")

    return result
