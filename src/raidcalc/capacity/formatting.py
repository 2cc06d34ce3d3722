from collections import Counter
from typing import List, Optional, Sequence

from raidcalc.capacity.models import CapacityResult, GroupTopology, SchemeDescriptor
from raidcalc.capacity.units import to_decimal_units


def format_capacity(tib: float, show_both: bool = True) -> str:
    if show_both:
        return f"{tib:.2f} TiB ({to_decimal_units(tib):.2f} TB)"
    return f"{tib:.2f} TiB"


def format_percentage(value: float) -> str:
    return f"{value * 100:.1f}%"


def format_drive_size(tb: float) -> str:
    return f"{tb:g}TB"


def format_drive_list(drives: Sequence[float]) -> str:
    """
    Summarises drives as e.g. "3x 4TB, 1x 8TB". Whole sizes come first,
    smallest first, then fractional sizes in the order they were given.
    """
    counts = Counter(float(d) for d in drives)
    whole = sorted(size for size in counts if size.is_integer())
    fractional = [size for size in counts if not size.is_integer()]
    return ", ".join(f"{counts[size]}x {format_drive_size(size)}" for size in whole + fractional)


def describe_fault_tolerance(descriptor: SchemeDescriptor) -> str:
    failures = descriptor.fault_tolerance
    if failures > 0:
        plural = "s" if failures > 1 else ""
        return f"Can survive {failures} drive failure{plural} without data loss"
    return "No redundancy - any drive failure results in data loss"


def describe_performance(descriptor: SchemeDescriptor) -> str:
    return f"Read: {descriptor.read_performance} | Write: {descriptor.write_performance}"


def render_report(descriptor: SchemeDescriptor, drives: Sequence[float],
                  result: CapacityResult, topology: Optional[GroupTopology] = None) -> str:
    """Plain text summary of a calculation, one fact per line."""
    plural = "s" if len(drives) > 1 else ""
    lines: List[str] = [
        f"{descriptor.name} - {descriptor.description}",
        f"Usable Capacity:    {format_capacity(result.usable_capacity)}",
        f"Raw Capacity:       {format_capacity(result.raw_capacity)}",
        f"Storage Efficiency: {format_percentage(result.efficiency)}",
        f"Redundancy:         {format_capacity(result.wasted_space)} used for redundancy",
        f"Fault Tolerance:    {describe_fault_tolerance(descriptor)}",
        f"Performance:        {describe_performance(descriptor)}",
        f"Drives:             {len(drives)} drive{plural}: {format_drive_list(drives)}",
    ]
    if topology is not None:
        lines.append(f"Layout:             {topology.groups} vdevs × {topology.per_group} drives each")
    return "\n".join(lines)
