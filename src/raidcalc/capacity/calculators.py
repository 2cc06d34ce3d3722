"""
Capacity calculators, one per scheme family.

Every calculator receives drive sizes already converted to TiB together with
the scheme descriptor and returns the usable capacity in TiB. `calculate`
is the single entry point: it validates the request, converts units and picks
the calculator from FAMILY_CALCULATORS based on the descriptor's family.
"""
import logging
import math
from numbers import Real
from typing import Callable, Dict, List, Optional, Sequence

from raidcalc.capacity.errors import (
    InsufficientDrivesError,
    InvalidDriveSizeError,
    TopologyMismatchError,
)
from raidcalc.capacity.models import (
    CapacityResult,
    GroupTopology,
    SchemeDescriptor,
    SchemeFamily,
)
from raidcalc.capacity.registry import lookup, validate
from raidcalc.capacity.units import to_binary_units

logger = logging.getLogger(__name__)


def calculate_stripe(drives: List[float], descriptor: SchemeDescriptor) -> float:
    return sum(drives)


def calculate_mirror(drives: List[float], descriptor: SchemeDescriptor) -> float:
    # Every member mirrors down to the smallest drive
    return min(drives)


def calculate_parity(drives: List[float], descriptor: SchemeDescriptor) -> float:
    return (len(drives) - descriptor.parity) * min(drives)


def calculate_mirrored_stripe(drives: List[float], descriptor: SchemeDescriptor) -> float:
    return (len(drives) // 2) * min(drives)


def calculate_hybrid(drives: List[float], descriptor: SchemeDescriptor) -> float:
    """
    Synology Hybrid RAID style allocation.

    Drives are walked smallest first. Each distinct size step forms a tier
    spanning every drive at least that large, and the tier keeps
    (available - parity) / available of its height as usable space. Tiers
    spanning `parity` drives or fewer are entirely consumed by redundancy.
    """
    parity_disks = descriptor.parity
    ordered = sorted(drives)
    num_drives = len(ordered)

    if num_drives < parity_disks + 1:
        raise InsufficientDrivesError(
            descriptor.scheme_id, descriptor.name, parity_disks + 1, num_drives
        )

    usable = 0.0
    previous_size = 0.0
    for i, current_size in enumerate(ordered):
        available_drives = num_drives - i
        if available_drives > parity_disks:
            usable += (current_size - previous_size) * (available_drives - parity_disks) / available_drives
        previous_size = current_size

    return usable


def calculate_flexible_array(drives: List[float], descriptor: SchemeDescriptor) -> float:
    """
    Unraid style array: the largest `parity` drives hold parity and every
    remaining drive is addressed on its own, so its full size counts.
    """
    parity_count = descriptor.parity
    ordered = sorted(drives, reverse=True)

    if len(ordered) < parity_count + 1:
        raise InsufficientDrivesError(
            descriptor.scheme_id, descriptor.name, parity_count + 1, len(ordered)
        )

    return sum(ordered[parity_count:])


FAMILY_CALCULATORS: Dict[SchemeFamily, Callable[[List[float], SchemeDescriptor], float]] = {
    SchemeFamily.STRIPE: calculate_stripe,
    SchemeFamily.MIRROR: calculate_mirror,
    SchemeFamily.PARITY: calculate_parity,
    SchemeFamily.MIRRORED_STRIPE: calculate_mirrored_stripe,
    SchemeFamily.HYBRID: calculate_hybrid,
    SchemeFamily.FLEXIBLE_ARRAY: calculate_flexible_array,
}


def calculate_grouped(drives: List[float], descriptor: SchemeDescriptor,
                      topology: GroupTopology) -> float:
    """
    Splits the drives, in the given order, into `topology.groups` vdevs
    and sums the per-vdev capacity.
    """
    calculator = FAMILY_CALCULATORS[descriptor.family]
    usable = 0.0
    for index in range(topology.groups):
        start = index * topology.per_group
        group = drives[start:start + topology.per_group]
        usable += calculator(group, descriptor)
    return usable


def _check_drive_sizes(scheme_id: str, drives: Sequence[float]) -> List[float]:
    sizes = []
    for position, size in enumerate(drives, start=1):
        if isinstance(size, bool) or not isinstance(size, Real):
            raise InvalidDriveSizeError(
                f"Drive {position} size must be a number, got {size!r}", scheme_id=scheme_id
            )
        if not math.isfinite(size) or size <= 0:
            raise InvalidDriveSizeError(
                f"Drive {position} size must be a positive number of TB, got {size}",
                scheme_id=scheme_id,
            )
        sizes.append(float(size))
    return sizes


def _check_topology(descriptor: SchemeDescriptor, drive_count: int,
                    topology: GroupTopology) -> None:
    if not descriptor.groupable:
        raise TopologyMismatchError(
            f"{descriptor.name} does not support multiple vdevs",
            scheme_id=descriptor.scheme_id,
        )
    if drive_count != topology.total_drives:
        raise TopologyMismatchError(
            f"Total drives ({drive_count}) must equal vdevs ({topology.groups}) "
            f"× drives per vdev ({topology.per_group})",
            scheme_id=descriptor.scheme_id,
            required=topology.total_drives,
            actual=drive_count,
        )


def _check_vdev_size(descriptor: SchemeDescriptor, topology: GroupTopology) -> None:
    # A mirror needs two members, a parity vdev one data drive beyond its parity
    required = 2 if descriptor.family == SchemeFamily.MIRROR else descriptor.parity + 1
    if topology.per_group < required:
        raise InsufficientDrivesError(
            descriptor.scheme_id, descriptor.name, required, topology.per_group,
            unit="drives per vdev",
        )


def calculate(scheme_id: str, drives: Sequence[float],
              topology: Optional[GroupTopology] = None) -> CapacityResult:
    """
    Computes usable, raw and wasted capacity (TiB) for `drives` (decimal TB)
    laid out with the given scheme. Grouped schemes accept a vdev topology;
    without one all drives form a single group.

    Raises a CapacityError subclass before any arithmetic when the request
    is invalid.
    """
    descriptor = lookup(scheme_id)
    sizes = _check_drive_sizes(scheme_id, drives)

    if topology is not None:
        _check_topology(descriptor, len(sizes), topology)
    validate(scheme_id, len(sizes))
    if topology is not None:
        _check_vdev_size(descriptor, topology)

    drives_in_tib = [to_binary_units(tb) for tb in sizes]
    raw_capacity = sum(drives_in_tib)

    if topology is not None:
        usable_capacity = calculate_grouped(drives_in_tib, descriptor, topology)
    else:
        usable_capacity = FAMILY_CALCULATORS[descriptor.family](drives_in_tib, descriptor)

    logger.debug(
        f"{scheme_id}: {len(sizes)} drives, usable {usable_capacity:.4f} TiB of {raw_capacity:.4f} TiB"
    )

    return CapacityResult(
        usable_capacity=usable_capacity,
        raw_capacity=raw_capacity,
        efficiency=usable_capacity / raw_capacity,
        wasted_space=raw_capacity - usable_capacity,
        groups=topology.groups if topology is not None else None,
        drives_per_group=topology.per_group if topology is not None else None,
    )
