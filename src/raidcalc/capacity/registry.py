import logging
from types import MappingProxyType
from typing import List, Optional

from raidcalc.capacity.errors import (
    InsufficientDrivesError,
    ParityMismatchError,
    UnknownSchemeError,
)
from raidcalc.capacity.models import SchemeDescriptor, SchemeFamily

logger = logging.getLogger(__name__)

_DESCRIPTORS = [
    SchemeDescriptor(
        scheme_id="raid0",
        name="RAID 0",
        description="Striping - Maximum performance, no redundancy",
        min_drives=2,
        fault_tolerance=0,
        read_performance="Excellent",
        write_performance="Excellent",
        efficiency=1.0,
        family=SchemeFamily.STRIPE,
    ),
    SchemeDescriptor(
        scheme_id="raid1",
        name="RAID 1",
        description="Mirroring - 100% redundancy",
        min_drives=2,
        fault_tolerance=1,
        read_performance="Good",
        write_performance="Moderate",
        efficiency=0.5,
        family=SchemeFamily.MIRROR,
    ),
    SchemeDescriptor(
        scheme_id="raid5",
        name="RAID 5",
        description="Single parity - Good balance of performance and redundancy",
        min_drives=3,
        fault_tolerance=1,
        read_performance="Good",
        write_performance="Moderate",
        family=SchemeFamily.PARITY,
        parity=1,
    ),
    SchemeDescriptor(
        scheme_id="raid6",
        name="RAID 6",
        description="Double parity - Enhanced fault tolerance",
        min_drives=4,
        fault_tolerance=2,
        read_performance="Good",
        write_performance="Moderate",
        family=SchemeFamily.PARITY,
        parity=2,
    ),
    SchemeDescriptor(
        scheme_id="raid10",
        name="RAID 10",
        description="Mirrored stripes - Best performance with redundancy",
        min_drives=4,
        fault_tolerance=1,
        read_performance="Excellent",
        write_performance="Good",
        efficiency=0.5,
        family=SchemeFamily.MIRRORED_STRIPE,
    ),
    SchemeDescriptor(
        scheme_id="shr",
        name="Synology Hybrid RAID",
        description="Flexible RAID with single disk fault tolerance",
        min_drives=2,
        fault_tolerance=1,
        read_performance="Good",
        write_performance="Moderate",
        family=SchemeFamily.HYBRID,
        parity=1,
    ),
    SchemeDescriptor(
        scheme_id="shr2",
        name="Synology Hybrid RAID 2",
        description="Flexible RAID with dual disk fault tolerance",
        min_drives=4,
        fault_tolerance=2,
        read_performance="Good",
        write_performance="Moderate",
        family=SchemeFamily.HYBRID,
        parity=2,
    ),
    SchemeDescriptor(
        scheme_id="zfs-stripe",
        name="ZFS Stripe",
        description="No redundancy - Maximum capacity",
        min_drives=1,
        fault_tolerance=0,
        read_performance="Excellent",
        write_performance="Excellent",
        efficiency=1.0,
        family=SchemeFamily.STRIPE,
    ),
    SchemeDescriptor(
        scheme_id="zfs-mirror",
        name="ZFS Mirror",
        description="Mirrored vdevs - High redundancy",
        min_drives=2,
        fault_tolerance=1,
        read_performance="Excellent",
        write_performance="Good",
        efficiency=0.5,
        family=SchemeFamily.MIRROR,
        groupable=True,
    ),
    SchemeDescriptor(
        scheme_id="raidz1",
        name="RAIDZ1",
        description="Single parity - ZFS equivalent to RAID 5",
        min_drives=3,
        fault_tolerance=1,
        read_performance="Good",
        write_performance="Moderate",
        family=SchemeFamily.PARITY,
        parity=1,
        groupable=True,
    ),
    SchemeDescriptor(
        scheme_id="raidz2",
        name="RAIDZ2",
        description="Double parity - ZFS equivalent to RAID 6",
        min_drives=4,
        fault_tolerance=2,
        read_performance="Good",
        write_performance="Moderate",
        family=SchemeFamily.PARITY,
        parity=2,
        groupable=True,
    ),
    SchemeDescriptor(
        scheme_id="raidz3",
        name="RAIDZ3",
        description="Triple parity - Maximum fault tolerance",
        min_drives=5,
        fault_tolerance=3,
        read_performance="Good",
        write_performance="Moderate",
        family=SchemeFamily.PARITY,
        parity=3,
        groupable=True,
    ),
    SchemeDescriptor(
        scheme_id="unraid-1",
        name="Unraid (1 Parity)",
        description="Flexible array with single parity drive - Individual drive access",
        min_drives=2,
        fault_tolerance=1,
        read_performance="Good",
        write_performance="Moderate",
        family=SchemeFamily.FLEXIBLE_ARRAY,
        parity=1,
    ),
    SchemeDescriptor(
        scheme_id="unraid-2",
        name="Unraid (2 Parity)",
        description="Flexible array with dual parity drives - Individual drive access",
        min_drives=3,
        fault_tolerance=2,
        read_performance="Good",
        write_performance="Moderate",
        family=SchemeFamily.FLEXIBLE_ARRAY,
        parity=2,
    ),
]

# Read-only view; descriptors themselves are frozen models.
SCHEMES = MappingProxyType({d.scheme_id: d for d in _DESCRIPTORS})


def lookup(scheme_id: str) -> SchemeDescriptor:
    try:
        return SCHEMES[scheme_id]
    except KeyError:
        raise UnknownSchemeError(scheme_id) from None


def list_schemes() -> List[SchemeDescriptor]:
    return list(SCHEMES.values())


def validate(scheme_id: str, drive_count: int) -> SchemeDescriptor:
    """
    Checks that a scheme can be built from `drive_count` drives.
    Returns the descriptor so callers don't need a second lookup.

    An odd count for a pair based scheme is reported as such even when
    it is also below the minimum.
    """
    descriptor = lookup(scheme_id)

    if descriptor.family == SchemeFamily.MIRRORED_STRIPE and drive_count % 2 != 0:
        logger.info(f"{scheme_id} rejected: odd drive count {drive_count}")
        raise ParityMismatchError(scheme_id, descriptor.name, drive_count)

    if drive_count < descriptor.min_drives:
        logger.info(f"{scheme_id} rejected: {drive_count} drives, needs {descriptor.min_drives}")
        raise InsufficientDrivesError(
            scheme_id, descriptor.name, descriptor.min_drives, drive_count
        )

    return descriptor


def check_configuration(scheme_id: str, drive_count: int) -> Optional[str]:
    """
    Returns a short reason why the configuration can't be calculated,
    or None when it is valid. Meant for front ends that disable their
    calculate action instead of showing an error.
    """
    try:
        validate(scheme_id, drive_count)
    except InsufficientDrivesError as e:
        return f"Requires {e.required}+ drives"
    except ParityMismatchError:
        return f"{SCHEMES[scheme_id].name} requires even number of drives"
    return None
