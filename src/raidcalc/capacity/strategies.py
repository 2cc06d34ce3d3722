import logging
from typing import List, Sequence

from raidcalc.capacity.calculators import calculate
from raidcalc.capacity.errors import InsufficientDrivesError, ParityMismatchError
from raidcalc.capacity.formatting import describe_fault_tolerance
from raidcalc.capacity.models import StorageStrategy
from raidcalc.capacity.registry import list_schemes

logger = logging.getLogger(__name__)


def generate_strategies(drives: Sequence[float]) -> List[StorageStrategy]:
    """
    Evaluates every registered scheme against the given drives.
    Schemes the drives can't satisfy are left out.
    """
    strategies = []

    if not drives:
        return strategies

    for descriptor in list_schemes():
        try:
            result = calculate(descriptor.scheme_id, drives)
        except (InsufficientDrivesError, ParityMismatchError) as e:
            logger.debug(f"Skipping {descriptor.scheme_id}: {e}")
            continue

        strategies.append(StorageStrategy(
            scheme_id=descriptor.scheme_id,
            name=descriptor.name,
            description=descriptor.description,
            drives=[float(d) for d in drives],
            usable_capacity=result.usable_capacity,
            raw_capacity=result.raw_capacity,
            efficiency=result.efficiency,
            redundancy=describe_fault_tolerance(descriptor),
        ))

    return strategies
