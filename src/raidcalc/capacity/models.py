from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, PositiveInt, model_validator


class SchemeFamily(str, Enum):
    STRIPE = "stripe"
    MIRROR = "mirror"
    PARITY = "parity"
    MIRRORED_STRIPE = "mirrored_stripe"
    HYBRID = "hybrid"
    FLEXIBLE_ARRAY = "flexible_array"


class SchemeDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    scheme_id: str
    name: str
    description: str
    min_drives: int
    fault_tolerance: int
    read_performance: str
    write_performance: str
    efficiency: Optional[float] = None  # None when it depends on the drive mix
    family: SchemeFamily
    parity: int = 0  # Parity disks used by the family calculator
    groupable: bool = False  # Accepts a vdev topology

    @model_validator(mode="after")
    def check_min_drives(self):
        if self.min_drives < self.parity + 1:
            raise ValueError(
                f"{self.scheme_id}: min_drives ({self.min_drives}) must be at least "
                f"parity + 1 ({self.parity + 1})"
            )
        return self


class GroupTopology(BaseModel):
    model_config = ConfigDict(frozen=True)

    groups: PositiveInt
    per_group: PositiveInt

    @property
    def total_drives(self) -> int:
        return self.groups * self.per_group


class CapacityResult(BaseModel):
    usable_capacity: float  # TiB
    raw_capacity: float  # TiB
    efficiency: float
    wasted_space: float  # TiB
    groups: Optional[int] = None
    drives_per_group: Optional[int] = None


class StorageStrategy(BaseModel):
    scheme_id: str
    name: str
    description: str
    drives: List[float]
    usable_capacity: float
    raw_capacity: float
    efficiency: float
    redundancy: str  # e.g. "Can survive 1 drive failure without data loss"
