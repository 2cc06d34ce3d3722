from typing import Any, List, Optional

from pydantic import BaseModel

from raidcalc.capacity.models import CapacityResult, SchemeDescriptor, StorageStrategy


class BaseResponse(BaseModel):
    status: str = "success"
    message: Optional[str] = None


class ErrorResponse(BaseResponse):
    status: str = "error"


class DataResponse(BaseResponse):
    data: Optional[Any] = None


class SchemeListResponse(BaseResponse):
    data: List[SchemeDescriptor]


class SchemeResponse(BaseResponse):
    data: SchemeDescriptor


class CalculateRequest(BaseModel):
    scheme: str
    drives: List[float]  # Advertised sizes in TB
    vdevs: Optional[int] = None
    drives_per_vdev: Optional[int] = None


class CalculationSummary(BaseModel):
    scheme: SchemeDescriptor
    drives: List[float]
    result: CapacityResult
    usable_display: str
    raw_display: str
    efficiency_display: str
    redundancy_display: str
    fault_tolerance: str
    performance: str
    drive_summary: str


class CalculateResponse(BaseResponse):
    data: CalculationSummary


class StrategyRequest(BaseModel):
    drives: List[float]


class StrategyListResponse(BaseResponse):
    data: List[StorageStrategy]


class VersionInfo(BaseModel):
    version: str
    commit: str
    date: str


class DriveSizeOptions(BaseModel):
    sizes: List[float]  # Advertised sizes in TB
    default: float


class DriveSizeResponse(BaseResponse):
    data: DriveSizeOptions
