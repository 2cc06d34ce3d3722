"""API router for capacity calculations."""

import traceback

from fastapi import APIRouter, HTTPException
from fastapi.logger import logger

from raidcalc.api.dtos import (
    CalculateRequest,
    CalculateResponse,
    CalculationSummary,
    DriveSizeOptions,
    DriveSizeResponse,
    ErrorResponse,
    SchemeListResponse,
    SchemeResponse,
    StrategyListResponse,
    StrategyRequest,
)
from raidcalc.capacity import formatting
from raidcalc.capacity.calculators import calculate
from raidcalc.capacity.errors import CapacityError, UnknownSchemeError
from raidcalc.capacity.models import GroupTopology
from raidcalc.capacity.registry import list_schemes, lookup
from raidcalc.capacity.strategies import generate_strategies
from raidcalc.config.settings import config

router = APIRouter(prefix="/capacity", tags=["Capacity"])


def _check_drive_limit(drives):
    if len(drives) > config.max_drives:
        raise HTTPException(
            status_code=400,
            detail=f"At most {config.max_drives} drives are supported, got {len(drives)}",
        )


@router.get("/schemes", response_model=SchemeListResponse)
def get_schemes():
    """
    List every supported storage scheme with its metadata.
    """
    return SchemeListResponse(data=list_schemes())


@router.get("/drive-sizes", response_model=DriveSizeResponse)
def get_drive_sizes():
    """
    Advertised drive sizes a front end offers as choices.
    """
    return DriveSizeResponse(data=DriveSizeOptions(
        sizes=config.drive_sizes,
        default=config.default_drive_size,
    ))


@router.get(
    "/schemes/{scheme_id}",
    response_model=SchemeResponse,
    responses={404: {"model": ErrorResponse, "description": "Scheme not found"}}
)
def get_scheme(scheme_id: str):
    try:
        return SchemeResponse(data=lookup(scheme_id))
    except UnknownSchemeError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid drive configuration"},
        404: {"model": ErrorResponse, "description": "Scheme not found"},
        500: {"model": ErrorResponse, "description": "Internal Server Error"}
    }
)
def calculate_capacity(request: CalculateRequest):
    """
    Calculates usable, raw and wasted capacity for a drive layout.
    """
    _check_drive_limit(request.drives)

    if (request.vdevs is None) != (request.drives_per_vdev is None):
        raise HTTPException(status_code=400, detail="vdevs and drives_per_vdev must be given together")

    try:
        topology = None
        if request.vdevs is not None:
            topology = GroupTopology(groups=request.vdevs, per_group=request.drives_per_vdev)

        result = calculate(request.scheme, request.drives, topology)
        descriptor = lookup(request.scheme)
    except UnknownSchemeError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except CapacityError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error calculating capacity: {e}\n{traceback.format_exc()}")
        raise HTTPException(status_code=500, detail=str(e))

    return CalculateResponse(data=CalculationSummary(
        scheme=descriptor,
        drives=request.drives,
        result=result,
        usable_display=formatting.format_capacity(result.usable_capacity),
        raw_display=formatting.format_capacity(result.raw_capacity),
        efficiency_display=formatting.format_percentage(result.efficiency),
        redundancy_display=formatting.format_capacity(result.wasted_space),
        fault_tolerance=formatting.describe_fault_tolerance(descriptor),
        performance=formatting.describe_performance(descriptor),
        drive_summary=formatting.format_drive_list(request.drives),
    ))


@router.post(
    "/strategies",
    response_model=StrategyListResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid drive sizes"},
        500: {"model": ErrorResponse, "description": "Internal Server Error"}
    }
)
def list_strategies(request: StrategyRequest):
    """
    Evaluates every scheme the given drives can be arranged in.
    """
    _check_drive_limit(request.drives)

    try:
        return StrategyListResponse(data=generate_strategies(request.drives))
    except CapacityError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception as e:
        logger.error(f"Error generating strategies: {e}\n{traceback.format_exc()}")
        raise HTTPException(status_code=500, detail=str(e))
