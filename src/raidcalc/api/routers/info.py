from fastapi import APIRouter, HTTPException
from fastapi.logger import logger
import traceback

from raidcalc.api.dtos import DataResponse, VersionInfo

router = APIRouter(prefix="/info", tags=["Info"])


@router.get("/version", response_model=DataResponse)
def get_version_endpoint():
    from raidcalc.version import get_version, get_version_info
    try:
        return DataResponse(data=VersionInfo(version=get_version(), **get_version_info()))
    except Exception as e:
        logger.error(f"Error getting version info: {e}\n{traceback.format_exc()}")
        raise HTTPException(status_code=500, detail=str(e))
