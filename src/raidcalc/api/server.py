from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from raidcalc.api.routers import capacity, info
from raidcalc.config.settings import config

app = FastAPI(
    title="RAID Capacity API",
    description="Usable storage capacity for RAID, SHR, ZFS and Unraid layouts.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(capacity.router)
app.include_router(info.router)
