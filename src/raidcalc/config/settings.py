import os


def _float_list(value: str):
    return [float(item) for item in value.split(",") if item.strip()]


class Config:
    default_drive_size = float(os.getenv("RAIDCALC_DEFAULT_DRIVE_SIZE", "12"))
    drive_sizes = _float_list(
        os.getenv("RAIDCALC_DRIVE_SIZES", "1,2,3,4,6,8,10,12,14,16,18,20,22,24")
    )
    max_drives = int(os.getenv("RAIDCALC_MAX_DRIVES", "48"))
    cors_origins = [
        origin.strip()
        for origin in os.getenv("RAIDCALC_CORS_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ]
    log_level = os.getenv("RAIDCALC_LOG_LEVEL", "INFO").upper()
    version_file = os.getenv("RAIDCALC_VERSION_FILE", "version.json")

config = Config()
