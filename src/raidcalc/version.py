import json
import logging
import subprocess
from typing import Dict

logger = logging.getLogger(__name__)

# This variable is intended to be overwritten during the build/release process
__version__ = "test"


def _git(*args: str) -> str:
    result = subprocess.run(["git", *args], capture_output=True, text=True, check=True)
    return result.stdout.strip()


def get_version() -> str:
    """
    Returns the current version of the application.
    Priorities:
    1. Explicitly set __version__ (if not "test")
    2. Git commit hash (if inside a git repo)
    3. Fallback "test"
    """
    if __version__ != "test":
        return __version__

    try:
        return _git("rev-parse", "--short", "HEAD")
    except (subprocess.CalledProcessError, FileNotFoundError):
        pass

    return "test"


def get_version_info() -> Dict[str, str]:
    """Commit hash and relative commit date of the running build."""
    try:
        return {
            "commit": _git("rev-parse", "--short", "HEAD"),
            "date": _git("log", "-1", "--format=%cd", "--date=relative"),
        }
    except (subprocess.CalledProcessError, FileNotFoundError) as e:
        logger.warning(f"Version info unavailable: {e}")
        return {"commit": "unknown", "date": "unknown"}


def write_version_file(path: str) -> Dict[str, str]:
    info = get_version_info()
    with open(path, "w") as f:
        json.dump(info, f, indent=2)
    logger.info(f"{path} updated: {info}")
    return info
