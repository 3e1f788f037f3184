"""Health check endpoint."""

import time

from fastapi import APIRouter

from heatwall import __version__

router = APIRouter(prefix="/api", tags=["health"])

_start_time = time.time()


@router.get("/health")
async def health_check():
    """Health check: returns status, uptime and version."""
    return {
        "status": "ok",
        "uptime_seconds": int(time.time() - _start_time),
        "version": __version__,
    }
