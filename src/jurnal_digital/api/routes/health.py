"""Liveness endpoint."""

from datetime import datetime

import pytz
from fastapi import APIRouter

from jurnal_digital import config

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health", summary="Health check")
def health() -> dict:
    """Report that the service is up.

    Returns:
        Dictionary with status, timestamp, service name and version.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(pytz.utc).isoformat(),
        "service": config.SERVICE_NAME,
        "version": config.VERSION,
    }
