"""Health check endpoints."""
from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", tags=["health"])
def health_check() -> Dict[str, str]:
    """
    Liveness check for load balancers - no dependency checks.

    Returns HTTP 200 OK if the application is running.
    """
    return {"status": "ok"}
