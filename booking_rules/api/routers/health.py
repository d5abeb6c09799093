"""
Health check endpoints for monitoring and orchestration (K8s, Docker, etc.)

- /health: Basic liveness check (always returns 200)
- /health/live: Alias for Kubernetes liveness probes
"""

from fastapi import APIRouter

router = APIRouter()

SERVICE_NAME = "booking-rules-api"


@router.get("/health")
async def health_check():
    """
    Basic liveness probe.

    Returns 200 OK if the application is running. The service keeps no
    database connection of its own, so liveness is also readiness.
    """
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/live")
async def health_check_live():
    """
    Alias for /health for Kubernetes liveness probe.

    Some orchestrators prefer /health/live naming convention.
    """
    return {"status": "ok", "service": SERVICE_NAME}
