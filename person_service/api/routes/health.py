"""Health & Stats Probes: liveness and store statistics endpoints.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up (liveness)
    - GET /api/v1/health/stats reports the store's size and operation counters
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, Request, status

from person_service.api.dependencies import get_person_store
from person_service.core.person_store import PersonStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.version,
    }


@router.get("/stats", status_code=status.HTTP_200_OK)
def store_stats(store: PersonStore = Depends(get_person_store)):
    """Store size plus fetched/added/updated/removed counters."""
    return {"persons": store.size, **asdict(store.stats)}
