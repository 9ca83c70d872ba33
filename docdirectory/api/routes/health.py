"""
Health check API route.

Provides endpoint for checking server readiness and data status.
"""
from fastapi import APIRouter, Depends

from docdirectory.api.deps import get_search_service
from docdirectory.api.schemas import HealthResponse
from docdirectory.services.search import DirectorySearchService

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(service: DirectorySearchService = Depends(get_search_service)):
    """
    Health check endpoint.

    Returns server status and how many doctors are loaded. Status is
    "degraded" and load_error is set when the data file could not be read.
    """
    # Import here to avoid circular dependency
    from docdirectory.api.main import is_watching

    load_error = getattr(service.source, "load_error", None)
    return HealthResponse(
        status="degraded" if load_error else "ready",
        doctors_loaded=service.count_doctors(),
        watching=is_watching(),
        load_error=load_error,
    )
