"""
Pydantic schemas for API request/response models.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from docdirectory.core.models import ActiveFilters, Doctor, FilterOptions


class DoctorsResponse(BaseModel):
    """Response for /api/doctors endpoint."""

    doctors: List[Doctor]
    total: int


class SearchResponse(BaseModel):
    """Response for /api/search endpoint."""

    query: str
    results: List[Doctor]
    total: int
    page: int
    limit: int
    filter_options: FilterOptions
    active_filters: ActiveFilters = Field(default_factory=ActiveFilters)
    has_active_filters: bool = False


class HealthResponse(BaseModel):
    status: str
    doctors_loaded: int
    watching: bool = False
    load_error: Optional[str] = None
