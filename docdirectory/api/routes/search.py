"""
Search API routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from docdirectory.api.deps import get_search_service
from docdirectory.api.schemas import SearchResponse
from docdirectory.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from docdirectory.core.models import ActiveFilters, FilterOptions
from docdirectory.core.search import has_active_filters, narrow_options
from docdirectory.services.search import DirectorySearchService

router = APIRouter()


@router.get("/search", response_model=SearchResponse)
def search(
    q: str = Query(""),
    specialties: Optional[List[str]] = Query(None),
    states: Optional[List[str]] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    service: DirectorySearchService = Depends(get_search_service),
):
    """
    Search the directory with keyword and facet filters.
    
    Parameters
    ----
    q : str
        Space-separated keywords matched against name, specialties and
        conditions. Empty returns the whole directory.
    specialties : List[str], optional
        Selected specialties (repeat the parameter for several)
    states : List[str], optional
        Selected states (repeat the parameter for several)
    page : int
        Page number (1-indexed)
    limit : int
        Results per page
    """
    active = ActiveFilters(specialties=specialties or [], states=states or [])
    offset = (page - 1) * limit

    results, total, options = service.search_with_facets(
        q, active, limit=limit, offset=offset
    )

    return SearchResponse(
        query=q,
        results=results,
        total=total,
        page=page,
        limit=limit,
        filter_options=options,
        active_filters=active,
        has_active_filters=has_active_filters(active),
    )


@router.get("/filters", response_model=FilterOptions)
def filter_options(
    specialty_q: Optional[str] = Query(None),
    state_q: Optional[str] = Query(None),
    service: DirectorySearchService = Depends(get_search_service),
):
    """
    Get the specialty and state options for the filter panel.

    ``specialty_q`` and ``state_q`` narrow each list for the
    search-within-filters boxes.
    """
    options = service.filter_options()
    return FilterOptions(
        specialties=narrow_options(options.specialties, specialty_q),
        states=narrow_options(options.states, state_q),
    )
