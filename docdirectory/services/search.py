"""
Search service for the doctor directory listing.

Combines keyword search and faceted filtering over the full doctor
collection handed over by a record source:
- Every call re-reads the complete collection; nothing is cached here
- Search runs first, filters second (the two commute as sets)
- Filter options always come from the unfiltered collection
"""
import logging
from typing import List, Optional, Tuple

from docdirectory.core.models import ActiveFilters, Doctor, FilterOptions
from docdirectory.core.search import (
    filter_doctors,
    get_filter_options,
    reset_filters,
    search_doctors,
)
from docdirectory.core.store import RecordSource

logger = logging.getLogger(__name__)


class DirectorySearchService:
    """
    Provides search functionality over the doctor directory.

    Features:
    - search(): keyword search combined with facet filters
    - search_with_facets(): paginated results plus the filter sidebar options
    - Lookups by id and slug
    """

    def __init__(self, source: RecordSource):
        """
        Initialize search service.

        Parameters
        ----
        source : RecordSource
            Supplier of the full doctor collection
        """
        self.source = source

    def list_doctors(self) -> List[Doctor]:
        return self.source.list_doctors()

    def search(self, query: Optional[str], filters: Optional[ActiveFilters] = None) -> List[Doctor]:
        """
        Search doctors and apply facet filters.

        Parameters
        ----
        query : str, optional
            Space-separated keywords; empty matches everyone
        filters : ActiveFilters, optional
            Selected specialties and states; None means no filters

        Returns
        ----
        List[Doctor]
            Matching doctors in directory order
        """
        active = filters if filters is not None else reset_filters()
        results = search_doctors(self.source.list_doctors(), query)
        return filter_doctors(results, active)

    def filter_options(self) -> FilterOptions:
        """
        Get the filter sidebar options.

        Derived from the whole directory so that applying a filter never
        shrinks the list of values the user can still pick.
        """
        return get_filter_options(self.source.list_doctors())

    def search_with_facets(
        self,
        query: Optional[str],
        filters: Optional[ActiveFilters] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Tuple[List[Doctor], int, FilterOptions]:
        """
        Search with filter options for building the directory page.

        Parameters
        ----
        query : str, optional
            Search query
        filters : ActiveFilters, optional
            Active facet selections
        limit : int
            Results per page
        offset : int
            Pagination offset

        Returns
        ----
        Tuple[List[Doctor], int, FilterOptions]
            (page of results, total matching count, options from the full directory)
        """
        # One snapshot for both the results and the options
        doctors = self.source.list_doctors()
        active = filters if filters is not None else reset_filters()

        results = filter_doctors(search_doctors(doctors, query), active)
        options = get_filter_options(doctors)

        logger.debug(
            "Directory search %r with %s: %d of %d doctors",
            query, active.model_dump(), len(results), len(doctors)
        )
        return results[offset:offset + limit], len(results), options

    def get_doctor(self, doctor_id: str) -> Optional[Doctor]:
        """
        Get a doctor by id.

        Returns
        ----
        Doctor
            The doctor, or None if not found
        """
        for doctor in self.source.list_doctors():
            if doctor.id == doctor_id:
                return doctor
        return None

    def get_doctor_by_slug(self, slug: str) -> Optional[Doctor]:
        for doctor in self.source.list_doctors():
            if doctor.slug == slug:
                return doctor
        return None

    def count_doctors(self) -> int:
        return len(self.source.list_doctors())
