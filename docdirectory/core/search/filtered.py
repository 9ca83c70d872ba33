"""
Faceted filtering for the directory listing.

Filter logic:
- Within a facet (specialty, state): OR, a doctor matches ANY selected value
- Between facets: AND, a doctor must satisfy every facet with a selection
- A facet with no selection does not filter at all

Example:
- Selected: specialties=["Orthopedic Surgery", "Cardiology"], states=["NY", "CA"]
- Result: doctors who are (Orthopedic Surgery OR Cardiology) AND (in NY OR CA)

Filter options must always be derived from the full, unfiltered collection so
that selecting one value never removes the others from the choice list.
"""

import logging
from typing import List, Optional, Sequence

from docdirectory.core.models import ActiveFilters, Doctor, FilterOptions
from docdirectory.core.utils import unique_sorted

logger = logging.getLogger(__name__)


def get_filter_options(doctors: Sequence[Doctor]) -> FilterOptions:
    """
    Extract every selectable facet value from a doctor collection.

    Collects the unique entries of each doctor's ``specialties`` (not just the
    primary specialty) and the unique states of practice. Doctors without a
    location contribute no state.

    Parameters
    ----------
    doctors : Sequence[Doctor]
        The full doctor collection, never a filtered view of it

    Returns
    -------
    FilterOptions
        Alphabetically sorted, deduplicated specialties and states
    """
    specialties = unique_sorted(
        specialty for doctor in doctors for specialty in doctor.specialties
    )
    states = unique_sorted(doctor.state for doctor in doctors)
    return FilterOptions(specialties=specialties, states=states)


def filter_doctors(doctors: Sequence[Doctor], filters: ActiveFilters) -> List[Doctor]:
    """
    Filter doctors by the selected specialties and states.

    Parameters
    ----------
    doctors : Sequence[Doctor]
        Doctors to filter; never modified
    filters : ActiveFilters
        Current selections. Duplicate selections have no effect.

    Returns
    -------
    List[Doctor]
        Doctors passing every active facet, in input order
    """
    filtered = list(doctors)

    if filters.specialties:
        selected_specialties = set(filters.specialties)
        filtered = [
            doctor
            for doctor in filtered
            if any(specialty in selected_specialties for specialty in doctor.specialties)
        ]

    if filters.states:
        selected_states = set(filters.states)
        # A doctor with no state never satisfies a state selection
        filtered = [
            doctor
            for doctor in filtered
            if doctor.state is not None and doctor.state in selected_states
        ]

    logger.debug("Filters kept %d of %d doctors", len(filtered), len(doctors))
    return filtered


def has_active_filters(filters: ActiveFilters) -> bool:
    """True if at least one facet has a selection."""
    return len(filters.specialties) > 0 or len(filters.states) > 0


def reset_filters() -> ActiveFilters:
    """Empty selection, used as the initial and reset filter state."""
    return ActiveFilters(specialties=[], states=[])


def narrow_options(values: Sequence[str], text: Optional[str]) -> List[str]:
    """
    Narrow a facet's option list to values containing ``text``.

    Backs the "search within filters" box next to each facet. Matching is a
    case-insensitive substring test; empty text keeps every value.
    """
    if not text or not text.strip():
        return list(values)
    needle = text.strip().lower()
    return [value for value in values if needle in value.lower()]
