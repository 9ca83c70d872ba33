"""
Multi-keyword search over doctor profiles.

A query is split into lowercase tokens and a doctor is kept only if every
token appears somewhere in its searchable fields:

- name
- primary specialty
- any entry of specialties
- any entry of conditions

Matching is a case-insensitive literal substring test, so "ardio" matches
"Cardiology" and characters such as "+" or "(" carry no special meaning.
Results keep the input order; there is no relevance ranking.

Example searches:
- "acl reconstruction" -> doctors with "acl" AND "reconstruction" in any field
- "john smith" -> doctors with "john" AND "smith" in the name
- "orthopedic knee" -> "orthopedic" in a specialty AND "knee" in a condition
"""

import logging
from typing import List, Optional, Sequence

from docdirectory.core.models import Doctor
from docdirectory.core.utils import contains_ci, tokenize_query

logger = logging.getLogger(__name__)


def _matches_token(doctor: Doctor, token: str) -> bool:
    if contains_ci(doctor.name, token):
        return True

    if contains_ci(doctor.specialty, token):
        return True

    if any(contains_ci(specialty, token) for specialty in doctor.specialties):
        return True

    # Conditions let users search for injuries like "rotator cuff"
    return any(contains_ci(condition, token) for condition in doctor.conditions)


def matches_query(doctor: Doctor, tokens: Sequence[str]) -> bool:
    """
    Check whether a doctor matches every token.

    Parameters
    ----------
    doctor : Doctor
        Doctor to check
    tokens : Sequence[str]
        Lowercase tokens, as produced by ``tokenize_query``

    Returns
    -------
    bool
        True if each token matches at least one searchable field.
        An empty token list matches everything.
    """
    return all(_matches_token(doctor, token) for token in tokens)


def search_doctors(doctors: Sequence[Doctor], query: Optional[str]) -> List[Doctor]:
    """
    Search doctors by free-text query.

    Parameters
    ----------
    doctors : Sequence[Doctor]
        Doctors to search through; never modified
    query : str, optional
        Space-separated keywords. None, empty and whitespace-only queries
        return every doctor.

    Returns
    -------
    List[Doctor]
        Doctors matching all keywords, in input order
    """
    tokens = tokenize_query(query)
    if not tokens:
        return list(doctors)

    results = [doctor for doctor in doctors if matches_query(doctor, tokens)]
    logger.debug("Search %r matched %d of %d doctors", tokens, len(results), len(doctors))
    return results
