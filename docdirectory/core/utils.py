"""
Utility functions for query and facet text handling.
"""
from typing import Iterable, List, Optional


def tokenize_query(query: Optional[str]) -> List[str]:
    """
    Split a free-text query into lowercase search tokens.
    
    Parameters
    ----
    query : str, optional
        Raw query as typed by the user. None is treated as empty.
        
    Returns
    ----
    List[str]
        Tokens split on runs of whitespace, empty tokens dropped
    """
    if not query or not isinstance(query, str):
        return []
    return query.strip().lower().split()


def unique_sorted(values: Iterable[Optional[str]]) -> List[str]:
    """Deduplicate and sort values, dropping only missing (None) entries."""
    return sorted({value for value in values if value is not None})


def contains_ci(haystack: Optional[str], needle: str) -> bool:
    """Case-insensitive literal substring test; ``needle`` must already be lowercase."""
    if not haystack:
        return False
    return needle in haystack.lower()
