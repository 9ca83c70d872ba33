"""
Search module for the directory listing.

Provides keyword search and faceted filtering over in-memory doctor records.
"""

from .keyword import search_doctors, matches_query
from .filtered import (
    get_filter_options,
    filter_doctors,
    has_active_filters,
    reset_filters,
    narrow_options,
)

__all__ = [
    "search_doctors",
    "matches_query",
    "get_filter_options",
    "filter_doctors",
    "has_active_filters",
    "reset_filters",
    "narrow_options",
]
