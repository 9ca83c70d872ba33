"""
Constants for the directory search engine.

These constants configure debounce timing, pagination defaults,
and HTTP caching for the public listing.
"""

# Quiescence window before a typed query is executed
SEARCH_DEBOUNCE_SECONDS = 0.3

# Quiescence window before a changed data file is reloaded
RELOAD_DEBOUNCE_SECONDS = 2.0

# Pagination defaults
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200

# Cache-Control for the public doctor listing
PUBLIC_CACHE_CONTROL = "public, s-maxage=300, stale-while-revalidate=600"

# Data file names recognised in the data directory
DATA_FILE_NAMES = ("doctors.json", "users.json")
