"""
FastAPI dependencies for shared resources.

The directory is small enough to live in memory, so a single store instance
is shared by every request and refreshed in place by the file watcher.
"""

import threading
from typing import Optional

from docdirectory.core.store import JsonDoctorStore
from docdirectory.services.search import DirectorySearchService

_store: Optional[JsonDoctorStore] = None
_store_lock = threading.Lock()


def get_store() -> JsonDoctorStore:
    """
    Get the process-wide doctor store, creating it on first use.

    Returns
    ----
    JsonDoctorStore
        Store reading DOCDIR_DATA_PATH or the default data file
    """
    global _store
    with _store_lock:
        if _store is None:
            _store = JsonDoctorStore()
        return _store


def set_store(store: Optional[JsonDoctorStore]) -> None:
    """Replace the shared store (None drops it so the next request re-creates it)."""
    global _store
    with _store_lock:
        _store = store


def get_search_service() -> DirectorySearchService:
    """Dependency that provides the directory search service."""
    return DirectorySearchService(get_store())
