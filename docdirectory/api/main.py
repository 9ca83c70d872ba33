"""
FastAPI application entry point for the doctor directory API.

Provides REST API endpoints and integrates file watching so edits to the
directory data file are picked up without a restart.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docdirectory import __version__
from docdirectory.api.deps import get_store
from docdirectory.api.routes import doctors, health, search
from docdirectory.core.config import get_cors_origins, is_watch_enabled
from docdirectory.services.watcher import DataFileWatcher

logger = logging.getLogger(__name__)

# Global state (managed by lifespan)
_watcher: Optional[DataFileWatcher] = None


def _reload_store():
    """Re-read the data file into the shared store."""
    count = get_store().reload()
    logger.info("Directory reloaded: %d doctors", count)


def is_watching() -> bool:
    return _watcher is not None and _watcher.is_running()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan manager for startup/shutdown tasks.

    On startup:
    - Loads the directory data file
    - Starts the data file watcher (unless DOCDIR_WATCH=false)

    On shutdown:
    - Stops the watcher gracefully
    """
    global _watcher

    store = get_store()
    try:
        count = store.reload()
        logger.info("Loaded %d doctors from %s", count, store.data_path)
    except ValueError as e:
        logger.error("Could not load directory data: %s", e)

    if is_watch_enabled():
        _watcher = DataFileWatcher(store.data_path, _reload_store)
        _watcher.start()
    else:
        logger.info("File watching disabled (DOCDIR_WATCH=false)")

    yield

    # Shutdown
    if _watcher:
        logger.info("Stopping file watcher...")
        _watcher.stop()
        _watcher = None


app = FastAPI(title="Doctor Directory API", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(doctors.router, prefix="/api", tags=["doctors"])
app.include_router(search.router, prefix="/api", tags=["search"])
app.include_router(health.router, prefix="/api", tags=["health"])
