"""
File watcher service for automatic reloads of the directory data file.

Monitors the JSON data file and re-reads it when it changes, so a running
API serves profile edits without a restart.
"""
import logging
import threading
import time
from pathlib import Path
from typing import Callable, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from docdirectory.core.constants import RELOAD_DEBOUNCE_SECONDS

logger = logging.getLogger(__name__)


class DataFileHandler(FileSystemEventHandler):
    """
    File system event handler for the directory data file.

    Triggers the reload callback once changes have settled.
    """

    def __init__(
        self,
        data_path: Path,
        reload_callback: Callable[[], None],
        debounce_seconds: float = RELOAD_DEBOUNCE_SECONDS,
    ):
        """
        Initialize handler.

        Parameters
        ----
        data_path : Path
            Data file to watch
        reload_callback : Callable
            Function to call when the file should be re-read
        debounce_seconds : float
            Seconds to wait after last change before triggering (default: 2.0)
        """
        super().__init__()
        self.data_path = data_path
        self.reload_callback = reload_callback
        self.debounce_seconds = debounce_seconds
        self._pending_timer: Optional[threading.Timer] = None

    def _should_process(self, file_path: str) -> bool:
        """Check if a changed path is the data file."""
        try:
            return Path(file_path).resolve() == self.data_path.resolve()
        except (OSError, ValueError):
            return False

    def on_modified(self, event: FileSystemEvent):
        """Handle file modification events."""
        if event.is_directory:
            return

        if self._should_process(event.src_path):
            self._schedule_reload()

    def on_created(self, event: FileSystemEvent):
        """Handle file creation events."""
        if event.is_directory:
            return

        if self._should_process(event.src_path):
            self._schedule_reload()

    def on_moved(self, event: FileSystemEvent):
        """Handle editors that save by renaming a temp file over the data file."""
        if event.is_directory:
            return

        if self._should_process(getattr(event, "dest_path", "")):
            self._schedule_reload()

    def _schedule_reload(self):
        """Schedule reload after debounce period."""
        # Cancel existing timer if any
        if self._pending_timer:
            self._pending_timer.cancel()

        self._pending_timer = threading.Timer(
            self.debounce_seconds,
            self._trigger_reload
        )
        self._pending_timer.daemon = True
        self._pending_timer.start()
        logger.debug("Scheduled reload in %.1f seconds", self.debounce_seconds)

    def _trigger_reload(self):
        """Trigger the reload callback."""
        logger.info("Data file change detected, reloading %s", self.data_path)
        try:
            self.reload_callback()
        except Exception as e:
            logger.error("Error reloading directory data: %s", e)


class PollingWatcher:
    """
    Polling-based watcher for file systems where events are unreliable
    (network mounts, some containers).

    Checks the data file's modification time periodically.
    """

    def __init__(
        self,
        data_path: Path,
        reload_callback: Callable[[], None],
        poll_interval: float = 30.0,
    ):
        self.data_path = data_path
        self.reload_callback = reload_callback
        self.poll_interval = poll_interval
        self.last_mtime: Optional[float] = self._current_mtime()
        self._running = False

    def _current_mtime(self) -> Optional[float]:
        try:
            return self.data_path.stat().st_mtime
        except OSError:
            return None

    def check_once(self) -> bool:
        """
        Compare the file's mtime with the last seen one and reload on change.

        Returns
        ----
        bool
            True if a reload was triggered
        """
        mtime = self._current_mtime()
        if mtime == self.last_mtime:
            return False

        self.last_mtime = mtime
        logger.info("Data file changed (polling), reloading %s", self.data_path)
        try:
            self.reload_callback()
        except Exception as e:
            logger.error("Error reloading directory data: %s", e)
        return True

    def start(self) -> threading.Thread:
        """Start polling in a background thread."""
        self._running = True

        def poll_loop():
            while self._running:
                time.sleep(self.poll_interval)
                if self._running:
                    self.check_once()

        thread = threading.Thread(target=poll_loop, daemon=True)
        thread.start()
        return thread

    def stop(self):
        """Stop polling."""
        self._running = False


class DataFileWatcher:
    """
    High-level watcher that keeps an in-memory directory in sync with its file.

    Uses file system events (via watchdog) by default, or mtime polling when
    ``use_watchdog`` is False.
    """

    def __init__(
        self,
        data_path: Path,
        reload_callback: Callable[[], None],
        use_watchdog: bool = True,
        debounce_seconds: float = RELOAD_DEBOUNCE_SECONDS,
        poll_interval: float = 30.0,
    ):
        self.data_path = Path(data_path)
        self.reload_callback = reload_callback
        self.use_watchdog = use_watchdog
        self.debounce_seconds = debounce_seconds
        self.poll_interval = poll_interval
        self.observer = None
        self.polling_watcher: Optional[PollingWatcher] = None

    def start(self):
        """Start watching for changes."""
        if self.use_watchdog:
            watch_dir = self.data_path.parent
            if not watch_dir.exists():
                logger.warning("Data directory does not exist, not watching: %s", watch_dir)
                return

            handler = DataFileHandler(
                self.data_path,
                self.reload_callback,
                debounce_seconds=self.debounce_seconds,
            )
            self.observer = Observer()
            self.observer.schedule(handler, str(watch_dir), recursive=False)
            self.observer.start()
            logger.info("Watching data file: %s", self.data_path)
        else:
            logger.info("Starting polling watcher for %s", self.data_path)
            self.polling_watcher = PollingWatcher(
                self.data_path,
                self.reload_callback,
                poll_interval=self.poll_interval,
            )
            self.polling_watcher.start()

    def stop(self):
        """Stop watching."""
        if self.observer:
            self.observer.stop()
            self.observer.join()
            self.observer = None
            logger.info("File system watcher stopped")

        if self.polling_watcher:
            self.polling_watcher.stop()
            self.polling_watcher = None
            logger.info("Polling watcher stopped")

    def is_running(self) -> bool:
        """Check if watcher is running."""
        return (self.observer is not None and self.observer.is_alive()) or \
               (self.polling_watcher is not None and self.polling_watcher._running)
