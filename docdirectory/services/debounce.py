"""
Debounced execution of directory queries.

Typing in the search box produces a burst of query changes. The debouncer
waits for a quiet period after the last change before running the search,
and only the result of the most recently scheduled call is delivered.
"""
import logging
import threading
from typing import Any, Callable, Optional, Tuple

from docdirectory.core.constants import SEARCH_DEBOUNCE_SECONDS

logger = logging.getLogger(__name__)


class QueryDebouncer:
    """
    Runs a function after input has been quiet for ``debounce_seconds``.

    Each ``submit()`` cancels the pending timer and starts a new one. Results
    are passed to ``on_result`` only if no newer call was submitted while the
    function was running.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        on_result: Callable[[Any], None],
        debounce_seconds: float = SEARCH_DEBOUNCE_SECONDS,
    ):
        """
        Initialize debouncer.

        Parameters
        ----
        func : Callable
            Function to run, e.g. ``DirectorySearchService.search``
        on_result : Callable
            Receives the return value of the latest call
        debounce_seconds : float
            Seconds to wait after the last submit (default: 0.3)
        """
        self.func = func
        self.on_result = on_result
        self.debounce_seconds = debounce_seconds
        self._lock = threading.Lock()
        self._pending_timer: Optional[threading.Timer] = None
        self._pending_args: Optional[Tuple[Any, ...]] = None
        self._generation = 0

    def submit(self, *args: Any) -> None:
        """Schedule a call with ``args``, replacing any pending one."""
        with self._lock:
            if self._pending_timer:
                self._pending_timer.cancel()

            self._generation += 1
            generation = self._generation
            self._pending_args = args
            self._pending_timer = threading.Timer(
                self.debounce_seconds,
                self._run,
                args=(generation, args),
            )
            self._pending_timer.daemon = True
            self._pending_timer.start()
        logger.debug("Scheduled query in %.2f seconds", self.debounce_seconds)

    def flush(self) -> None:
        """Run the pending call now instead of waiting for the timer."""
        with self._lock:
            if self._pending_timer is None or self._pending_args is None:
                return
            self._pending_timer.cancel()
            generation = self._generation
            args = self._pending_args
        self._run(generation, args)

    def submit_now(self, *args: Any) -> None:
        """Run immediately, superseding anything pending (e.g. clearing the search box)."""
        with self._lock:
            if self._pending_timer:
                self._pending_timer.cancel()
            self._generation += 1
            generation = self._generation
            self._pending_args = args
        self._run(generation, args)

    def cancel(self) -> None:
        """Drop the pending call and ignore any call still running."""
        with self._lock:
            if self._pending_timer:
                self._pending_timer.cancel()
            self._pending_timer = None
            self._pending_args = None
            self._generation += 1

    def is_pending(self) -> bool:
        with self._lock:
            return self._pending_args is not None

    def _run(self, generation: int, args: Tuple[Any, ...]) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._pending_timer = None
            self._pending_args = None

        try:
            result = self.func(*args)
        except Exception as e:
            logger.error("Error running debounced query: %s", e)
            return

        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding stale query result (generation %d)", generation)
                return
        self.on_result(result)
