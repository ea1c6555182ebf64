"""Coalescing of rapid search input.

A live search box produces one event per keystroke. SearchDebouncer holds
the latest text and hands it to the store only after a quiet window, so a
burst of keystrokes results in a single search update. Timers are scheduled
on the running asyncio event loop, which keeps the store single-writer: the
callback runs on the same thread as every other mutation.
"""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class SearchDebouncer:
    """Apply only the last search query of a burst.

    Args:
        apply: Called with the query once the quiet window has passed.
        wait_ms: Quiet window in milliseconds. 0 applies immediately.
        loop: Event loop used for timers. Defaults to the running loop at
            the time of each submit.
    """

    def __init__(
        self,
        apply: Callable[[str], None],
        wait_ms: int = 300,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        if wait_ms < 0:
            raise ValueError(f"wait_ms must be non-negative, got {wait_ms}")
        self._apply = apply
        self.wait_seconds = wait_ms / 1000
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None
        self._pending: Optional[str] = None
        self._has_pending = False
        self.applied_count = 0

    @property
    def pending(self) -> Optional[str]:
        """The query waiting for the quiet window, or None."""
        return self._pending if self._has_pending else None

    @property
    def has_pending(self) -> bool:
        return self._has_pending

    def submit(self, query: str) -> None:
        """Record new search text and restart the quiet window.

        Args:
            query: The full current text of the search box.

        Raises:
            RuntimeError: If no loop was given and none is running, unless
                the wait is 0.
        """
        loop = None
        if self.wait_seconds > 0:
            loop = self._loop or asyncio.get_running_loop()

        self._cancel_timer()
        self._pending = query
        self._has_pending = True

        if loop is None:
            self.flush()
            return

        self._handle = loop.call_later(self.wait_seconds, self._fire)

    def flush(self) -> Optional[str]:
        """Apply the pending query now.

        Returns:
            The applied query, or None if nothing was pending.
        """
        self._cancel_timer()
        if not self._has_pending:
            return None
        return self._fire()

    def cancel(self) -> None:
        """Drop the pending query without applying it."""
        self._cancel_timer()
        self._pending = None
        self._has_pending = False

    def _cancel_timer(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> Optional[str]:
        self._handle = None
        if not self._has_pending:
            return None
        query = self._pending
        self._pending = None
        self._has_pending = False
        self._apply(query)
        self.applied_count += 1
        logger.debug(f"Applied debounced search '{query}'")
        return query
