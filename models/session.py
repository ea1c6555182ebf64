"""A drive UI session: the store plus the collaborators wired to it."""

import asyncio
import logging
from datetime import datetime
from typing import Callable, Optional

from models.debounce import SearchDebouncer
from models.seed import DriveSeed, load_seed
from models.settings import DriveSettings
from models.store import ViewStateStore

logger = logging.getLogger(__name__)


class DriveSession:
    """Owns the store of one UI session and its search debouncer.

    The session is created from settings and torn down at the end; nothing
    outlives it.

    Attributes:
        settings: Session configuration.
        store: The view-state store.
        search: Debouncer feeding typed search text into the store. Its
            timers run on an asyncio event loop: either the loop given at
            construction, or the loop running when ``search.submit`` is
            called. Without either, a non-zero debounce window raises
            RuntimeError; use ``store.set_search`` for immediate updates.
    """

    def __init__(
        self,
        settings: Optional[DriveSettings] = None,
        seed: Optional[DriveSeed] = None,
        clock: Optional[Callable[[], datetime]] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        """Initialize the session.

        Args:
            settings: Session settings (read from the environment when omitted).
            seed: Initial dataset. Built from ``settings.seed`` when omitted.
            clock: Source of "now" for store timestamps.
            loop: Event loop for search debounce timers.
        """
        self.settings = settings or DriveSettings()
        self._clock = clock
        self.store = ViewStateStore.from_seed(
            seed if seed is not None else load_seed(self.settings.seed),
            settings=self.settings,
            clock=clock,
        )
        self.search = SearchDebouncer(
            self._apply_search, wait_ms=self.settings.search_debounce_ms, loop=loop
        )

    def _apply_search(self, query: str) -> None:
        self.store.set_search(query)

    def reset(self, seed: Optional[DriveSeed] = None) -> ViewStateStore:
        """Replace the store with a fresh one built from the seed.

        Any pending search text is dropped.

        Returns:
            The new store.
        """
        self.search.cancel()
        self.store = ViewStateStore.from_seed(
            seed if seed is not None else load_seed(self.settings.seed),
            settings=self.settings,
            clock=self._clock,
        )
        logger.info(f"Drive session reset from '{self.settings.seed}' seed")
        return self.store

    def close(self) -> None:
        """Cancel pending work at session end."""
        self.search.cancel()
