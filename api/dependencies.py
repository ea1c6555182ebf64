"""Dependency injection providers for the FastAPI application.

This module defines dependencies that can be injected into route handlers,
providing access to the drive session and its store.
"""

from typing import Annotated, Optional

from fastapi import Depends

from models.debounce import SearchDebouncer
from models.session import DriveSession
from models.settings import DriveSettings
from models.store import ViewStateStore


# One UI session per process, created at startup and dropped at shutdown.
# Tests replace it through app.dependency_overrides[get_session].
_session: Optional[DriveSession] = None


def get_session() -> DriveSession:
    """Get the shared DriveSession instance.

    Returns:
        The shared DriveSession instance.

    Raises:
        RuntimeError: If the session hasn't been initialized yet.

    Example:
        @router.get("/some-endpoint")
        async def my_handler(session: SessionDep):
            return session.store.get_snapshot()
    """
    if _session is None:
        raise RuntimeError(
            "DriveSession not initialized. Call initialize_session() first."
        )

    return _session


def initialize_session(settings: Optional[DriveSettings] = None) -> DriveSession:
    """Initialize the shared DriveSession instance.

    This should be called once when the FastAPI app starts up.

    Args:
        settings: Session settings (read from the environment when omitted).

    Returns:
        The newly created DriveSession instance.
    """
    global _session

    _session = DriveSession(settings=settings)

    return _session


def shutdown_session() -> None:
    """Tear down the DriveSession when the FastAPI app shuts down."""
    global _session

    if _session is not None:
        _session.close()

    _session = None


SessionDep = Annotated[DriveSession, Depends(get_session)]


def get_store(session: SessionDep) -> ViewStateStore:
    """Get the view-state store of the current session."""
    return session.store


def get_search_debouncer(session: SessionDep) -> SearchDebouncer:
    """Get the search debouncer of the current session."""
    return session.search


# Type aliases for dependency injection
StoreDep = Annotated[ViewStateStore, Depends(get_store)]
SearchDebouncerDep = Annotated[SearchDebouncer, Depends(get_search_debouncer)]
