"""Whole-session endpoints.

These endpoints return the derived view of the drive and reset or clear the
session's store.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from api.dependencies import SessionDep, StoreDep
from api.models import DriveStateResponse

router = APIRouter(
    prefix="/drive",
    tags=["drive"],
)


class DriveValidationResponse(BaseModel):
    """Result of a store consistency check.

    Attributes:
        valid: True if no issues were found.
        issues: Descriptions of each inconsistency.
        summary: Brief description of the store.
    """

    valid: bool
    issues: list[str]
    summary: str


@router.get("/state", response_model=DriveStateResponse)
async def get_drive_state(store: StoreDep):
    """Get the visible folders and files plus all view parameters.

    The visible lists are recomputed from the raw collections on every call.

    Returns:
        DriveStateResponse with the current snapshot.
    """
    return DriveStateResponse(**store.get_snapshot())


@router.post("/reset", response_model=DriveStateResponse)
async def reset_drive(session: SessionDep):
    """Rebuild the store from the configured seed dataset.

    Returns:
        DriveStateResponse of the fresh store.
    """
    store = session.reset()
    return DriveStateResponse(**store.get_snapshot())


@router.post("/clear", response_model=DriveStateResponse)
async def clear_drive(session: SessionDep):
    """Remove every folder and file and reset view parameters.

    Returns:
        DriveStateResponse of the emptied store.
    """
    session.search.cancel()
    session.store.clear()
    return DriveStateResponse(**session.store.get_snapshot())


@router.get("/validate", response_model=DriveValidationResponse)
async def validate_drive(store: StoreDep):
    """Check the store for internal inconsistencies.

    Returns:
        DriveValidationResponse listing any issues.
    """
    issues = store.validate_state()
    return DriveValidationResponse(
        valid=not issues,
        issues=issues,
        summary=store.summary,
    )
