"""Breadcrumb navigation endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.dependencies import StoreDep
from api.models import NavigationResponse
from api.utils import navigation_response

router = APIRouter(
    prefix="/navigation",
    tags=["navigation"],
)


class NavigateIntoRequest(BaseModel):
    """Request to open a folder.

    Args:
        name: Folder name appended to the path.
    """

    name: str = Field(description="Folder name")


class NavigateToIndexRequest(BaseModel):
    """Request to jump to a breadcrumb segment.

    Args:
        index: Position of the segment that becomes the last one.
    """

    index: int = Field(description="Breadcrumb index")


@router.get("", response_model=NavigationResponse)
async def get_navigation(store: StoreDep):
    """Get the active section and breadcrumb path."""
    return navigation_response(store)


@router.post("/into", response_model=NavigationResponse)
async def navigate_into_folder(request: NavigateIntoRequest, store: StoreDep):
    """Open a folder, switching back to the my-drive section."""
    store.navigate_into_folder(request.name)
    return navigation_response(store)


@router.post("/up", response_model=NavigationResponse)
async def navigate_up(store: StoreDep):
    """Go to the parent folder; does nothing at the root."""
    store.navigate_up()
    return navigation_response(store)


@router.post("/index", response_model=NavigationResponse)
async def navigate_to_path_index(request: NavigateToIndexRequest, store: StoreDep):
    """Truncate the path at a breadcrumb segment."""
    store.navigate_to_path_index(request.index)
    return navigation_response(store)
