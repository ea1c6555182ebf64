"""View parameter endpoints.

Sort, filter, search, layout and sidebar section. Each returns the full
drive state so the UI can re-render from one response.
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.dependencies import SearchDebouncerDep, StoreDep
from api.models import DriveStateResponse

router = APIRouter(
    prefix="/view",
    tags=["view"],
)


# Request Models


class SortRequest(BaseModel):
    """Request to choose a sort field.

    Args:
        field: "name", "date", "size" or "type". Choosing the current field
            flips the order.
    """

    field: str = Field(description="Sort field")


class FilterRequest(BaseModel):
    """Request to change the type filter.

    Args:
        filter_type: "all", "folders", "files" or a file type.
    """

    filter_type: str = Field(description="Type filter")


class SearchRequest(BaseModel):
    """Request to change the search text.

    Args:
        query: Current text of the search box.
        debounce: Coalesce with other keystrokes instead of applying now.
    """

    query: str = Field(default="", description="Search text")
    debounce: bool = Field(default=False, description="Wait for the quiet window")


class ViewModeRequest(BaseModel):
    """Request to change the layout.

    Args:
        mode: "grid" or "list".
    """

    mode: str = Field(description="Layout mode")


class ViewTagRequest(BaseModel):
    """Request to open a sidebar section.

    Args:
        view: "my-drive", "recent", "shared", "starred", "trash" or "settings".
    """

    view: str = Field(description="Sidebar section")


class SearchStatusResponse(BaseModel):
    """State of the search box.

    Attributes:
        search_query: Query currently applied to the store.
        pending_query: Query waiting for the quiet window, if any.
    """

    search_query: str
    pending_query: str | None


# Route Handlers


@router.post("/sort", response_model=DriveStateResponse)
async def set_sort(request: SortRequest, store: StoreDep):
    """Choose a sort field, flipping the order if it is already active."""
    store.set_sort(request.field)
    return DriveStateResponse(**store.get_snapshot())


@router.post("/filter", response_model=DriveStateResponse)
async def set_filter(request: FilterRequest, store: StoreDep):
    """Change the type filter."""
    store.set_filter(request.filter_type)
    return DriveStateResponse(**store.get_snapshot())


@router.post("/search", response_model=SearchStatusResponse)
async def set_search(
    request: SearchRequest, store: StoreDep, debouncer: SearchDebouncerDep
):
    """Change the search text.

    With ``debounce`` the text is held until no further search input arrives
    for the configured quiet window; otherwise it is applied at once and any
    pending text is dropped.
    """
    if request.debounce:
        debouncer.submit(request.query)
    else:
        debouncer.cancel()
        store.set_search(request.query)

    return SearchStatusResponse(
        search_query=store.search_query,
        pending_query=debouncer.pending,
    )


@router.post("/search/flush", response_model=SearchStatusResponse)
async def flush_search(store: StoreDep, debouncer: SearchDebouncerDep):
    """Apply pending search text without waiting for the quiet window."""
    debouncer.flush()
    return SearchStatusResponse(
        search_query=store.search_query,
        pending_query=debouncer.pending,
    )


@router.post("/mode", response_model=DriveStateResponse)
async def set_view_mode(request: ViewModeRequest, store: StoreDep):
    """Switch between grid and list layout."""
    store.set_view_mode(request.mode)
    return DriveStateResponse(**store.get_snapshot())


@router.post("/tag", response_model=DriveStateResponse)
async def set_view(request: ViewTagRequest, store: StoreDep):
    """Open a sidebar section, resetting path and filter."""
    store.set_view(request.view)
    return DriveStateResponse(**store.get_snapshot())
