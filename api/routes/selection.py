"""Selection endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.dependencies import StoreDep
from api.models import SelectionResponse
from api.utils import selection_response

router = APIRouter(
    prefix="/selection",
    tags=["selection"],
)


class ToggleSelectionRequest(BaseModel):
    """Request to toggle one id in the selection.

    Args:
        item_id: Id to add or remove. It does not have to exist.
    """

    item_id: str = Field(description="Id to toggle")


@router.get("", response_model=SelectionResponse)
async def get_selection(store: StoreDep):
    """Get the selected ids."""
    return selection_response(store)


@router.post("/toggle", response_model=SelectionResponse)
async def toggle_selection(request: ToggleSelectionRequest, store: StoreDep):
    """Select an id, or deselect it if it is already selected."""
    store.toggle_selection(request.item_id)
    return selection_response(store)


@router.post("/all", response_model=SelectionResponse)
async def select_all(store: StoreDep):
    """Select exactly the folders and files currently visible.

    Entries hidden by search or filter are not selected.
    """
    store.select_all()
    return selection_response(store)


@router.post("/clear", response_model=SelectionResponse)
async def clear_selection(store: StoreDep):
    """Deselect everything."""
    store.clear_selection()
    return selection_response(store)
