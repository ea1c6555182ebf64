"""Utility functions for API route handlers."""

from api.models import NavigationResponse, SelectionResponse
from models.store import ViewStateStore


def selection_response(store: ViewStateStore) -> SelectionResponse:
    """Build a SelectionResponse from the store's current selection."""
    return SelectionResponse(
        selected_ids=list(store.selected_ids),
        count=len(store.selected_ids),
    )


def navigation_response(store: ViewStateStore) -> NavigationResponse:
    """Build a NavigationResponse from the store's current location."""
    return NavigationResponse(
        current_view=store.current_view,
        current_path=list(store.current_path),
    )
