"""Shared request and response models for API endpoints.

This module contains models used by more than one route module.
"""

from typing import Any

from pydantic import BaseModel, Field


class DriveStateResponse(BaseModel):
    """Derived view and view parameters of the session.

    Attributes:
        current_view: Active sidebar section.
        current_path: Breadcrumb segments, root first.
        view_mode: "grid" or "list".
        sort: Sort field and order.
        filter_type: Active type filter.
        search_query: Active search text.
        folders: Visible folders, in display order.
        files: Visible files, in display order.
        selected_ids: Selected entry ids.
        total_folders: Size of the raw folder collection.
        total_files: Size of the raw file collection.
        last_updated: ISO timestamp of the last mutation.
        update_count: Number of mutations applied.
    """

    current_view: str
    current_path: list[str]
    view_mode: str
    sort: dict[str, str]
    filter_type: str
    search_query: str
    folders: list[dict[str, Any]]
    files: list[dict[str, Any]]
    selected_ids: list[str]
    total_folders: int
    total_files: int
    last_updated: str
    update_count: int


class ItemActionResponse(BaseModel):
    """Result of an action on a single entry (create, rename, delete).

    Attributes:
        action: What was done.
        message: Human-readable description of the result.
        item: The affected entry after the action.
    """

    action: str
    message: str
    item: dict[str, Any]


class SelectionResponse(BaseModel):
    """Current selection.

    Attributes:
        selected_ids: Selected entry ids, in selection order.
        count: Number of selected ids.
    """

    selected_ids: list[str]
    count: int


class NavigationResponse(BaseModel):
    """Current location.

    Attributes:
        current_view: Active sidebar section.
        current_path: Breadcrumb segments, root first.
    """

    current_view: str
    current_path: list[str]


class DeleteItemsRequest(BaseModel):
    """Request model for deleting several entries at once.

    Attributes:
        item_ids: Ids to delete; unknown ids are skipped.
    """

    item_ids: list[str] = Field(..., min_length=1, description="IDs of items to delete")


class ErrorResponse(BaseModel):
    """Standard error response model.

    Attributes:
        error: Error type.
        detail: Human-readable error message.
    """

    error: str
    detail: str
