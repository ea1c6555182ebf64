"""Folder and file endpoints.

Provides creation, simulated upload, rename and delete of drive entries.
"""

from typing import Literal, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field, model_validator

from api.dependencies import StoreDep
from api.models import DeleteItemsRequest, ItemActionResponse
from models.drop import DroppedFile, add_dropped_files
from models.entries import format_file_size

router = APIRouter(
    prefix="/items",
    tags=["items"],
)


# Request Models


class CreateFolderRequest(BaseModel):
    """Request to create a folder.

    Args:
        name: Folder name; surrounding whitespace is stripped.
    """

    name: str = Field(description="Folder name")


class AddFileRequest(BaseModel):
    """Request to add a file.

    Give either a display ``size`` or a byte count ``size_bytes``.

    Args:
        name: File name.
        size: Display size, e.g. "2.4 MB".
        size_bytes: Size in bytes, formatted by the server.
        extension: Extension deciding the file type (taken from the name
            when omitted).
    """

    name: str = Field(description="File name")
    size: Optional[str] = Field(default=None, description="Display size string")
    size_bytes: Optional[int] = Field(default=None, ge=0, description="Size in bytes")
    extension: Optional[str] = Field(default=None, description="File extension")

    @model_validator(mode="after")
    def validate_single_size(self) -> "AddFileRequest":
        if self.size is not None and self.size_bytes is not None:
            raise ValueError("Provide either size or size_bytes, not both")
        return self

    @property
    def display_size(self) -> str:
        if self.size is not None:
            return self.size
        return format_file_size(self.size_bytes or 0)


class UploadFilesRequest(BaseModel):
    """Request to add the files of one drop or picker event.

    Args:
        files: Dropped file descriptors.
    """

    files: list[DroppedFile] = Field(..., min_length=1, description="Dropped files")


class RenameItemRequest(BaseModel):
    """Request to rename an entry.

    Args:
        name: New name; surrounding whitespace is stripped.
    """

    name: str = Field(description="New name")


# Response Models


class UploadFilesResponse(BaseModel):
    """Files created from an upload.

    Attributes:
        files: Created files, in drop order.
        count: Number of files created.
    """

    files: list[dict]
    count: int


class DeleteItemsResponse(BaseModel):
    """Result of a batch delete.

    Attributes:
        deleted_ids: Ids that were removed.
        skipped_ids: Requested ids that did not exist.
    """

    deleted_ids: list[str]
    skipped_ids: list[str]


# Route Handlers


@router.post("/folders", response_model=ItemActionResponse)
async def create_folder(request: CreateFolderRequest, store: StoreDep):
    """Create an empty folder.

    Returns:
        ItemActionResponse with the created folder.
    """
    folder = store.create_folder(request.name)
    return ItemActionResponse(
        action="create",
        message=f"Folder '{folder.name}' created",
        item=folder.to_dict(),
    )


@router.post("/files", response_model=ItemActionResponse)
async def add_file(request: AddFileRequest, store: StoreDep):
    """Add a file entry.

    Returns:
        ItemActionResponse with the created file.
    """
    file = store.add_file(request.name, request.display_size, request.extension)
    return ItemActionResponse(
        action="create",
        message=f"File '{file.name}' added",
        item=file.to_dict(),
    )


@router.post("/upload", response_model=UploadFilesResponse)
async def upload_files(request: UploadFilesRequest, store: StoreDep):
    """Add the files of a drop event or file picker.

    Only names and byte sizes are used; no content is transferred.

    Returns:
        UploadFilesResponse with the created files.
    """
    created = add_dropped_files(store, request.files)
    return UploadFilesResponse(
        files=[file.to_dict() for file in created],
        count=len(created),
    )


@router.patch("/{kind}/{item_id}", response_model=ItemActionResponse)
async def rename_item(
    kind: Literal["folder", "file"],
    item_id: str,
    request: RenameItemRequest,
    store: StoreDep,
):
    """Rename a folder or file.

    Returns:
        ItemActionResponse with the renamed entry.
    """
    entry = store.rename_item(item_id, request.name, kind)
    return ItemActionResponse(
        action="rename",
        message=f"Renamed {kind} to '{entry.name}'",
        item=entry.to_dict(),
    )


@router.delete("/{kind}/{item_id}", response_model=ItemActionResponse)
async def delete_item(kind: Literal["folder", "file"], item_id: str, store: StoreDep):
    """Delete a folder or file and drop it from the selection.

    Returns:
        ItemActionResponse with the deleted entry.
    """
    entry = store.delete_item(item_id, kind)
    return ItemActionResponse(
        action="delete",
        message=f"Deleted {kind} '{entry.name}'",
        item=entry.to_dict(),
    )


@router.post("/delete", response_model=DeleteItemsResponse)
async def delete_items(request: DeleteItemsRequest, store: StoreDep):
    """Delete several entries; unknown ids are skipped.

    Returns:
        DeleteItemsResponse with deleted and skipped ids.
    """
    deleted, skipped = store.delete_items(request.item_ids)
    return DeleteItemsResponse(deleted_ids=deleted, skipped_ids=skipped)
