"""Translation of dropped or picked files into store entries.

Upload is simulated: only the name and byte size of each file are used.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from models.entries import File, format_file_size
from models.exceptions import ValidationError

if TYPE_CHECKING:
    from models.store import ViewStateStore


class DroppedFile(BaseModel):
    """A file descriptor taken from a drop event or file picker.

    Args:
        name: Original file name, including extension.
        size_bytes: File size in bytes.
    """

    name: str = Field(description="Original file name")
    size_bytes: int = Field(ge=0, description="File size in bytes")

    @property
    def display_size(self) -> str:
        return format_file_size(self.size_bytes)


def add_dropped_files(store: "ViewStateStore", dropped: list[DroppedFile]) -> list[File]:
    """Add every dropped file to the store.

    Names are checked before anything is added, so a drop containing a
    blank name adds nothing.

    Args:
        store: Target store.
        dropped: Files from one drop event.

    Returns:
        The created files, in drop order.

    Raises:
        ValidationError: If any file name is blank.
    """
    for item in dropped:
        if not item.name.strip():
            raise ValidationError("Dropped file has an empty name")

    return [store.add_file(item.name, item.display_size) for item in dropped]
