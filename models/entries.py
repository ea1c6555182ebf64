"""Folder and file entry models."""

import math
import re
from datetime import datetime
from typing import Any, Literal, Optional, get_args
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

EntryKind = Literal["folder", "file"]

FileType = Literal[
    "pdf",
    "doc",
    "excel",
    "ppt",
    "image",
    "video",
    "audio",
    "zip",
    "figma",
    "ai",
    "file",
]

ViewLabel = Literal["shared", "starred", "trash"]

FILE_TYPES: tuple[str, ...] = get_args(FileType)

EXTENSION_FILE_TYPES: dict[str, str] = {
    "pdf": "pdf",
    "doc": "doc",
    "docx": "doc",
    "xls": "excel",
    "xlsx": "excel",
    "ppt": "ppt",
    "pptx": "ppt",
    "jpg": "image",
    "jpeg": "image",
    "png": "image",
    "gif": "image",
    "mp4": "video",
    "mov": "video",
    "mp3": "audio",
    "wav": "audio",
    "zip": "zip",
    "rar": "zip",
    "fig": "figma",
    "ai": "ai",
}

SIZE_UNITS: dict[str, int] = {
    "B": 1,
    "KB": 1024,
    "MB": 1024**2,
    "GB": 1024**3,
}

DISPLAY_UNITS = ["Bytes", "KB", "MB", "GB"]

_SIZE_PATTERN = re.compile(r"^([\d.]+)\s*([KMG]?B)$", re.IGNORECASE)


def extension_of(filename: str) -> str:
    """Return the lower-cased text after the last dot of a filename.

    A name without a dot yields the whole name, which then maps to the
    generic "file" type.
    """
    return filename.rsplit(".", 1)[-1].lower()


def file_type_for(extension: str) -> str:
    """Map a file extension to its file type.

    Args:
        extension: Extension with or without a leading dot, any case.

    Returns:
        One of FILE_TYPES; unknown extensions map to "file".
    """
    return EXTENSION_FILE_TYPES.get(extension.lstrip(".").lower(), "file")


def parse_size(size: Optional[str]) -> float:
    """Parse a display size such as "2.5 MB" into a byte count.

    Units are 1024-based. Anything that does not look like
    ``<number> <unit>`` parses to 0.

    Args:
        size: Display size string.

    Returns:
        Number of bytes.
    """
    if not size:
        return 0
    match = _SIZE_PATTERN.match(size.strip())
    if not match:
        return 0
    value, unit = match.groups()
    try:
        return float(value) * SIZE_UNITS[unit.upper()]
    except ValueError:
        return 0


def format_file_size(num_bytes: int) -> str:
    """Format a byte count as a display size.

    Picks the largest unit among Bytes, KB, MB and GB whose quotient is at
    least 1 and rounds to one decimal, dropping a trailing ".0".

    Args:
        num_bytes: Size in bytes.

    Returns:
        Display string, e.g. "3.1 MB".

    Raises:
        ValueError: If num_bytes is negative.
    """
    if num_bytes < 0:
        raise ValueError(f"File size cannot be negative, got {num_bytes}")
    if num_bytes == 0:
        return "0 Bytes"
    index = min(int(math.log(num_bytes, 1024)), len(DISPLAY_UNITS) - 1)
    # log() can land just below an exact power of 1024
    if index + 1 < len(DISPLAY_UNITS) and num_bytes >= 1024 ** (index + 1):
        index += 1
    value = f"{num_bytes / 1024**index:.1f}"
    if value.endswith(".0"):
        value = value[:-2]
    return f"{value} {DISPLAY_UNITS[index]}"


def new_entry_id(kind: str) -> str:
    """Generate a fresh, never-reused entry id."""
    return f"{kind}-{uuid4()}"


class Entry(BaseModel):
    """Fields shared by folders and files.

    Args:
        id: Opaque unique identifier, stable for the entry's lifetime.
        name: Display name, non-empty after trimming.
        last_modified: When the entry was last changed.
        label: View tag set on presentation copies made by the shared,
            starred and trash views. Backing entries never carry one.
    """

    id: str = Field(description="Opaque unique identifier")
    name: str = Field(description="Display name")
    last_modified: datetime = Field(description="When the entry was last changed")
    label: Optional[ViewLabel] = Field(
        default=None, description="View tag on presentation copies"
    )

    @field_validator("id", "name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only ids and names."""
        if not v or not v.strip():
            raise ValueError("value cannot be empty")
        return v

    @field_validator("last_modified")
    @classmethod
    def validate_timezone_aware(cls, v: datetime) -> datetime:
        """Ensure timestamps are timezone-aware so they order consistently."""
        if v.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware (recommend UTC)")
        return v

    def rename(self, new_name: str, timestamp: datetime) -> None:
        """Set a new name and bump last_modified.

        Args:
            new_name: Already-validated display name.
            timestamp: Time of the rename.
        """
        self.name = new_name
        self.last_modified = timestamp

    def to_dict(self) -> dict[str, Any]:
        """Convert this entry to a JSON-ready dictionary."""
        return self.model_dump(mode="json")


class Folder(Entry):
    """A folder entry.

    Args:
        item_count: Number of children shown on the folder card.
        size: Display size string.
        color: Optional color tag for the folder icon.
    """

    kind: Literal["folder"] = Field(default="folder", frozen=True)
    item_count: int = Field(default=0, ge=0, description="Number of children")
    size: str = Field(default="0 KB", description="Display size string")
    color: Optional[str] = Field(default=None, description="Color tag")


class File(Entry):
    """A file entry.

    Args:
        file_type: Category derived from the extension at creation time.
        size: Display size string.
        uploaded: When the file was added. Never changes after creation.
    """

    kind: Literal["file"] = Field(default="file", frozen=True)
    file_type: FileType = Field(default="file", description="File category")
    size: str = Field(default="0 Bytes", description="Display size string")
    uploaded: Optional[datetime] = Field(
        default=None, description="When the file was added", frozen=True
    )

    @field_validator("uploaded")
    @classmethod
    def validate_uploaded_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is not None and v.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware (recommend UTC)")
        return v

    @property
    def sort_date(self) -> datetime:
        """Timestamp used for date ordering: uploaded, else last_modified."""
        return self.uploaded or self.last_modified
