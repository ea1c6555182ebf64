"""View parameters: sorting, filtering, view mode and navigation tags."""

from typing import Literal, get_args

from pydantic import BaseModel, Field

from models.entries import FILE_TYPES

SortField = Literal["name", "date", "size", "type"]
SortOrder = Literal["asc", "desc"]
ViewMode = Literal["grid", "list"]
ViewTag = Literal["my-drive", "recent", "shared", "starred", "trash", "settings"]

SORT_FIELDS: tuple[str, ...] = get_args(SortField)
VIEW_MODES: tuple[str, ...] = get_args(ViewMode)
VIEW_TAGS: tuple[str, ...] = get_args(ViewTag)

# "all", "folders", "files", or a specific file type
FILTER_VALUES: tuple[str, ...] = ("all", "folders", "files") + FILE_TYPES

# Breadcrumb root shown when a sidebar section is opened
VIEW_ROOTS: dict[str, str] = {
    "recent": "Recent",
    "shared": "Shared",
    "starred": "Starred",
    "trash": "Trash",
    "settings": "Settings",
}


class SortSpec(BaseModel):
    """Sort field and direction.

    Args:
        field: Which key entries are ordered by.
        order: Ascending or descending.
    """

    field: SortField = Field(default="name", description="Sort key")
    order: SortOrder = Field(default="asc", description="Sort direction")

    def toggled(self, field: str) -> "SortSpec":
        """Return the sort produced by choosing ``field`` in the sort menu.

        Choosing the current field flips the order; choosing another field
        switches to it in ascending order.
        """
        if field == self.field:
            return SortSpec(field=self.field, order="desc" if self.order == "asc" else "asc")
        return SortSpec(field=field, order="asc")

    @property
    def descending(self) -> bool:
        return self.order == "desc"
