"""Derivation of the visible folder and file lists.

Everything here is a pure function of its arguments: the store calls these
on every read and never caches the result. Returned lists are new objects;
entries in them are shared with the backing collections unless a view makes
presentation copies.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from models.content import ContentSource
from models.entries import File, Folder, parse_size
from models.view import SortSpec

DEFAULT_RECENT_LIMIT = 8

_SHARED_FOLDERS = slice(0, 2)
_SHARED_FILES = slice(0, 6)
_STARRED_FOLDERS = slice(1, 3)
_STARRED_FILES = slice(2, 6)
_TRASH_FOLDERS = slice(3, 5)
_TRASH_FILES = slice(4, 8)

TRASH_FOLDER_COLOR = "bg-gray-100"


class VisibleItems(BaseModel):
    """An ordered pair of folder and file lists.

    Used both for the raw content of the current location and for the
    final derived view.

    Args:
        folders: Folders in display order.
        files: Files in display order.
    """

    folders: list[Folder] = Field(default_factory=list)
    files: list[File] = Field(default_factory=list)

    def ids(self) -> list[str]:
        """Return folder ids followed by file ids."""
        return [folder.id for folder in self.folders] + [file.id for file in self.files]


def _labelled(entries: list, label: str, **updates: Any) -> list:
    return [entry.model_copy(update={"label": label, **updates}) for entry in entries]


def resolve_visible_raw(
    folders: list[Folder],
    files: list[File],
    view_tag: str,
    path: list[str],
    content_source: Optional[ContentSource] = None,
    recent_limit: int = DEFAULT_RECENT_LIMIT,
) -> VisibleItems:
    """Pick the pre-filter folder and file lists for the current location.

    Args:
        folders: Raw folder collection.
        files: Raw file collection.
        view_tag: Active sidebar section.
        path: Current navigation path, root first.
        content_source: Synthetic folder table for my-drive navigation.
        recent_limit: How many files the recent view shows.

    Returns:
        VisibleItems with fresh lists. Shared, starred and trash entries are
        labelled copies, so the backing collections are never touched.
    """
    if view_tag == "recent":
        recent = sorted(files, key=lambda f: f.sort_date, reverse=True)
        return VisibleItems(folders=[], files=recent[:recent_limit])

    if view_tag == "shared":
        return VisibleItems(
            folders=_labelled(folders[_SHARED_FOLDERS], "shared"),
            files=_labelled(files[_SHARED_FILES], "shared"),
        )

    if view_tag == "starred":
        return VisibleItems(
            folders=_labelled(folders[_STARRED_FOLDERS], "starred"),
            files=_labelled(files[_STARRED_FILES], "starred"),
        )

    if view_tag == "trash":
        return VisibleItems(
            folders=_labelled(folders[_TRASH_FOLDERS], "trash", color=TRASH_FOLDER_COLOR),
            files=_labelled(files[_TRASH_FILES], "trash"),
        )

    if view_tag == "settings":
        return VisibleItems()

    if content_source is not None and path:
        content = content_source.lookup(path[-1])
        if content is not None:
            return VisibleItems(folders=list(content.folders), files=list(content.files))

    return VisibleItems(folders=list(folders), files=list(files))


def matches_search(name: str, query: str) -> bool:
    """Case-insensitive substring match; an empty query matches everything."""
    if not query:
        return True
    return query.casefold() in name.casefold()


def folder_sort_key(folder: Folder, field: str) -> Any:
    """Extract the ordering key of a folder.

    Folders have no type, so a type sort orders them by name.
    """
    if field == "date":
        return folder.last_modified
    if field == "size":
        return parse_size(folder.size)
    return folder.name.casefold()


def file_sort_key(file: File, field: str) -> Any:
    """Extract the ordering key of a file."""
    if field == "date":
        return file.sort_date
    if field == "size":
        return parse_size(file.size)
    if field == "type":
        return file.file_type
    return file.name.casefold()


def derive_visible(
    raw: VisibleItems,
    search_query: str = "",
    filter_type: str = "all",
    sort: Optional[SortSpec] = None,
) -> VisibleItems:
    """Apply search, then type filter, then sort to resolved content.

    Sorting is stable in both directions: entries with equal keys keep
    their input order.

    Args:
        raw: Output of resolve_visible_raw.
        search_query: Case-insensitive name substring.
        filter_type: "all", "folders", "files" or a file type.
        sort: Sort field and direction (name ascending when omitted).

    Returns:
        The derived VisibleItems.
    """
    sort = sort or SortSpec()

    folders = [f for f in raw.folders if matches_search(f.name, search_query)]
    files = [f for f in raw.files if matches_search(f.name, search_query)]

    if filter_type not in ("all", "folders"):
        folders = []
    if filter_type == "folders":
        files = []
    elif filter_type not in ("all", "files"):
        files = [f for f in files if f.file_type == filter_type]

    folders = sorted(
        folders,
        key=lambda f: folder_sort_key(f, sort.field),
        reverse=sort.descending,
    )
    files = sorted(
        files,
        key=lambda f: file_sort_key(f, sort.field),
        reverse=sort.descending,
    )

    return VisibleItems(folders=folders, files=files)
