"""View-state store for a drive session.

The store owns every piece of mutable UI state: the raw folder and file
collections, the selection, the navigation path and the sort, filter and
search settings. Visible lists are recomputed from that state on every
read; see models/derivation.py.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from models.content import ContentSource
from models.derivation import (
    DEFAULT_RECENT_LIMIT,
    VisibleItems,
    derive_visible,
    resolve_visible_raw,
)
from models.entries import File, Folder, file_type_for, extension_of, new_entry_id
from models.exceptions import NotFoundError, ValidationError
from models.seed import DriveSeed
from models.settings import DriveSettings
from models.view import (
    FILTER_VALUES,
    SORT_FIELDS,
    VIEW_MODES,
    VIEW_ROOTS,
    VIEW_TAGS,
    SortSpec,
    ViewMode,
    ViewTag,
)

logger = logging.getLogger(__name__)

ENTRY_KINDS = ("folder", "file")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _clean_name(name: str, what: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError(f"{what} name cannot be empty")
    return cleaned


class ViewStateStore(BaseModel):
    """All view state of one drive session.

    Mutations are synchronous and validate their arguments before touching
    any field, so a rejected call leaves the store exactly as it was.

    Args:
        folders: Raw folder collection.
        files: Raw file collection.
        selected_ids: Selected entry ids, in selection order.
        view_mode: Grid or list layout.
        current_path: Breadcrumb segments, root first. Never empty.
        current_view: Active sidebar section.
        sort: Sort field and direction.
        filter_type: "all", "folders", "files" or a file type.
        search_query: Case-insensitive name filter.
        content_source: Synthetic folder table used while navigating.
        root_label: Breadcrumb root of the my-drive section.
        recent_limit: Number of files the recent view shows.
        last_updated: When state was last modified.
        update_count: Number of mutations applied.

    Example:
        >>> store = ViewStateStore.from_seed(demo_seed())
        >>> store.set_search("report")
        >>> [f.name for f in store.visible_files]
    """

    folders: list[Folder] = Field(default_factory=list)
    files: list[File] = Field(default_factory=list)
    selected_ids: list[str] = Field(default_factory=list)
    view_mode: ViewMode = "grid"
    current_path: list[str] = Field(default_factory=lambda: ["Drive"])
    current_view: ViewTag = "my-drive"
    sort: SortSpec = Field(default_factory=SortSpec)
    filter_type: str = "all"
    search_query: str = ""
    content_source: ContentSource = Field(default_factory=ContentSource)
    root_label: str = "Drive"
    recent_limit: int = Field(default=DEFAULT_RECENT_LIMIT, ge=0)
    last_updated: datetime = Field(default_factory=_utc_now)
    update_count: int = 0

    _clock: Optional[Callable[[], datetime]] = PrivateAttr(default=None)

    @model_validator(mode="after")
    def validate_view_parameters(self) -> "ViewStateStore":
        """Reject an empty path or an unknown filter at construction."""
        if not self.current_path:
            raise ValueError("current_path must contain at least one segment")
        if self.filter_type not in FILTER_VALUES:
            raise ValueError(f"Unknown filter '{self.filter_type}'")
        return self

    @classmethod
    def from_seed(
        cls,
        seed: DriveSeed,
        settings: Optional[DriveSettings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> "ViewStateStore":
        """Build a store from a seed dataset.

        Args:
            seed: Initial folders, files and synthetic folder content. The
                store works on a deep copy, so the seed is never modified.
            settings: Session settings (defaults when omitted).
            clock: Source of "now" for timestamps, for deterministic tests.

        Returns:
            A new store positioned at the my-drive root.
        """
        settings = settings or DriveSettings()
        seed = seed.model_copy(deep=True)
        store = cls(
            folders=seed.folders,
            files=seed.files,
            content_source=seed.content,
            current_path=[settings.root_label],
            root_label=settings.root_label,
            recent_limit=settings.recent_limit,
            last_updated=(clock or _utc_now)(),
        )
        store._clock = clock
        return store

    def _now(self) -> datetime:
        return (self._clock or _utc_now)()

    def _touch(self) -> datetime:
        now = self._now()
        self.last_updated = now
        self.update_count += 1
        return now

    # ===== Derived views =====

    def resolve_raw(self) -> VisibleItems:
        """Return the pre-filter content of the current location."""
        return resolve_visible_raw(
            self.folders,
            self.files,
            self.current_view,
            self.current_path,
            self.content_source,
            self.recent_limit,
        )

    def visible(self) -> VisibleItems:
        """Return the searched, filtered and sorted content of the current location."""
        return derive_visible(
            self.resolve_raw(),
            search_query=self.search_query,
            filter_type=self.filter_type,
            sort=self.sort,
        )

    @property
    def visible_folders(self) -> list[Folder]:
        return self.visible().folders

    @property
    def visible_files(self) -> list[File]:
        return self.visible().files

    def find_item(self, item_id: str) -> Optional[Union[Folder, File]]:
        """Look an id up in the folders, then the files."""
        for folder in self.folders:
            if folder.id == item_id:
                return folder
        for file in self.files:
            if file.id == item_id:
                return file
        return None

    def _collection(self, kind: str) -> list:
        if kind not in ENTRY_KINDS:
            raise ValidationError(f"Unknown item kind '{kind}', expected 'folder' or 'file'")
        return self.folders if kind == "folder" else self.files

    def _index_of(self, item_id: str, kind: str) -> int:
        collection = self._collection(kind)
        for index, entry in enumerate(collection):
            if entry.id == item_id:
                return index
        raise NotFoundError(item_id, kind)

    # ===== Entry mutations =====

    def create_folder(self, name: str) -> Folder:
        """Append a new empty folder.

        Args:
            name: Folder name; surrounding whitespace is stripped.

        Returns:
            The created folder.

        Raises:
            ValidationError: If the name is blank.
        """
        cleaned = _clean_name(name, "Folder")
        now = self._touch()
        folder = Folder(
            id=new_entry_id("folder"),
            name=cleaned,
            last_modified=now,
            item_count=0,
            size="0 KB",
        )
        self.folders.append(folder)
        logger.info(f"Created folder {folder.id} '{folder.name}'")
        return folder

    def add_file(self, name: str, size: str, extension: Optional[str] = None) -> File:
        """Append a new file.

        Args:
            name: File name; surrounding whitespace is stripped.
            size: Display size string, see entries.format_file_size.
            extension: Extension deciding the file type. Taken from the name
                when omitted.

        Returns:
            The created file.

        Raises:
            ValidationError: If the name is blank.
        """
        cleaned = _clean_name(name, "File")
        file_type = file_type_for(extension if extension is not None else extension_of(cleaned))
        now = self._touch()
        file = File(
            id=new_entry_id("file"),
            name=cleaned,
            file_type=file_type,
            size=size,
            uploaded=now,
            last_modified=now,
        )
        self.files.append(file)
        logger.info(f"Added file {file.id} '{file.name}' ({file.file_type}, {file.size})")
        return file

    def rename_item(self, item_id: str, new_name: str, kind: str) -> Union[Folder, File]:
        """Rename a folder or file.

        Args:
            item_id: Id of the entry.
            new_name: New name; surrounding whitespace is stripped.
            kind: "folder" or "file", selecting the collection searched.

        Returns:
            The renamed entry.

        Raises:
            NotFoundError: If the id is not in the ``kind`` collection.
            ValidationError: If the new name is blank or kind is unknown.
        """
        index = self._index_of(item_id, kind)
        cleaned = _clean_name(new_name, kind.capitalize())
        entry = self._collection(kind)[index]
        entry.rename(cleaned, self._touch())
        logger.info(f"Renamed {kind} {item_id} to '{cleaned}'")
        return entry

    def delete_item(self, item_id: str, kind: str) -> Union[Folder, File]:
        """Remove a folder or file and drop it from the selection.

        Raises:
            NotFoundError: If the id is not in the ``kind`` collection.
            ValidationError: If kind is unknown.
        """
        index = self._index_of(item_id, kind)
        entry = self._collection(kind).pop(index)
        if item_id in self.selected_ids:
            self.selected_ids = [i for i in self.selected_ids if i != item_id]
        self._touch()
        logger.info(f"Deleted {kind} {item_id} '{entry.name}'")
        return entry

    def delete_items(self, item_ids: list[str]) -> tuple[list[str], list[str]]:
        """Delete several entries, skipping ids that do not exist.

        Each id is looked up in the folders first, then the files. An id
        repeated in the request is skipped once its entry is gone.

        Args:
            item_ids: Ids to delete.

        Returns:
            Tuple of (deleted ids, skipped ids), each in request order.
        """
        deleted = []
        skipped = []
        for item_id in item_ids:
            entry = self.find_item(item_id)
            if entry is None:
                logger.warning(f"Batch delete skipped unknown id {item_id}")
                skipped.append(item_id)
                continue
            self.delete_item(item_id, entry.kind)
            deleted.append(item_id)
        return deleted, skipped

    # ===== Selection =====

    def toggle_selection(self, item_id: str) -> None:
        """Add the id to the selection, or remove it if already selected."""
        if item_id in self.selected_ids:
            self.selected_ids = [i for i in self.selected_ids if i != item_id]
        else:
            self.selected_ids = self.selected_ids + [item_id]
        self._touch()

    def select_all(self) -> list[str]:
        """Select exactly the currently visible folders and files.

        Returns:
            The new selection.
        """
        self.selected_ids = self.visible().ids()
        self._touch()
        return list(self.selected_ids)

    def clear_selection(self) -> None:
        self.selected_ids = []
        self._touch()

    # ===== Sort, filter, search, layout =====

    def set_sort(self, field: str) -> SortSpec:
        """Choose a sort field; choosing the current one flips the order.

        Raises:
            ValidationError: If the field is unknown.
        """
        if field not in SORT_FIELDS:
            raise ValidationError(
                f"Unknown sort field '{field}', expected one of {', '.join(SORT_FIELDS)}"
            )
        self.sort = self.sort.toggled(field)
        self._touch()
        logger.debug(f"Sort set to {self.sort.field} {self.sort.order}")
        return self.sort

    def set_filter(self, filter_type: str) -> None:
        """Show all entries, only folders, only files, or one file type.

        Raises:
            ValidationError: If the filter is unknown.
        """
        if filter_type not in FILTER_VALUES:
            raise ValidationError(f"Unknown filter '{filter_type}'")
        self.filter_type = filter_type
        self._touch()
        logger.debug(f"Filter set to {filter_type}")

    def set_search(self, query: str) -> None:
        self.search_query = query or ""
        self._touch()
        logger.debug(f"Search query set to '{self.search_query}'")

    def set_view_mode(self, mode: str) -> None:
        """Switch between grid and list layout.

        Raises:
            ValidationError: If the mode is unknown.
        """
        if mode not in VIEW_MODES:
            raise ValidationError(f"Unknown view mode '{mode}', expected 'grid' or 'list'")
        self.view_mode = mode
        self._touch()

    # ===== Navigation =====

    def set_view(self, view_tag: str) -> None:
        """Open a sidebar section.

        Resets the path to the section's root and the filter to "all".

        Raises:
            ValidationError: If the section is unknown.
        """
        if view_tag not in VIEW_TAGS:
            raise ValidationError(f"Unknown view '{view_tag}'")
        self.current_view = view_tag
        self.current_path = [VIEW_ROOTS.get(view_tag, self.root_label)]
        self.filter_type = "all"
        self._touch()
        logger.debug(f"Switched to view {view_tag}")

    def navigate_into_folder(self, name: str) -> None:
        """Open a folder by name, returning to the my-drive section.

        Surrounding whitespace is stripped from the name before it is appended.

        Raises:
            ValidationError: If the name is blank.
        """
        cleaned = _clean_name(name, "Folder")
        self.current_view = "my-drive"
        self.current_path = self.current_path + [cleaned]
        self._touch()
        logger.debug(f"Navigated into {'/'.join(self.current_path)}")

    def navigate_up(self) -> None:
        """Leave the current folder; does nothing at the root."""
        if len(self.current_path) > 1:
            self.current_path = self.current_path[:-1]
            self._touch()

    def navigate_to_path_index(self, index: int) -> None:
        """Truncate the path so that segment ``index`` is the last one.

        An index past the end leaves the path unchanged.

        Raises:
            ValidationError: If index is negative.
        """
        if index < 0:
            raise ValidationError(f"Path index must be non-negative, got {index}")
        if index + 1 < len(self.current_path):
            self.current_path = self.current_path[: index + 1]
            self._touch()

    # ===== Whole-state operations =====

    def get_snapshot(self) -> dict[str, Any]:
        """Return the derived view and all view parameters for API responses.

        Returns:
            JSON-serializable dictionary.
        """
        visible = self.visible()
        return {
            "current_view": self.current_view,
            "current_path": list(self.current_path),
            "view_mode": self.view_mode,
            "sort": self.sort.model_dump(),
            "filter_type": self.filter_type,
            "search_query": self.search_query,
            "folders": [folder.to_dict() for folder in visible.folders],
            "files": [file.to_dict() for file in visible.files],
            "selected_ids": list(self.selected_ids),
            "total_folders": len(self.folders),
            "total_files": len(self.files),
            "last_updated": self.last_updated.isoformat(),
            "update_count": self.update_count,
        }

    def validate_state(self) -> list[str]:
        """Check internal consistency and return any issues.

        Checks for:
        - Ids shared by two entries across folders and files
        - Duplicate ids in the selection
        - An empty navigation path

        Returns:
            List of issue descriptions (empty if consistent).
        """
        issues = []

        seen: set[str] = set()
        for entry in [*self.folders, *self.files]:
            if entry.id in seen:
                issues.append(f"Duplicate entry id '{entry.id}'")
            seen.add(entry.id)

        if len(set(self.selected_ids)) != len(self.selected_ids):
            issues.append("Selection contains duplicate ids")

        if not self.current_path:
            issues.append("Navigation path is empty")

        return issues

    def clear(self) -> None:
        """Remove every entry and reset view state to its defaults.

        The synthetic folder table is kept.
        """
        self.folders = []
        self.files = []
        self.selected_ids = []
        self.view_mode = "grid"
        self.current_path = [self.root_label]
        self.current_view = "my-drive"
        self.sort = SortSpec()
        self.filter_type = "all"
        self.search_query = ""
        self.last_updated = self._now()
        self.update_count = 0
        logger.info("Drive state cleared")

    @property
    def summary(self) -> str:
        """Brief human-readable description of the store."""
        visible = self.visible()
        return (
            f"{len(self.folders)} folders, {len(self.files)} files; "
            f"showing {len(visible.folders) + len(visible.files)} in "
            f"{'/'.join(self.current_path)}; {len(self.selected_ids)} selected"
        )
