"""CloudDrive data models package.

This package contains the view-state engine of the drive UI: entry models,
view parameters, the pure derivation functions, the store that owns all
session state, and the collaborators wired to it (seed data, search
debouncing, dropped-file translation).
"""

from models.content import ContentSource, FolderContent
from models.debounce import SearchDebouncer
from models.derivation import VisibleItems, derive_visible, resolve_visible_raw
from models.drop import DroppedFile, add_dropped_files
from models.entries import File, Folder, file_type_for, format_file_size, parse_size
from models.exceptions import DriveError, NotFoundError, ValidationError
from models.seed import DriveSeed, demo_seed, empty_seed, load_seed
from models.session import DriveSession
from models.settings import DriveSettings
from models.store import ViewStateStore
from models.view import SortSpec

__all__ = [
    "ContentSource",
    "FolderContent",
    "SearchDebouncer",
    "VisibleItems",
    "derive_visible",
    "resolve_visible_raw",
    "DroppedFile",
    "add_dropped_files",
    "File",
    "Folder",
    "file_type_for",
    "format_file_size",
    "parse_size",
    "DriveError",
    "NotFoundError",
    "ValidationError",
    "DriveSeed",
    "demo_seed",
    "empty_seed",
    "load_seed",
    "DriveSession",
    "DriveSettings",
    "ViewStateStore",
    "SortSpec",
]
