"""Seed datasets the store is initialized from.

Each call builds new model instances, so stores never share entries.
"""

from typing import Any

from pydantic import BaseModel, Field

from models.content import ContentSource, FolderContent
from models.entries import File, Folder


class DriveSeed(BaseModel):
    """Initial contents of a drive session.

    Args:
        folders: Raw folder collection.
        files: Raw file collection.
        content: Synthetic folder table used while navigating.
    """

    folders: list[Folder] = Field(default_factory=list)
    files: list[File] = Field(default_factory=list)
    content: ContentSource = Field(default_factory=ContentSource)


_DEMO_FOLDERS: list[dict[str, Any]] = [
    {"id": "folder-1", "name": "Projects", "last_modified": "2024-02-08T10:30:00Z", "size": "2.4 GB", "item_count": 24, "color": "bg-blue-100"},
    {"id": "folder-2", "name": "Design Assets", "last_modified": "2024-02-07T15:20:00Z", "size": "1.8 GB", "item_count": 156, "color": "bg-purple-100"},
    {"id": "folder-3", "name": "Documents", "last_modified": "2024-02-06T09:15:00Z", "size": "456 MB", "item_count": 42, "color": "bg-green-100"},
    {"id": "folder-4", "name": "Marketing", "last_modified": "2024-02-05T14:45:00Z", "size": "892 MB", "item_count": 67, "color": "bg-yellow-100"},
    {"id": "folder-5", "name": "Personal", "last_modified": "2024-02-04T11:20:00Z", "size": "234 MB", "item_count": 18, "color": "bg-pink-100"},
    {"id": "folder-6", "name": "Archives", "last_modified": "2024-01-28T16:00:00Z", "size": "5.2 GB", "item_count": 312, "color": "bg-gray-100"},
]

_DEMO_FILES: list[dict[str, Any]] = [
    {"id": "file-1", "name": "Q4 Report.pdf", "file_type": "pdf", "size": "2.4 MB", "uploaded": "2024-02-08T09:30:00Z", "last_modified": "2024-02-08T09:30:00Z"},
    {"id": "file-2", "name": "Brand Guidelines.fig", "file_type": "figma", "size": "18.6 MB", "uploaded": "2024-02-07T14:15:00Z", "last_modified": "2024-02-07T16:40:00Z"},
    {"id": "file-3", "name": "Budget 2024.xlsx", "file_type": "excel", "size": "856 KB", "uploaded": "2024-02-07T10:05:00Z", "last_modified": "2024-02-07T10:05:00Z"},
    {"id": "file-4", "name": "Team Photo.jpg", "file_type": "image", "size": "4.2 MB", "uploaded": "2024-02-06T17:45:00Z", "last_modified": "2024-02-06T17:45:00Z"},
    {"id": "file-5", "name": "Product Demo.mp4", "file_type": "video", "size": "124.5 MB", "uploaded": "2024-02-06T11:00:00Z", "last_modified": "2024-02-06T11:00:00Z"},
    {"id": "file-6", "name": "Meeting Notes.docx", "file_type": "doc", "size": "45 KB", "uploaded": "2024-02-05T15:30:00Z", "last_modified": "2024-02-05T15:30:00Z"},
    {"id": "file-7", "name": "Pitch Deck.pptx", "file_type": "ppt", "size": "12.3 MB", "uploaded": "2024-02-05T09:10:00Z", "last_modified": "2024-02-05T09:10:00Z"},
    {"id": "file-8", "name": "Podcast Episode.mp3", "file_type": "audio", "size": "38.7 MB", "uploaded": "2024-02-04T13:25:00Z", "last_modified": "2024-02-04T13:25:00Z"},
    {"id": "file-9", "name": "Source Files.zip", "file_type": "zip", "size": "256 MB", "uploaded": "2024-02-03T08:50:00Z", "last_modified": "2024-02-03T08:50:00Z"},
    {"id": "file-10", "name": "Logo Concepts.ai", "file_type": "ai", "size": "9.8 MB", "uploaded": "2024-02-02T12:00:00Z", "last_modified": "2024-02-02T12:00:00Z"},
]

_DEMO_CONTENT: dict[str, dict[str, list[dict[str, Any]]]] = {
    "Projects": {
        "folders": [
            {"id": "subfolder-1", "name": "Frontend", "last_modified": "2024-02-08T10:30:00Z", "size": "1.2 GB", "item_count": 8, "color": "bg-blue-100"},
            {"id": "subfolder-2", "name": "Backend", "last_modified": "2024-02-07T14:20:00Z", "size": "856 MB", "item_count": 12, "color": "bg-green-100"},
            {"id": "subfolder-3", "name": "Documentation", "last_modified": "2024-02-06T09:15:00Z", "size": "324 MB", "item_count": 5, "color": "bg-purple-100"},
        ],
        "files": [
            {"id": "project-file-1", "name": "Project Plan.pdf", "file_type": "pdf", "size": "3.2 MB", "uploaded": "2024-02-08T09:45:00Z", "last_modified": "2024-02-08T09:45:00Z"},
            {"id": "project-file-2", "name": "Requirements.docx", "file_type": "doc", "size": "1.8 MB", "uploaded": "2024-02-07T11:20:00Z", "last_modified": "2024-02-07T11:20:00Z"},
            {"id": "project-file-3", "name": "Architecture Diagram.png", "file_type": "image", "size": "5.6 MB", "uploaded": "2024-02-06T15:45:00Z", "last_modified": "2024-02-06T15:45:00Z"},
        ],
    },
    "Design Assets": {
        "folders": [
            {"id": "design-subfolder-1", "name": "Icons", "last_modified": "2024-02-07T10:30:00Z", "size": "456 MB", "item_count": 24, "color": "bg-yellow-100"},
            {"id": "design-subfolder-2", "name": "UI Components", "last_modified": "2024-02-06T14:20:00Z", "size": "789 MB", "item_count": 18, "color": "bg-pink-100"},
        ],
        "files": [
            {"id": "design-file-1", "name": "Logo Pack.zip", "file_type": "zip", "size": "45.2 MB", "uploaded": "2024-02-07T16:15:00Z", "last_modified": "2024-02-07T16:15:00Z"},
            {"id": "design-file-2", "name": "Color Palette.sketch", "file_type": "figma", "size": "12.8 MB", "uploaded": "2024-02-06T10:30:00Z", "last_modified": "2024-02-06T10:30:00Z"},
            {"id": "design-file-3", "name": "Typography Guide.pdf", "file_type": "pdf", "size": "8.4 MB", "uploaded": "2024-02-05T14:45:00Z", "last_modified": "2024-02-05T14:45:00Z"},
            {"id": "design-file-4", "name": "Mockups.fig", "file_type": "figma", "size": "32.1 MB", "uploaded": "2024-02-04T11:20:00Z", "last_modified": "2024-02-04T11:20:00Z"},
        ],
    },
    "Documents": {
        "folders": [
            {"id": "docs-subfolder-1", "name": "Contracts", "last_modified": "2024-02-06T10:30:00Z", "size": "156 MB", "item_count": 8, "color": "bg-red-100"},
            {"id": "docs-subfolder-2", "name": "Reports", "last_modified": "2024-02-05T14:20:00Z", "size": "289 MB", "item_count": 12, "color": "bg-blue-100"},
        ],
        "files": [
            {"id": "doc-file-1", "name": "Annual Report 2023.pdf", "file_type": "pdf", "size": "15.2 MB", "uploaded": "2024-02-06T09:45:00Z", "last_modified": "2024-02-06T09:45:00Z"},
            {"id": "doc-file-2", "name": "Employee Handbook.docx", "file_type": "doc", "size": "8.7 MB", "uploaded": "2024-02-05T11:20:00Z", "last_modified": "2024-02-05T11:20:00Z"},
            {"id": "doc-file-3", "name": "Financial Statements.xlsx", "file_type": "excel", "size": "6.3 MB", "uploaded": "2024-02-04T16:15:00Z", "last_modified": "2024-02-04T16:15:00Z"},
            {"id": "doc-file-4", "name": "Meeting Minutes.pptx", "file_type": "ppt", "size": "12.8 MB", "uploaded": "2024-02-03T10:30:00Z", "last_modified": "2024-02-03T10:30:00Z"},
        ],
    },
}


def demo_seed() -> DriveSeed:
    """Build the demo drive: six folders, ten files and three synthetic folders."""
    return DriveSeed(
        folders=[Folder(**data) for data in _DEMO_FOLDERS],
        files=[File(**data) for data in _DEMO_FILES],
        content=ContentSource(
            entries={
                name: FolderContent(
                    folders=[Folder(**data) for data in tables["folders"]],
                    files=[File(**data) for data in tables["files"]],
                )
                for name, tables in _DEMO_CONTENT.items()
            }
        ),
    )


def empty_seed() -> DriveSeed:
    """Build a drive with no entries and no synthetic folders."""
    return DriveSeed()


SEEDS = {
    "demo": demo_seed,
    "empty": empty_seed,
}


def load_seed(name: str) -> DriveSeed:
    """Build the named seed dataset.

    Args:
        name: Key of SEEDS ("demo" or "empty").

    Raises:
        ValueError: If the seed name is unknown.
    """
    try:
        factory = SEEDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown seed '{name}'. Available seeds: {', '.join(sorted(SEEDS))}"
        ) from None
    return factory()
