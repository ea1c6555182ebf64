"""Pluggable content for synthetic folders.

Some folder names resolve to a fixed set of children instead of the full
drive listing. The mapping is data, not control flow, so stores can be
built with any table (or none) and derivation can be tested without it.
"""

from typing import Optional

from pydantic import BaseModel, Field

from models.entries import File, Folder


class FolderContent(BaseModel):
    """Children shown when a synthetic folder is open.

    Args:
        folders: Sub-folders, in display order before sorting.
        files: Files, in display order before sorting.
    """

    folders: list[Folder] = Field(default_factory=list)
    files: list[File] = Field(default_factory=list)


class ContentSource(BaseModel):
    """Lookup table from path-segment name to synthetic folder content.

    Args:
        entries: Mapping of segment name to its content.
    """

    entries: dict[str, FolderContent] = Field(default_factory=dict)

    def lookup(self, segment: str) -> Optional[FolderContent]:
        """Return the content registered for ``segment``, if any."""
        return self.entries.get(segment)
