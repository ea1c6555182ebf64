"""Helper functions for API integration tests.

Request builders return dictionaries ready to pass as ``json=`` to the
TestClient; the name helpers pull display order out of state responses.
"""

from typing import Any, Optional


def add_file_request(
    name: str = "report.pdf",
    size: Optional[str] = None,
    size_bytes: Optional[int] = None,
    extension: Optional[str] = None,
) -> dict[str, Any]:
    """Create a POST /items/files body.

    Defaults to a byte size when neither ``size`` nor ``size_bytes`` is given.

    Example:
        >>> client.post("/items/files", json=add_file_request("a.png", size="2 KB"))
    """
    request: dict[str, Any] = {"name": name}

    if size is not None:
        request["size"] = size
    if size_bytes is not None:
        request["size_bytes"] = size_bytes
    if size is None and size_bytes is None:
        request["size_bytes"] = 3_221_225
    if extension is not None:
        request["extension"] = extension

    return request


def dropped_file(name: str, size_bytes: int = 1024) -> dict[str, Any]:
    """Create one entry of a POST /items/upload body."""
    return {"name": name, "size_bytes": size_bytes}


def folder_names(state: dict[str, Any]) -> list[str]:
    """Visible folder names of a drive state response, in display order."""
    return [folder["name"] for folder in state["folders"]]


def file_names(state: dict[str, Any]) -> list[str]:
    """Visible file names of a drive state response, in display order."""
    return [file["name"] for file in state["files"]]
