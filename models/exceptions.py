"""Errors raised by the drive view-state engine.

Both error kinds are local and recoverable: a failed mutation is rejected
before any field of the store changes.
"""


class DriveError(Exception):
    """Base class for all errors raised by the drive engine."""


class ValidationError(DriveError, ValueError):
    """Raised when an operation receives an unusable value.

    Typical cause is an empty or whitespace-only name on create or rename.

    Args:
        message: Description of the rejected value.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(DriveError, LookupError):
    """Raised when an operation targets an id absent from its collection.

    Args:
        item_id: The id that was looked up.
        kind: Which collection was searched ("folder" or "file").
    """

    def __init__(self, item_id: str, kind: str):
        self.item_id = item_id
        self.kind = kind
        super().__init__(f"No {kind} with id '{item_id}'")
