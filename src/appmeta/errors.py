"""Error types raised by the metadata manager and its collaborators.

All of them derive from MetadataError so callers (the CLI) can catch one
type. Filesystem failures keep the original OSError as ``__cause__``.
"""

from __future__ import annotations


class MetadataError(Exception):
    """Base class for workspace metadata errors."""


class AlreadyExistsError(MetadataError):
    """init target directory is already present."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Could not create app; directory '{path}' already exists")
        self.path = path


class NotFoundError(MetadataError):
    """No workspace root above the starting path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No app found in '{path}' or any parent directory")
        self.path = path


class InvalidInputError(MetadataError):
    """Empty, malformed or unresolvable input."""


class ClusterSpecError(MetadataError):
    """A cluster spec source could not be read or parsed."""


class IOFailureError(MetadataError):
    """An underlying filesystem operation failed.

    Attributes:
        operation: What was being done, e.g. "create directory".
        path: The path the operation was applied to.
    """

    def __init__(
        self,
        operation: str,
        path: str,
        cause: BaseException,
        message: str | None = None,
    ) -> None:
        super().__init__(message or f"Failed to {operation} '{path}': {cause}")
        self.operation = operation
        self.path = path


class InitFailedError(IOFailureError):
    """Filesystem failure while creating a new workspace."""

    def __init__(
        self, root: str, operation: str, path: str, cause: BaseException
    ) -> None:
        message = (
            f"Failed to initialize app at '{root}': "
            f"could not {operation} '{path}': {cause}"
        )
        super().__init__(operation, path, cause, message)
        self.root = root
