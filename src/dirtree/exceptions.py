"""Exceptions raised by dirtree.

Every error the engine reports derives from DirTreeError, so tool handlers and
the CLI can convert them into a textual message with a single except clause.
Where a builtin exception describes the same condition, the dirtree error also
derives from it (e.g. RootNotFoundError is a FileNotFoundError).
"""

from typing import List, Optional

from dirtree.types import PathType


class DirTreeError(Exception):
    """Base class for all dirtree errors."""

    pass


class InvalidInputError(DirTreeError, ValueError):
    """
    Exception raised when tool or CLI arguments fail validation.

    Raised before any traversal begins. The individual problems are kept in
    ``errors`` so callers can report them one per line.

    Attributes:
        errors (List[str]): Human-readable validation messages.

    Example:
        >>> error = InvalidInputError(["Missing required field: fullPathToOutput"])
        >>> str(error)
        'Invalid input: Missing required field: fullPathToOutput'
        >>> error.errors
        ['Missing required field: fullPathToOutput']
    """

    def __init__(self, errors: List[str]) -> None:
        self.errors = list(errors) or ["Invalid input"]
        super().__init__("Invalid input: " + "; ".join(self.errors))


class RootNotFoundError(DirTreeError, FileNotFoundError):
    """
    Exception raised when the root path of a walk does not exist.

    Example:
        >>> error = RootNotFoundError("/missing")
        >>> str(error)
        'Root path does not exist: /missing'
        >>> isinstance(error, FileNotFoundError)
        True
    """

    def __init__(self, path: PathType) -> None:
        self.path = str(path)
        super().__init__(f"Root path does not exist: {self.path}")


class RootNotADirectoryError(DirTreeError, NotADirectoryError):
    """
    Exception raised when the root path of a walk is not a directory.

    Example:
        >>> str(RootNotADirectoryError("/etc/hosts"))
        'Root path is not a directory: /etc/hosts'
    """

    def __init__(self, path: PathType) -> None:
        self.path = str(path)
        super().__init__(f"Root path is not a directory: {self.path}")


class TraversalError(DirTreeError):
    """
    Exception raised when a directory cannot be listed during a walk.

    The walk is aborted; no partial tree is produced.

    Attributes:
        path (str): The directory that could not be listed.
        cause (Optional[OSError]): The underlying filesystem error.

    Example:
        >>> error = TraversalError("/data/private", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Failed to read directory /data/private: [Errno 13] Permission denied'
    """

    def __init__(self, path: PathType, cause: Optional[OSError] = None) -> None:
        self.path = str(path)
        self.cause = cause
        message = f"Failed to read directory {self.path}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)

    @property
    def is_permission_error(self) -> bool:
        """True if the listing failed because access was denied."""
        return isinstance(self.cause, PermissionError)


class OutputWriteError(DirTreeError):
    """
    Exception raised when a rendered document cannot be written.

    Example:
        >>> str(OutputWriteError("/readonly/tree.txt", OSError("Read-only file system")))
        'Failed to write output file /readonly/tree.txt: Read-only file system'
    """

    def __init__(self, path: PathType, cause: Optional[OSError] = None) -> None:
        self.path = str(path)
        self.cause = cause
        message = f"Failed to write output file {self.path}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
