"""Permission action enum for handling unreadable directories during traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be listed during traversal.

    Values:
        RAISE: Abort the whole walk with a TraversalError (default behavior)
        WARN: Log a warning, keep the directory as an empty node and continue
        IGNORE: Keep the directory as an empty node and continue silently
    """

    RAISE = "raise"
    WARN = "warn"
    IGNORE = "ignore"
