"""Directory traversal with depth limiting, exclusion and deterministic ordering.

This package provides the tree walker and the value types it produces and
consumes: DirectoryEntry records, the TraversalPolicy that configures a walk,
and the sibling ordering shared by every renderer.
"""

from .directory_entry import DirectoryEntry
from .permission_action import PermissionAction
from .sorting import sort_entries, sort_key
from .traversal_policy import TraversalPolicy
from .tree_walker import TreeWalker

__all__ = [
    "DirectoryEntry",
    "PermissionAction",
    "TraversalPolicy",
    "TreeWalker",
    "sort_entries",
    "sort_key",
]
