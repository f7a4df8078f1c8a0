"""Renderer base class defining the interface for tree output formats.

Renderers are pure functions of the flat, pre-order entry sequence produced by
the tree walker. They never touch the filesystem, so every output format shares
the same traversal and a new format plugs in without changing the walker.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from dirtree.file_system_tree.directory_entry import DirectoryEntry


class TreeRenderer(ABC):
    """Abstract base class for tree output formats.

    Example:
        >>> class CountRenderer(TreeRenderer):
        ...     @property
        ...     def file_extension(self) -> str:
        ...         return ".count"
        ...
        ...     def render(self, root_name: str, entries: Sequence[DirectoryEntry]) -> str:
        ...         return f"{root_name}: {len(entries)} entries"
        >>> CountRenderer().render("project", [])
        'project: 0 entries'
    """

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Conventional file extension of documents in this format, including the dot."""
        pass

    @abstractmethod
    def render(self, root_name: str, entries: Sequence[DirectoryEntry]) -> str:
        """Render a complete document.

        Args:
            root_name: Base name of the walk root, rendered as the top of the tree.
            entries: Entries in depth-first pre-order, as returned by TreeWalker.walk().

        Returns:
            The rendered document.
        """
        pass
