"""High-level access to a walked directory and its renderings.

This module provides the DirTree class, which binds a TraversalPolicy to a
TreeWalker and the available renderers. Both the tool handlers and the CLI
go through it.
"""

from pathlib import Path
from typing import List, Union

from dirtree.file_system_tree.directory_entry import DirectoryEntry
from dirtree.file_system_tree.traversal_policy import TraversalPolicy
from dirtree.file_system_tree.tree_walker import TreeWalker
from dirtree.io.output_writer import write_output
from dirtree.rendering import get_renderer
from dirtree.rendering.base_renderer import TreeRenderer
from dirtree.types import PathType


class DirTree:
    """A directory walked once and rendered in any supported format.

    The walk happens lazily on first access and every rendering reuses it, so
    the text tree, the mermaid diagram and the JSON document of one DirTree
    always describe the same entries.

    Attributes:
        policy (TraversalPolicy): The configuration of the walk.

    Example:
        >>> tree = DirTree(TraversalPolicy("src", max_depth=1))  # doctest: +SKIP
        >>> print(tree.render("text"))  # doctest: +SKIP
        src/
        ├── utils/
        │   └── helpers.py
        └── main.py

    Raises:
        RootNotFoundError: If the root path doesn't exist (on first access).
        RootNotADirectoryError: If the root path isn't a directory (on first access).
        TraversalError: If a directory can't be listed and permission_action is RAISE.
    """

    def __init__(self, policy: TraversalPolicy) -> None:
        self.policy = policy
        self._walker = TreeWalker(policy)

    @property
    def root_name(self) -> str:
        return self._walker.root_name

    @property
    def entries(self) -> List[DirectoryEntry]:
        return self._walker.walk()

    @property
    def directory_count(self) -> int:
        return self._walker.get_directory_count()

    @property
    def file_count(self) -> int:
        return self._walker.get_file_count()

    @property
    def symlink_count(self) -> int:
        return self._walker.get_symlink_count()

    def render(self, renderer: Union[str, TreeRenderer] = "text") -> str:
        """Render the tree with a renderer instance or a format name."""
        if isinstance(renderer, str):
            renderer = get_renderer(renderer)
        return renderer.render(self.root_name, self.entries)

    def to_text(self) -> str:
        return self.render("text")

    def to_mermaid(self) -> str:
        return self.render("mermaid")

    def to_json(self) -> str:
        return self.render("json")

    def write(self, output_path: PathType, renderer: Union[str, TreeRenderer] = "text") -> Path:
        """Render the complete document, then write it to ``output_path``.

        Returns:
            The resolved absolute path of the written file.

        Raises:
            OutputWriteError: If the file cannot be written.
        """
        content = self.render(renderer)
        return write_output(output_path, content)

    def refresh(self) -> None:
        """Forget the cached walk so the next rendering reflects the filesystem again."""
        self._walker.refresh()
