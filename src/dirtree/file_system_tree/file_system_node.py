"""Node representation for entries in the walked tree."""

from typing import Any, Optional

from anytree import Node

from dirtree.types import EntryKind


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory kept by the tree walker.

    Extends anytree.Node with the entry kind. Children are attached in their
    final order (sorted, with exclusions already removed), so the anytree
    child tuple is exactly the sibling sequence that renderers see.

    Attributes:
        name (str): The base name of the file or directory.
        kind (EntryKind): DIRECTORY or FILE.
        is_symlink (bool): True if the entry was reached through a symbolic link.
        children (tuple[FileSystemNode]): Child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", kind=EntryKind.DIRECTORY)
        >>> child = FileSystemNode("file.txt", parent=root)
        >>> child.is_dir
        False
        >>> [node.name for node in child.path]
        ['root', 'file.txt']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        kind: EntryKind = EntryKind.FILE,
        is_symlink: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.kind = kind
        self.is_symlink = is_symlink

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
