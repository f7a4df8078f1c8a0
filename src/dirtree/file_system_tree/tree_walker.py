"""Depth-limited, filtered, deterministically ordered directory walking.

This module provides the TreeWalker class, which builds an anytree model of a
directory (children already filtered by the exclusion rules and sorted) and
flattens it into the pre-order sequence of DirectoryEntry records consumed by
the renderers.
"""

import os
from pathlib import Path
from typing import FrozenSet, Iterator, List, Optional, Tuple

from anytree import PreOrderIter

from dirtree.exceptions import RootNotADirectoryError, RootNotFoundError, TraversalError
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.file_system_tree.directory_entry import DirectoryEntry
from dirtree.file_system_tree.file_identifier import FileIdentifier
from dirtree.file_system_tree.file_system_node import FileSystemNode
from dirtree.file_system_tree.permission_action import PermissionAction
from dirtree.file_system_tree.sorting import sort_entries
from dirtree.file_system_tree.traversal_policy import TraversalPolicy
from dirtree.logging_config import get_logger
from dirtree.types import EntryKind

logger = get_logger(__name__)


def root_display_name(resolved: Path) -> str:
    """Name of a resolved walk root as shown in the header, without a trailing separator.

    The filesystem root has no base name; it is shown by its anchor stripped
    of separators, so renderers that append "/" produce "/" and not "//".

    Example:
        >>> root_display_name(Path("/home/user/project"))
        'project'
        >>> root_display_name(Path("/"))
        ''
    """
    return resolved.name or resolved.anchor.rstrip("\\/")


class TreeWalker:
    """Walks one directory according to a TraversalPolicy.

    The walk is depth-first and pre-order. At each directory the walker lists
    the children, drops those matched by the exclusion rules, sorts the rest
    (directories first, then files, each group by name) and descends into each
    directory before moving on to the next sibling. Directories deeper than
    ``policy.max_depth`` are kept as entries but not listed.

    The tree is built lazily on first access and cached; call refresh() to
    pick up filesystem changes.

    Error Handling:
        A directory that cannot be listed aborts the walk with TraversalError
        when the policy's permission_action is RAISE (the default). With WARN or
        IGNORE the directory is kept as an empty node and the walk continues.

    Symbolic Link Behavior:
        By default symlinks are reported as file entries and never descended,
        even when they point at a directory. With follow_symlinks, links to
        directories are descended unless the target is already on the current
        branch, in which case the link is reported as a file to break the loop.

    Attributes:
        policy (TraversalPolicy): The configuration of this walk.

    Example:
        >>> walker = TreeWalker(TraversalPolicy("."))  # doctest: +SKIP
        >>> [entry.relative_path for entry in walker.walk()]  # doctest: +SKIP
        ['src', 'src/main.py', 'README.md']
    """

    def __init__(self, policy: TraversalPolicy) -> None:
        self.policy = policy
        self._exclusion_rules: Optional[BaseExclusionRules] = None
        self._tree: Optional[FileSystemNode] = None
        self._entries: Optional[List[DirectoryEntry]] = None

    @property
    def root_path(self) -> Path:
        return self.policy.root_path

    @property
    def root_name(self) -> str:
        """Base name of the resolved root directory, used for the header line."""
        return self.get_tree().name

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the walked tree, building it on first access.

        Raises:
            RootNotFoundError: If the root path doesn't exist.
            RootNotADirectoryError: If the root path isn't a directory.
            TraversalError: If a directory can't be listed and permission_action is RAISE.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def _build_tree(self) -> None:
        root_path = self.root_path
        if not root_path.exists():
            raise RootNotFoundError(root_path)
        if not root_path.is_dir():
            raise RootNotADirectoryError(root_path)

        if self._exclusion_rules is None:
            self._exclusion_rules = self.policy.build_exclusion_rules()

        resolved = root_path.resolve()
        root = FileSystemNode(root_display_name(resolved), kind=EntryKind.DIRECTORY)
        root_id = FileIdentifier.from_path(resolved)
        on_branch = frozenset([root_id]) if root_id is not None else frozenset()

        logger.debug("walking directory tree", root=str(resolved), max_depth=self.policy.max_depth)
        self._populate(root, root_path, 0, on_branch)
        self._tree = root

    def _populate(self, node: FileSystemNode, path: Path, depth: int, on_branch: FrozenSet[FileIdentifier]) -> None:
        """Attach the sorted, filtered children of ``path`` to ``node`` and recurse."""
        if depth > self.policy.max_depth:
            return

        try:
            children = self._list_children(path)
        except OSError as e:
            if self.policy.permission_action is PermissionAction.RAISE:
                raise TraversalError(path, e) from e
            if self.policy.permission_action is PermissionAction.WARN:
                logger.warning("skipping unreadable directory", path=str(path), error=str(e))
            else:
                logger.debug("skipping unreadable directory", path=str(path), error=str(e))
            return

        for name, is_dir, is_symlink in children:
            child_path = path / name
            child_on_branch = on_branch
            if is_dir and is_symlink:
                target_id = FileIdentifier.from_path(child_path)
                if target_id is None or target_id in on_branch:
                    logger.debug("symlink loop detected", path=str(child_path))
                    is_dir = False
                else:
                    child_on_branch = on_branch | {target_id}
            elif is_dir:
                target_id = FileIdentifier.from_path(child_path)
                if target_id is not None:
                    child_on_branch = on_branch | {target_id}

            kind = EntryKind.DIRECTORY if is_dir else EntryKind.FILE
            child = FileSystemNode(name, parent=node, kind=kind, is_symlink=is_symlink)
            if is_dir:
                self._populate(child, child_path, depth + 1, child_on_branch)

    def _list_children(self, path: Path) -> List[Tuple[str, bool, bool]]:
        """List ``path`` as sorted (name, is_dir, is_symlink) triples with exclusions removed.

        Raises:
            OSError: If the directory can't be listed.
        """
        assert self._exclusion_rules is not None
        follow = self.policy.follow_symlinks
        kept: List[Tuple[str, bool, bool]] = []
        with os.scandir(path) as it:
            for dir_entry in it:
                is_symlink = dir_entry.is_symlink()
                try:
                    is_dir = dir_entry.is_dir(follow_symlinks=follow)
                except OSError:
                    is_dir = False
                if self._exclusion_rules.exclude(dir_entry.name, is_dir):
                    logger.debug("excluded entry", path=os.path.join(path, dir_entry.name))
                    continue
                kept.append((dir_entry.name, is_dir, is_symlink))
        return sort_entries(kept, name=lambda child: child[0], is_dir=lambda child: child[1])

    def walk(self) -> List[DirectoryEntry]:
        """Return the entries of the tree in depth-first pre-order.

        The root itself is not included; renderers emit it as a header.

        Raises:
            RootNotFoundError: If the root path doesn't exist.
            RootNotADirectoryError: If the root path isn't a directory.
            TraversalError: If a directory can't be listed and permission_action is RAISE.
        """
        if self._entries is None:
            self._entries = list(self._iter_entries(self.get_tree(), (), ()))
        return list(self._entries)

    def _iter_entries(
        self, node: FileSystemNode, ancestor_is_last: Tuple[bool, ...], path: Tuple[str, ...]
    ) -> Iterator[DirectoryEntry]:
        children = node.children
        for i, child in enumerate(children):
            is_last = i == len(children) - 1
            child_path = path + (child.name,)
            yield DirectoryEntry(
                name=child.name,
                kind=child.kind,
                depth=len(ancestor_is_last),
                is_last_sibling=is_last,
                ancestor_is_last=ancestor_is_last,
                path=child_path,
            )
            if child.is_dir:
                yield from self._iter_entries(child, ancestor_is_last + (is_last,), child_path)

    def get_directory_count(self) -> int:
        """Number of directory entries in the walk (excluding the root)."""
        return sum(1 for entry in self.walk() if entry.is_dir)

    def get_file_count(self) -> int:
        """Number of file entries in the walk."""
        return sum(1 for entry in self.walk() if not entry.is_dir)

    def get_symlink_count(self) -> int:
        """Number of emitted entries that are symbolic links.

        Counts links listed as files as well as followed links to directories.

        Example:
            >>> TreeWalker(TraversalPolicy(".")).get_symlink_count()  # doctest: +SKIP
            1
        """
        return sum(1 for node in PreOrderIter(self.get_tree()) if node.is_symlink)

    def refresh(self) -> None:
        """Discard the cached tree so the next access walks the filesystem again."""
        self._tree = None
        self._entries = None
