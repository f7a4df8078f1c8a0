"""Flat records produced by the tree walker."""

from dataclasses import dataclass
from typing import Tuple

from dirtree.types import EntryKind


@dataclass(frozen=True)
class DirectoryEntry:
    """One filesystem entry observed during a walk.

    A walk yields these in depth-first pre-order. Each record carries enough
    structural context (its own last-sibling flag and those of its ancestors)
    for a renderer to draw it without looking at any other record.

    Attributes:
        name: Base name of the entry.
        kind: DIRECTORY or FILE.
        depth: 0 for the immediate children of the walk root.
        is_last_sibling: True iff this is the last of its sorted, filtered siblings.
        ancestor_is_last: One flag per ancestor below the root, outermost first,
            recording whether that ancestor was the last of its siblings.
        path: Names from the root (exclusive) down to this entry (inclusive).

    Example:
        >>> entry = DirectoryEntry("z.txt", EntryKind.FILE, 1, True, (False,), ("c", "z.txt"))
        >>> entry.is_dir
        False
        >>> entry.relative_path
        'c/z.txt'
    """

    name: str
    kind: EntryKind
    depth: int
    is_last_sibling: bool
    ancestor_is_last: Tuple[bool, ...] = ()
    path: Tuple[str, ...] = ()

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def parent_path(self) -> Tuple[str, ...]:
        return self.path[:-1]

    @property
    def relative_path(self) -> str:
        """Path relative to the walk root, always with forward slashes."""
        return "/".join(self.path) if self.path else self.name
