"""Immutable configuration of a single walk."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Tuple, Union

from dirtree.defaults import DEFAULT_MAX_DEPTH
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.exclusion_rules.composite_rules import CompositeExclusionRules
from dirtree.exclusion_rules.glob_rules import GlobExclusionRules
from dirtree.exclusion_rules.substring_rules import SubstringExclusionRules
from dirtree.file_system_tree.permission_action import PermissionAction
from dirtree.types import MatchMode, PathType


def _unique(values: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True, init=False)
class TraversalPolicy:
    """Configuration for one directory walk.

    Attributes:
        root_path: Directory to walk. Must exist and be a directory when the walk runs.
        max_depth: Directories deeper than this are not listed. 0 lists only the
            immediate children of the root.
        exclude_patterns: Entry name patterns to exclude, interpreted per match_mode.
        match_mode: SUBSTRING (default) or GLOB.
        ignore_files: Gitignore-style rule files combined with exclude_patterns.
        permission_action: What to do when a directory cannot be listed.
        follow_symlinks: Descend into symlinks that point at directories.

    Example:
        >>> policy = TraversalPolicy("/tmp", exclude_patterns=[".git", "dist", ".git"])
        >>> policy.exclude_patterns
        ('.git', 'dist')
        >>> policy.build_exclusion_rules().exclude(".github")
        True
        >>> TraversalPolicy("/tmp", max_depth=-1)
        Traceback (most recent call last):
        ...
        ValueError: max_depth must be a non-negative integer, got -1
    """

    root_path: Path
    max_depth: int = DEFAULT_MAX_DEPTH
    exclude_patterns: Tuple[str, ...] = ()
    match_mode: MatchMode = MatchMode.SUBSTRING
    ignore_files: Tuple[Path, ...] = ()
    permission_action: PermissionAction = PermissionAction.RAISE
    follow_symlinks: bool = False

    def __init__(
        self,
        root_path: PathType,
        max_depth: int = DEFAULT_MAX_DEPTH,
        exclude_patterns: Iterable[str] = (),
        match_mode: Union[str, MatchMode] = MatchMode.SUBSTRING,
        ignore_files: Iterable[PathType] = (),
        permission_action: Union[str, PermissionAction] = PermissionAction.RAISE,
        follow_symlinks: bool = False,
    ) -> None:
        if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 0:
            raise ValueError(f"max_depth must be a non-negative integer, got {max_depth!r}")
        patterns = _unique(exclude_patterns)
        if any(not pattern for pattern in patterns):
            raise ValueError("Exclusion patterns must not be empty")

        # Frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "root_path", Path(root_path))
        object.__setattr__(self, "max_depth", max_depth)
        object.__setattr__(self, "exclude_patterns", patterns)
        object.__setattr__(self, "match_mode", MatchMode(match_mode))
        object.__setattr__(self, "ignore_files", tuple(Path(p) for p in ignore_files))
        object.__setattr__(self, "permission_action", PermissionAction(permission_action))
        object.__setattr__(self, "follow_symlinks", follow_symlinks)

    def build_exclusion_rules(self) -> BaseExclusionRules:
        """Build the exclusion rules described by this policy.

        Raises:
            FileNotFoundError: If one of the ignore_files does not exist.
        """
        rules: BaseExclusionRules
        if self.match_mode is MatchMode.GLOB:
            rules = GlobExclusionRules(self.exclude_patterns)
        else:
            rules = SubstringExclusionRules(self.exclude_patterns)
        if self.ignore_files:
            rules = CompositeExclusionRules([rules, GlobExclusionRules(rules_files=self.ignore_files)])
        return rules
