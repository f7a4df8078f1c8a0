"""Literal substring matching of entry names."""

from typing import Iterable, List, Optional

from .base_rules import BaseExclusionRules


def is_excluded(name: str, patterns: Iterable[str]) -> bool:
    """Return True iff ``name`` contains at least one pattern as a literal substring.

    Matching is case-sensitive, with no glob expansion and no anchoring, so a
    pattern such as ``*.tmp`` only matches names that literally contain ``*.tmp``.
    An empty pattern collection never excludes anything.

    Example:
        >>> is_excluded("node_modules", ["node_modules", ".git"])
        True
        >>> is_excluded("my.github.io", [".git"])
        True
        >>> is_excluded("Build", ["build"])
        False
        >>> is_excluded("anything", [])
        False
    """
    return any(pattern in name for pattern in patterns)


class SubstringExclusionRules(BaseExclusionRules):
    """Exclusion rules that hide any entry whose name contains a pattern.

    This is the default matcher of the tree tools. Because matching is by
    substring, ``build`` also hides ``prebuild.sh``; use GlobExclusionRules when
    whole-name or wildcard matching is wanted.

    Attributes:
        patterns (List[str]): Patterns in the order they were added, without duplicates.

    Example:
        >>> rules = SubstringExclusionRules(["dist"])
        >>> rules.add_rule(".git")
        >>> rules.patterns
        ['dist', '.git']
        >>> rules.exclude(".gitignore")
        True
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        self.patterns: List[str] = []
        for pattern in patterns or ():
            self.add_rule(pattern)

    def exclude(self, name: str, is_dir: bool = False) -> bool:
        return is_excluded(name, self.patterns)

    def has_rules(self) -> bool:
        return bool(self.patterns)

    def add_rule(self, rule: str) -> None:
        """Add a pattern. Empty patterns are rejected since they would hide every entry."""
        if not rule:
            raise ValueError("Exclusion pattern must not be empty")
        if rule not in self.patterns:
            self.patterns.append(rule)
