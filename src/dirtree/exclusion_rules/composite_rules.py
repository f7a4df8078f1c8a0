"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    An entry is excluded if ANY of the constituent rules excludes it. This lets
    the walker apply, for example, substring patterns from the tool arguments
    together with gitignore-style rules loaded from a file.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from dirtree.exclusion_rules.glob_rules import GlobExclusionRules
        >>> from dirtree.exclusion_rules.substring_rules import SubstringExclusionRules
        >>> composite = CompositeExclusionRules(
        ...     [SubstringExclusionRules(["node_modules"]), GlobExclusionRules(["*.log"])]
        ... )
        >>> composite.exclude("node_modules")
        True
        >>> composite.exclude("server.log")
        True
        >>> composite.exclude("main.py")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, name: str, is_dir: bool = False) -> bool:
        """Check if an entry is excluded by any constituent rule (short-circuits)."""
        return any(rule.exclude(name, is_dir) for rule in self.rules)

    def has_rules(self) -> bool:
        """True if ANY of the constituent rules has rules configured."""
        return any(rule.has_rules() for rule in self.rules)

    def add_rule_object(self, rule: BaseExclusionRules) -> None:
        """Add another exclusion rule object to this composite.

        Raises:
            TypeError: If rule doesn't implement BaseExclusionRules.
        """
        if not isinstance(rule, BaseExclusionRules):
            raise TypeError(f"Rule must implement BaseExclusionRules, got {type(rule)}")
        self.rules.append(rule)

    def get_rules(self) -> List[BaseExclusionRules]:
        """Get a copy of the constituent rules list."""
        return list(self.rules)
