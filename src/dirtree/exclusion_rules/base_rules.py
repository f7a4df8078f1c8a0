from abc import ABC, abstractmethod
from typing import Sequence, Union

from dirtree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    Exclusion rules decide, one directory entry at a time, whether the entry is
    hidden from the tree. They are consulted with the entry's base name (not its
    path) before the walker descends, so an excluded directory is never listed
    and none of its descendants appear in the output.

    Loading rules from files and adding individual rules are optional
    capabilities that depend on the rule type.

    Example:
        >>> from dirtree.exclusion_rules.substring_rules import SubstringExclusionRules
        >>> rules = SubstringExclusionRules(["node_modules"])
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("src")
        False
        >>>
        >>> from dirtree.exclusion_rules.glob_rules import GlobExclusionRules
        >>> glob_rules = GlobExclusionRules(["*.pyc", "build/"])
        >>> glob_rules.exclude("main.pyc")
        True
        >>> glob_rules.exclude("build", is_dir=True)
        True
        >>> glob_rules.exclude("build", is_dir=False)
        False
    """

    @abstractmethod
    def exclude(self, name: str, is_dir: bool = False) -> bool:
        """
        Determine if an entry should be excluded.

        Args:
            name (str): The base name of the file or directory.
            is_dir (bool): Whether the entry is a directory. Rule types that do not
                distinguish directories ignore this flag.

        Returns:
            bool: True if the entry should be excluded, False if it should be included.
        """
        pass

    def has_rules(self) -> bool:
        """Return True if at least one rule is configured."""
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Rule types that don't support file operations use this default
        implementation, which raises NotImplementedError.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add. Its syntax depends on the rule type.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
