"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from pathspec import PathSpec

from dirtree.types import PathType

from .base_rules import BaseExclusionRules


class GlobExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore wildmatch syntax on entry names.

    Patterns are compiled with the pathspec library and matched against the
    base name of each entry, so the usual .gitignore syntax is available:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-only patterns (ending in /)
    - Negation patterns (starting with !)
    - Comment lines (starting with #) when loading from files

    Unlike SubstringExclusionRules, a plain pattern such as ``build`` only
    matches an entry named exactly ``build``.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GlobExclusionRules(["*.woff2", ".DS_Store"])
        >>> rules.exclude("font.woff2")
        True
        >>> rules.exclude(".DS_Store")
        True
        >>> rules.exclude("not.DS_Store.txt")
        False
        >>> rules.add_rule("!keep.woff2")
        >>> rules.exclude("keep.woff2")
        False
    """

    def __init__(
        self,
        patterns: Optional[Iterable[str]] = None,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
    ):
        """Initialize GlobExclusionRules.

        Args:
            patterns: Individual gitignore-style patterns.
            rules_files: Path(s) to .gitignore-style files whose patterns follow
                the individual patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", [])
        for pattern in patterns or ():
            self.add_rule(pattern)
        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, name: str, is_dir: bool = False) -> bool:
        # A trailing slash lets directory-only patterns such as "build/" match
        candidate = f"{name}/" if is_dir else name
        return self.spec.match_file(candidate)

    def has_rules(self) -> bool:
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Patterns are appended in file order, so later patterns (in particular
        negations) override earlier ones.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r", encoding="utf-8") as f:
                self._lines.extend(f.read().splitlines())
        self._compile()

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern (e.g. "*.pyc", "node_modules/", "!keep.log")."""
        self._lines.append(rule)
        self._compile()

    def _compile(self) -> None:
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
