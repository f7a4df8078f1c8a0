"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .glob_rules import GlobExclusionRules
from .substring_rules import SubstringExclusionRules, is_excluded

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "GlobExclusionRules",
    "SubstringExclusionRules",
    "is_excluded",
]
