from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Enumeration of entry kinds observed during traversal.

    Attributes:
        DIRECTORY: Directory (descended into, rendered with a trailing slash)
        FILE: Anything else, including symlinks that are not followed
    """

    DIRECTORY = "directory"
    FILE = "file"


class MatchMode(str, Enum):
    """How exclusion patterns are matched against entry names.

    Values:
        SUBSTRING: A name is excluded if it contains the pattern literally (default)
        GLOB: Patterns use gitignore-style wildmatch syntax against the name
    """

    SUBSTRING = "substring"
    GLOB = "glob"
