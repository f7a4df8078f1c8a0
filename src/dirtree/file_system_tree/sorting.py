"""Deterministic ordering of sibling entries."""

from typing import Callable, Iterable, List, Tuple, TypeVar

T = TypeVar("T")


def sort_key(name: str, is_dir: bool) -> Tuple[bool, str, str]:
    """Return the sort key of a sibling entry.

    Directories come before files. Within each group names are compared
    case-insensitively (``str.casefold``), and names that differ only by case
    fall back to plain code-point order, so the result is a total order that
    does not depend on the OS locale or on filesystem listing order.

    Example:
        >>> sorted(["b.txt", "a.txt", "B.md"], key=lambda n: sort_key(n, False))
        ['a.txt', 'B.md', 'b.txt']
        >>> sort_key("src", True) < sort_key("README", False)
        True
    """
    return (not is_dir, name.casefold(), name)


def sort_entries(entries: Iterable[T], name: Callable[[T], str], is_dir: Callable[[T], bool]) -> List[T]:
    """Sort sibling entries, directories first then files, each group by name.

    Args:
        entries: Sibling entries of any type.
        name: Returns the base name of an entry.
        is_dir: Returns whether an entry is a directory.

    Example:
        >>> siblings = [("b.txt", False), ("c", True), ("a", True)]
        >>> sort_entries(siblings, name=lambda e: e[0], is_dir=lambda e: e[1])
        [('a', True), ('c', True), ('b.txt', False)]
    """
    return sorted(entries, key=lambda entry: sort_key(name(entry), is_dir(entry)))
