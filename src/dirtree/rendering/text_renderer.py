"""ASCII tree rendering in the style of the Unix ``tree`` command."""

from typing import Iterator, Sequence

from dirtree.file_system_tree.directory_entry import DirectoryEntry

from .base_renderer import TreeRenderer

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def format_line(entry: DirectoryEntry) -> str:
    """Format one entry as a tree line.

    Example:
        >>> from dirtree.types import EntryKind
        >>> format_line(DirectoryEntry("z.txt", EntryKind.FILE, 1, True, (False,)))
        '│   └── z.txt'
        >>> format_line(DirectoryEntry("c", EntryKind.DIRECTORY, 0, False))
        '├── c/'
    """
    prefix = "".join(SPACE if is_last else PIPE for is_last in entry.ancestor_is_last)
    connector = LAST_BRANCH if entry.is_last_sibling else BRANCH
    suffix = "/" if entry.is_dir else ""
    return f"{prefix}{connector}{entry.name}{suffix}"


class TextTreeRenderer(TreeRenderer):
    """Renders entries as a text tree.

    The first line is the root header (``<root>/``), followed by one line per
    entry, joined with newlines and without a trailing newline.

    Example:
        >>> from dirtree.types import EntryKind
        >>> entries = [
        ...     DirectoryEntry("a", EntryKind.DIRECTORY, 0, False),
        ...     DirectoryEntry("c", EntryKind.DIRECTORY, 0, False),
        ...     DirectoryEntry("z.txt", EntryKind.FILE, 1, True, (False,)),
        ...     DirectoryEntry("b.txt", EntryKind.FILE, 0, True),
        ... ]
        >>> print(TextTreeRenderer().render("project", entries))
        project/
        ├── a/
        ├── c/
        │   └── z.txt
        └── b.txt
    """

    @property
    def file_extension(self) -> str:
        return ".txt"

    def render_lines(self, entries: Sequence[DirectoryEntry]) -> Iterator[str]:
        """Yield the body lines (without the root header)."""
        for entry in entries:
            yield format_line(entry)

    def render(self, root_name: str, entries: Sequence[DirectoryEntry]) -> str:
        return "\n".join([f"{root_name}/", *self.render_lines(entries)])
