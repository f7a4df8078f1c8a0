"""Mermaid flowchart rendering of the walked tree."""

import re
from typing import Dict, Iterator, Sequence, Set, Tuple

from dirtree.file_system_tree.directory_entry import DirectoryEntry

from .base_renderer import TreeRenderer

ROOT_ID = "root"
INDENT = "    "

_UNSAFE_ID_CHARS = re.compile(r"[^a-zA-Z0-9]")
# Characters that end or reshape an unquoted [label] in mermaid
_LABEL_SPECIAL_CHARS = set('[](){}<>"|#&;`')


def sanitize(name: str) -> str:
    """Replace every character outside [A-Za-z0-9] with an underscore.

    Example:
        >>> sanitize("my-file.test.ts")
        'my_file_test_ts'
    """
    return _UNSAFE_ID_CHARS.sub("_", name)


def format_label(label: str) -> str:
    """Return the bracketed node label, quoting it when mermaid needs that.

    Example:
        >>> format_label("src/")
        '[src/]'
        >>> format_label("page(1).md")
        '["page(1).md"]'
        >>> format_label('say "hi".txt')
        '["say #quot;hi#quot;.txt"]'
    """
    if any(char in _LABEL_SPECIAL_CHARS for char in label):
        return '["' + label.replace('"', "#quot;") + '"]'
    return f"[{label}]"


class MermaidTreeRenderer(TreeRenderer):
    """Renders entries as a top-down mermaid flowchart inside a fenced code block.

    Node identifiers are path-qualified: each one is its parent's identifier
    followed by ``_`` and the sanitized name, so equally named entries in
    different directories get different identifiers. Distinct names that
    sanitize to the same identifier (``a.b`` and ``a_b``) are disambiguated
    with a numeric suffix.

    Each entry contributes a node declaration followed by the edge from its
    parent. Entries arrive in pre-order, so an edge never references a node
    that has not been declared on an earlier line.

    Example:
        >>> from dirtree.types import EntryKind
        >>> entries = [
        ...     DirectoryEntry("src", EntryKind.DIRECTORY, 0, False, (), ("src",)),
        ...     DirectoryEntry("main.py", EntryKind.FILE, 1, True, (False,), ("src", "main.py")),
        ...     DirectoryEntry("README.md", EntryKind.FILE, 0, True, (), ("README.md",)),
        ... ]
        >>> print(MermaidTreeRenderer().render("project", entries))
        ```mermaid
        flowchart TD
            root[project/]
            root_src[src/]
            root --> root_src
            root_src_main_py[main.py]
            root_src --> root_src_main_py
            root_README_md[README.md]
            root --> root_README_md
        ```
    """

    @property
    def file_extension(self) -> str:
        return ".md"

    def assign_ids(self, entries: Sequence[DirectoryEntry]) -> Dict[Tuple[str, ...], str]:
        """Map each entry path (and the root's empty path) to a unique node identifier."""
        ids: Dict[Tuple[str, ...], str] = {(): ROOT_ID}
        used: Set[str] = {ROOT_ID}
        for entry in entries:
            base = f"{ids[entry.parent_path]}_{sanitize(entry.name)}"
            node_id = base
            suffix = 2
            while node_id in used:
                node_id = f"{base}_{suffix}"
                suffix += 1
            used.add(node_id)
            ids[entry.path] = node_id
        return ids

    def render_lines(self, root_name: str, entries: Sequence[DirectoryEntry]) -> Iterator[str]:
        """Yield the flowchart lines, without the code fence."""
        ids = self.assign_ids(entries)
        yield "flowchart TD"
        yield f"{INDENT}{ROOT_ID}{format_label(root_name + '/')}"
        for entry in entries:
            node_id = ids[entry.path]
            label = entry.name + ("/" if entry.is_dir else "")
            yield f"{INDENT}{node_id}{format_label(label)}"
            yield f"{INDENT}{ids[entry.parent_path]} --> {node_id}"

    def render(self, root_name: str, entries: Sequence[DirectoryEntry]) -> str:
        return "\n".join(["```mermaid", *self.render_lines(root_name, entries), "```"])
