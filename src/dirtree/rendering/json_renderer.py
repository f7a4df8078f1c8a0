"""Nested JSON rendering of the walked tree."""

import json
from typing import Any, Dict, List, Sequence

from dirtree.file_system_tree.directory_entry import DirectoryEntry

from .base_renderer import TreeRenderer


class JSONTreeRenderer(TreeRenderer):
    """Renders entries as one nested JSON document.

    Every node is an object with ``name`` and ``type`` ("directory" or "file");
    directories also carry a ``children`` list in walk order.

    Example:
        >>> from dirtree.types import EntryKind
        >>> entries = [
        ...     DirectoryEntry("c", EntryKind.DIRECTORY, 0, False, (), ("c",)),
        ...     DirectoryEntry("z.txt", EntryKind.FILE, 1, True, (False,), ("c", "z.txt")),
        ...     DirectoryEntry("b.txt", EntryKind.FILE, 0, True, (), ("b.txt",)),
        ... ]
        >>> doc = JSONTreeRenderer().build("project", entries)
        >>> [child["name"] for child in doc["children"]]
        ['c', 'b.txt']
        >>> doc["children"][0]["children"]
        [{'name': 'z.txt', 'type': 'file'}]
    """

    def __init__(self, indent: Any = 2) -> None:
        self.indent = indent

    @property
    def file_extension(self) -> str:
        return ".json"

    def build(self, root_name: str, entries: Sequence[DirectoryEntry]) -> Dict[str, Any]:
        """Build the nested document as plain dicts and lists."""
        root: Dict[str, Any] = {"name": root_name, "type": "directory", "children": []}
        # stack[d] holds the children list that receives entries of depth d
        stack: List[List[Dict[str, Any]]] = [root["children"]]
        for entry in entries:
            del stack[entry.depth + 1 :]
            node: Dict[str, Any] = {"name": entry.name, "type": entry.kind.value}
            if entry.is_dir:
                node["children"] = []
            stack[entry.depth].append(node)
            if entry.is_dir:
                stack.append(node["children"])
        return root

    def render(self, root_name: str, entries: Sequence[DirectoryEntry]) -> str:
        return json.dumps(self.build(root_name, entries), indent=self.indent, ensure_ascii=False)
