"""File Structure tool.

Generates a text-based tree diagram of a directory and saves it to a file:
directories carry a trailing "/", directories are listed before files, and
"├── " / "└── " connectors with "│   " continuation lines show the hierarchy.
"""

from typing import Any

from .result import ToolResult
from .schemas import FileStructureArgs
from .tree_tool import run_tree_tool

FILE_STRUCTURE_TOOL_NAME = "file_structure"
FILE_STRUCTURE_TOOL_DESCRIPTION = (
    "Generates a text-based tree diagram showing the file structure of a specified directory."
)


def run_file_structure_tool(arguments: Any) -> ToolResult:
    """Handle a ``file_structure`` call.

    Example:
        >>> result = run_file_structure_tool({})
        >>> result["content"][0]["text"]
        'Error: Invalid input: Missing required field: fullPathToOutput'
    """
    return run_tree_tool(FILE_STRUCTURE_TOOL_NAME, FileStructureArgs, arguments, "text", "Tree structure")
