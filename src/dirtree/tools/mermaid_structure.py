"""Mermaid Structure tool.

Generates a mermaid flowchart of a directory (one node per file or directory,
one edge per parent-child relationship) and saves it as a markdown file.
"""

from typing import Any

from .result import ToolResult
from .schemas import MermaidStructureArgs
from .tree_tool import run_tree_tool

MERMAID_STRUCTURE_TOOL_NAME = "mermaid-structure"
MERMAID_STRUCTURE_TOOL_DESCRIPTION = "Generates a Mermaid diagram showing the file structure of a specified directory."


def run_mermaid_structure_tool(arguments: Any) -> ToolResult:
    """Handle a ``mermaid-structure`` call. The output path always gets the .md extension."""
    return run_tree_tool(MERMAID_STRUCTURE_TOOL_NAME, MermaidStructureArgs, arguments, "mermaid", "Mermaid diagram")
