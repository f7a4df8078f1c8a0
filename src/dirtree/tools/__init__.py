"""Tool handlers exposing the tree engine to an IDE assistant host.

Each handler takes the raw argument mapping sent by the host, validates it
against a pydantic schema and returns a text result. Handlers never raise.
"""

from .file_structure import (
    FILE_STRUCTURE_TOOL_DESCRIPTION,
    FILE_STRUCTURE_TOOL_NAME,
    run_file_structure_tool,
)
from .mermaid_structure import (
    MERMAID_STRUCTURE_TOOL_DESCRIPTION,
    MERMAID_STRUCTURE_TOOL_NAME,
    run_mermaid_structure_tool,
)
from .registry import TOOLS, ToolSpec, call_tool, list_tools
from .result import ToolResult, error_result, text_result

__all__ = [
    "FILE_STRUCTURE_TOOL_DESCRIPTION",
    "FILE_STRUCTURE_TOOL_NAME",
    "MERMAID_STRUCTURE_TOOL_DESCRIPTION",
    "MERMAID_STRUCTURE_TOOL_NAME",
    "TOOLS",
    "ToolResult",
    "ToolSpec",
    "call_tool",
    "error_result",
    "list_tools",
    "run_file_structure_tool",
    "run_mermaid_structure_tool",
    "text_result",
]
