"""Registry of the available tools and the dispatcher used by the host."""

from typing import Any, Callable, Dict, List, NamedTuple, Type

from pydantic import BaseModel

from dirtree.logging_config import get_logger

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
from .result import ToolResult, error_result
from .schemas import FileStructureArgs, MermaidStructureArgs

logger = get_logger(__name__)


class ToolSpec(NamedTuple):
    name: str
    description: str
    args_model: Type[BaseModel]
    handler: Callable[[Any], ToolResult]

    def input_schema(self) -> Dict[str, Any]:
        """JSON schema of the tool arguments, using the host's argument names."""
        return self.args_model.model_json_schema(by_alias=True)


TOOLS: Dict[str, ToolSpec] = {
    tool.name: tool
    for tool in (
        ToolSpec(
            FILE_STRUCTURE_TOOL_NAME, FILE_STRUCTURE_TOOL_DESCRIPTION, FileStructureArgs, run_file_structure_tool
        ),
        ToolSpec(
            MERMAID_STRUCTURE_TOOL_NAME,
            MERMAID_STRUCTURE_TOOL_DESCRIPTION,
            MermaidStructureArgs,
            run_mermaid_structure_tool,
        ),
    )
}


def list_tools() -> List[Dict[str, Any]]:
    """Describe every tool as ``{"name", "description", "inputSchema"}``."""
    return [
        {"name": tool.name, "description": tool.description, "inputSchema": tool.input_schema()}
        for tool in TOOLS.values()
    ]


def call_tool(name: str, arguments: Any = None) -> ToolResult:
    """Dispatch a tool call by name. Unknown tools yield an error result."""
    tool = TOOLS.get(name)
    if tool is None:
        logger.warning("unknown tool requested", tool=name)
        return error_result(f"Unknown tool: {name}")
    logger.debug("calling tool", tool=name)
    return tool.handler(arguments)
