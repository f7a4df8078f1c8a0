"""Shared driver of the tree tools: validate, walk, render, write, report."""

from typing import Any, Type

from dirtree.dirtree import DirTree
from dirtree.exceptions import DirTreeError
from dirtree.logging_config import get_logger

from .result import ToolResult, error_result, text_result
from .schemas import TreeToolArgs, parse_arguments

logger = get_logger(__name__)

SAVED_MESSAGE = (
    "{what} saved to {path}. Before continuing, you MUST ask the user to drag and drop "
    "the file into the chat window.\nThe path to the file is {path}."
)


def run_tree_tool(
    tool_name: str, model: Type[TreeToolArgs], arguments: Any, output_format: str, what: str
) -> ToolResult:
    """Run one tree tool call end to end.

    Nothing is written unless the complete document was rendered, and every
    failure is reported as an error result instead of being raised.

    Args:
        tool_name: Name used in log events.
        model: Argument schema of the tool.
        arguments: Raw arguments sent by the host.
        output_format: Renderer to use ("text" or "mermaid").
        what: Human-readable name of the artifact for the success message.
    """
    try:
        args = parse_arguments(model, arguments)
        tree = DirTree(args.to_policy())
        output_path = tree.write(args.full_path_to_output, output_format)
    except DirTreeError as e:
        logger.warning("tool call failed", tool=tool_name, error=str(e))
        return error_result(e)
    except Exception as e:
        logger.exception("unexpected tool failure", tool=tool_name)
        return error_result(e)

    logger.info(
        "tool call succeeded",
        tool=tool_name,
        output=str(output_path),
        directories=tree.directory_count,
        files=tree.file_count,
        symlinks=tree.symlink_count,
    )
    return text_result(SAVED_MESSAGE.format(what=what, path=output_path))
