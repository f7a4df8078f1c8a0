"""Tool result payloads in the shape the host expects."""

from typing import Any, Dict

ToolResult = Dict[str, Any]


def text_result(text: str) -> ToolResult:
    """Successful result carrying a single text block.

    Example:
        >>> text_result("done")
        {'content': [{'type': 'text', 'text': 'done'}]}
    """
    return {"content": [{"type": "text", "text": text}]}


def error_result(error: Any) -> ToolResult:
    """Failed result; the message is prefixed with ``Error:``.

    Example:
        >>> error_result(ValueError("bad depth"))
        {'content': [{'type': 'text', 'text': 'Error: bad depth'}], 'isError': True}
    """
    result = text_result(f"Error: {error}")
    result["isError"] = True
    return result
