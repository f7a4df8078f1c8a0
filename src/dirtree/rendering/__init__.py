"""Renderers turning a walked entry sequence into a document."""

from typing import Dict, Type

from .base_renderer import TreeRenderer
from .json_renderer import JSONTreeRenderer
from .mermaid_renderer import MermaidTreeRenderer
from .text_renderer import TextTreeRenderer

RENDERERS: Dict[str, Type[TreeRenderer]] = {
    "text": TextTreeRenderer,
    "mermaid": MermaidTreeRenderer,
    "json": JSONTreeRenderer,
}


def get_renderer(output_format: str) -> TreeRenderer:
    """Return a renderer instance for ``output_format`` ("text", "mermaid" or "json").

    Raises:
        ValueError: If the format is not supported.
    """
    try:
        return RENDERERS[output_format]()
    except KeyError:
        raise ValueError(
            f"Unsupported output format: {output_format}. Must be one of: {', '.join(sorted(RENDERERS))}"
        ) from None


__all__ = [
    "JSONTreeRenderer",
    "MermaidTreeRenderer",
    "RENDERERS",
    "TextTreeRenderer",
    "TreeRenderer",
    "get_renderer",
]
