"""Argument schemas of the tree tools.

Field aliases match the camelCase argument names used by the host, and the
JSON schema advertised by the registry is generated from these models.
"""

from pathlib import Path
from typing import List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dirtree.defaults import (
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_MAX_DEPTH,
    DIAGRAM_EXCLUDE_PATTERNS,
    DIAGRAM_FILE_EXTENSION,
)
from dirtree.exceptions import InvalidInputError
from dirtree.file_system_tree.traversal_policy import TraversalPolicy
from dirtree.types import MatchMode


def coerce_markdown_path(value: str) -> str:
    """Force a path to end with the diagram extension, replacing any other suffix.

    Example:
        >>> coerce_markdown_path("docs/structure.txt")
        'docs/structure.md'
        >>> coerce_markdown_path("structure")
        'structure.md'
        >>> coerce_markdown_path("archive.tar.gz")
        'archive.tar.md'
    """
    path = Path(value)
    if not path.name:
        raise ValueError(f"Output path must name a file: {value!r}")
    return str(path.with_suffix(DIAGRAM_FILE_EXTENSION))


class TreeToolArgs(BaseModel):
    """Arguments shared by the tree tools."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    directory_path: Optional[str] = Field(
        None,
        alias="directoryPath",
        description="Path to the directory to analyze (optional, defaults to the current directory)",
    )
    max_depth: int = Field(
        DEFAULT_MAX_DEPTH,
        alias="maxDepth",
        ge=0,
        strict=True,
        description=f"Maximum depth to traverse (default: {DEFAULT_MAX_DEPTH})",
    )
    exclude_patterns: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS),
        alias="excludePatterns",
        description="Patterns to exclude from the structure (default: "
        + ", ".join(DEFAULT_EXCLUDE_PATTERNS)
        + ")",
    )
    match_mode: MatchMode = Field(
        MatchMode.SUBSTRING,
        alias="matchMode",
        description="How patterns match entry names: 'substring' (default) or gitignore-style 'glob'",
    )
    full_path_to_output: str = Field(
        ...,
        alias="fullPathToOutput",
        min_length=1,
        description="Path where the output file will be saved",
    )

    @field_validator("exclude_patterns")
    @classmethod
    def _no_empty_patterns(cls, value: List[str]) -> List[str]:
        if any(not pattern for pattern in value):
            raise ValueError("Exclusion patterns must not be empty")
        return value

    def to_policy(self) -> TraversalPolicy:
        """Build the traversal policy; the root defaults to the current working directory."""
        root = Path(self.directory_path) if self.directory_path else Path.cwd()
        return TraversalPolicy(
            root.expanduser().resolve(),
            max_depth=self.max_depth,
            exclude_patterns=self.exclude_patterns,
            match_mode=self.match_mode,
        )


class FileStructureArgs(TreeToolArgs):
    """Arguments of the ``file_structure`` tool."""


class MermaidStructureArgs(TreeToolArgs):
    """Arguments of the ``mermaid-structure`` tool; the output is always a .md file."""

    exclude_patterns: List[str] = Field(
        default_factory=lambda: list(DIAGRAM_EXCLUDE_PATTERNS),
        alias="excludePatterns",
        description="Patterns to exclude from the diagram (default: "
        + ", ".join(DIAGRAM_EXCLUDE_PATTERNS)
        + ")",
    )
    full_path_to_output: str = Field(
        ...,
        alias="fullPathToOutput",
        min_length=1,
        description=f"Path where the Mermaid diagram will be saved (always saved as {DIAGRAM_FILE_EXTENSION})",
    )

    @field_validator("full_path_to_output")
    @classmethod
    def _force_markdown(cls, value: str) -> str:
        return coerce_markdown_path(value)


def _extract_validation_errors(exc: ValidationError) -> List[str]:
    """Convert a pydantic ValidationError to human-readable messages."""
    errors = []
    for err in exc.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "arguments"
        msg = err["msg"]

        # Strip pydantic's "Value error, " prefix from our own validator messages
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, ") :]

        if err["type"] == "missing":
            errors.append(f"Missing required field: {loc}")
        elif err["type"] == "string_type":
            errors.append(f"Expected string at '{loc}'")
        elif err["type"] in ("int_type", "int_parsing", "int_from_float"):
            errors.append(f"Expected integer at '{loc}'")
        elif err["type"] == "list_type":
            errors.append(f"Expected array at '{loc}'")
        else:
            errors.append(f"{loc}: {msg}")

    return errors


def parse_arguments(model: Type[TreeToolArgs], arguments: object) -> TreeToolArgs:
    """Validate raw tool arguments against ``model``.

    Raises:
        InvalidInputError: With one message per invalid field.
    """
    if arguments is None:
        arguments = {}
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        raise InvalidInputError(_extract_validation_errors(e)) from e
