"""Command-line interface for dirtree.

This module provides the ``dirtree`` command, which renders a directory with
the same engine used by the tool handlers.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied

Example:
    # Text tree of a project saved to a file
    $ dirtree /path/to/project -o tree.txt

    # Mermaid diagram on stdout, including everything
    $ dirtree -f mermaid -n /path/to/project
"""

import logging
import sys
from pathlib import Path
from typing import List, Mapping, Optional

from dirtree.cli.argparser import create_parser, exclude_patterns_for, validate_args
from dirtree.dirtree import DirTree
from dirtree.exceptions import TraversalError
from dirtree.file_system_tree.permission_action import PermissionAction
from dirtree.file_system_tree.traversal_policy import TraversalPolicy
from dirtree.io.output_writer import write_output
from dirtree.logging_config import configure_logging
from dirtree.tools.schemas import coerce_markdown_path
from dirtree.types import MatchMode

PERMISSION_ACTIONS = {
    "ignore": PermissionAction.IGNORE,
    "warn": PermissionAction.WARN,
    "fail": PermissionAction.RAISE,
}


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the counts into a human-readable string.

    Example:
        >>> print(format_counts({"directories": 2, "files": 5}))
        Directories: 2
        Files: 5
    """
    return "\n".join([f"Directories: {counts['directories']}", f"Files: {counts['files']}"])


def _log_level(verbosity: int) -> Optional[int]:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return None


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the dirtree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(_log_level(args.verbose), args.log_format)

    try:
        validate_args(args)

        policy = TraversalPolicy(
            args.directory if args.directory is not None else Path.cwd(),
            max_depth=args.max_depth,
            exclude_patterns=exclude_patterns_for(args),
            match_mode=MatchMode.GLOB if args.glob else MatchMode.SUBSTRING,
            ignore_files=args.exclude,
            permission_action=PERMISSION_ACTIONS[args.permission_action],
            follow_symlinks=args.follow_symlinks,
        )
        tree = DirTree(policy)
        content = tree.render(args.format)

        summary = format_counts({"directories": tree.directory_count, "files": tree.file_count})
        if args.summary == "file" or (args.summary == "stdout" and not args.output):
            content = f"{content}\n\n{summary}"

        if args.output:
            output = coerce_markdown_path(str(args.output)) if args.format == "mermaid" else args.output
            written = write_output(output, content + "\n")
            print(f"Output saved to {written}", file=sys.stderr)
        else:
            sys.stdout.write(content + "\n")
            sys.stdout.flush()

        if args.summary == "stderr":
            print(summary, file=sys.stderr)
        elif args.summary == "stdout" and args.output:
            print(summary)

    except TraversalError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(126 if e.is_permission_error else 1)
    except PermissionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
