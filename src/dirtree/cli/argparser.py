"""Command-line argument parsing for dirtree.

This module defines the command-line interface for dirtree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import List

from dirtree import __version__
from dirtree.defaults import DEFAULT_EXCLUDE_PATTERNS, DEFAULT_MAX_DEPTH, DIAGRAM_EXCLUDE_PATTERNS
from dirtree.rendering import RENDERERS


def non_negative_int(value: str) -> int:
    """argparse type for --max-depth."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirtree's options.
    """
    description = """
    dirtree: render a directory as a text tree, a mermaid flowchart or JSON.

    The directory is walked depth-first up to a maximum depth. Entries whose
    names match an exclusion pattern are hidden together with everything below
    them. Directories are listed before files, each group in name order, so the
    output is identical on every run over an unchanged directory.
    """

    epilog = f"""
    Default exclusions:
      text, json: {", ".join(DEFAULT_EXCLUDE_PATTERNS)}
      mermaid:    the above plus {", ".join(DIAGRAM_EXCLUDE_PATTERNS[len(DEFAULT_EXCLUDE_PATTERNS):])}

    Examples:
      # Text tree of the current directory, three levels deep
      dirtree

      # Mermaid diagram saved as docs/structure.md
      dirtree -f mermaid -o docs/structure /path/to/project

      # Only the top level, with an extra exclusion pattern
      dirtree -d 0 -i coverage /path/to/project

      # Gitignore-style matching and rules from .gitignore
      dirtree -g -i "*.pyc" -e .gitignore /path/to/project

      # Print directory and file counts to stderr
      dirtree -s stderr /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="dirtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirtree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=None,
        help="The directory to render (default: the current directory).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout. "
        "Mermaid output files always get the .md extension.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=sorted(RENDERERS),
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        type=non_negative_int,
        default=DEFAULT_MAX_DEPTH,
        metavar="N",
        help=f"Maximum depth to traverse; 0 lists only the top level (default: {DEFAULT_MAX_DEPTH}).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Exclude entries whose name matches PATTERN, in addition to the defaults. "
        "Can be specified multiple times.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        type=Path,
        metavar="FILE",
        help="Gitignore-style rules file applied to entry names (can be specified multiple times).",
    )
    parser.add_argument(
        "-n",
        "--no-default-excludes",
        action="store_true",
        help="Do not apply the default exclusion patterns.",
    )
    parser.add_argument(
        "-g",
        "--glob",
        action="store_true",
        help="Match patterns as gitignore-style globs against whole names instead of as substrings.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Descend into symbolic links to directories. By default symlinks are listed as files.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="fail",
        help="How to handle unreadable directories (default: fail).",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print directory and file counts. Valid destinations: stderr, stdout, file (requires -o)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v for info, -vv for debug).",
    )
    parser.add_argument(
        "--log-format",
        choices=["pretty", "json"],
        default=None,
        help="Log output format (default: $DIRTREE_LOG_FORMAT or pretty).",
    )

    return parser


def exclude_patterns_for(args: argparse.Namespace) -> List[str]:
    """Combine the default exclusions for the chosen format with the -i patterns."""
    patterns: List[str] = []
    if not args.no_default_excludes:
        defaults = DIAGRAM_EXCLUDE_PATTERNS if args.format == "mermaid" else DEFAULT_EXCLUDE_PATTERNS
        patterns.extend(defaults)
    patterns.extend(args.ignore)
    return patterns


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.summary == "file" and not args.output:
        raise ValueError("--summary=file requires -o/--output to be specified")
    if any(not pattern for pattern in args.ignore):
        raise ValueError("-i/--ignore patterns must not be empty")
