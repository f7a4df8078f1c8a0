"""Directory tree traversal and rendering utilities.

This package provides tools for walking a directory with depth limits and
exclusion patterns and rendering the result as a text tree, a mermaid
flowchart or JSON, together with tool handlers for IDE assistant hosts.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())
