"""Default traversal settings shared by the tool handlers and the CLI."""

DEFAULT_MAX_DEPTH = 3

DEFAULT_EXCLUDE_PATTERNS = (
    "node_modules",
    ".git",
    "build",
    "dist",
)

# The diagram generator hides more entries by default; each one becomes
# a node of the flowchart.
DIAGRAM_EXCLUDE_PATTERNS = DEFAULT_EXCLUDE_PATTERNS + (
    # Build and cache directories
    ".next",
    "cache",
    # Build artifacts and generated files
    "*.woff2",
    "*.hot-update.*",
    "webpack.*",
    "*.chunk.*",
    # Temporary and cache files
    "*.tmp",
    "*.temp",
    ".cache",
    # IDE and system files
    ".DS_Store",
    ".idea",
    ".vscode",
)

DIAGRAM_FILE_EXTENSION = ".md"
