"""Writing rendered documents to disk."""

import os
import stat
import tempfile
from pathlib import Path
from typing import Optional

from dirtree.exceptions import OutputWriteError
from dirtree.logging_config import get_logger
from dirtree.types import PathType

logger = get_logger(__name__)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _target_mode(path: Path) -> int:
    """Permissions the written file should end up with."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except OSError:
        return 0o666 & ~_current_umask()


def write_output(path: PathType, content: str, encoding: str = "utf-8") -> Path:
    """Write a fully rendered document and return the resolved absolute path.

    Relative paths are resolved against the current working directory. An
    existing file is replaced. The parent directory must already exist.

    The document goes to a temporary file next to the target, which is then
    renamed over it, so the target either holds the complete new document or
    is left exactly as it was.

    Args:
        path: Destination file.
        content: The complete document. Callers render first and write once, so
            a traversal failure never leaves a partial file behind.
        encoding: Text encoding of the file.

    Returns:
        The absolute path that was written.

    Raises:
        OutputWriteError: If the file cannot be written.
    """
    resolved = Path(path).expanduser().resolve()
    temp_name: Optional[str] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            newline="\n",
            dir=resolved.parent,
            prefix=f".{resolved.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            temp_name = f.name
            f.write(content)
        os.chmod(temp_name, _target_mode(resolved))
        os.replace(temp_name, resolved)
    except OSError as e:
        if temp_name is not None:
            try:
                os.unlink(temp_name)
            except OSError:
                logger.debug("could not remove temporary file", path=temp_name)
        raise OutputWriteError(resolved, e) from e
    logger.info("wrote output file", path=str(resolved), characters=len(content))
    return resolved
