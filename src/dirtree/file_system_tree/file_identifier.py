"""File identifier for uniquely identifying directories by device and inode."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class FileIdentifier:
    """Identity of a directory on disk, used for symlink loop detection.

    The combination of device ID and inode number uniquely identifies a
    directory, whichever path (or symlink) was used to reach it.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.
    """

    device_id: int
    inode_number: int

    @classmethod
    def from_path(cls, path: Path) -> Optional["FileIdentifier"]:
        """Stat ``path`` (following symlinks) and return its identifier.

        Returns None if the path cannot be stat'ed, e.g. a dangling symlink.
        """
        try:
            stat_info = path.stat()
        except OSError:
            return None
        return cls(stat_info.st_dev, stat_info.st_ino)
