"""File access used by the project properties manager."""

import logging
from pathlib import Path
from typing import Protocol

from .exceptions import FileOperationError

logger = logging.getLogger(__name__)


class FileSystem(Protocol):
    """Minimal read/write capability needed to update a properties file."""

    def read_text(self, path: Path) -> str: ...

    def write_file(self, path: Path, content: str) -> None: ...


class LocalFileSystem:
    """UTF-8 file access on the local disk.

    Files are opened with ``newline=""`` so ``\\n`` separators are kept as-is
    on every platform.
    """

    def read_text(self, path: Path) -> str:
        """Read the whole file at ``path``.

        Raises:
            FileOperationError: If the file is missing, unreadable or not UTF-8
        """
        logger.debug(f"Reading {path}")
        try:
            with open(path, encoding="utf-8", newline="") as f:
                return f.read()
        except OSError as e:
            raise FileOperationError(f"Failed to read {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise FileOperationError(f"Failed to decode {path}: {e}") from e

    def write_file(self, path: Path, content: str) -> None:
        """Create or overwrite the file at ``path`` with ``content``.

        Raises:
            FileOperationError: If the file cannot be written
        """
        logger.debug(f"Writing {len(content)} characters to {path}")
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except OSError as e:
            raise FileOperationError(f"Failed to write {path}: {e}") from e
