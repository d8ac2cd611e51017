"""File utility for CSS Optimizer."""

import os
import logging
from typing_extensions import Protocol, runtime_checkable
from .config import MAX_CSS_SIZE
from .error import IoError, ResourceLimitError

logger = logging.getLogger(__name__)

@runtime_checkable
class FileSystem(Protocol):
    """Read capability used to load stylesheets."""

    def read(self, path: str) -> bytes:
        ...

    def realpath(self, path: str) -> str:
        ...

class LocalFileSystem:
    """Read stylesheets from the local disk.

    Relative paths resolve against the process working directory.
    """

    def __init__(self, max_size: int = MAX_CSS_SIZE):
        """Initialize local file system.

        Args:
            max_size: Largest file size accepted, in bytes

        Raises:
            ValueError: If max_size is not positive
        """
        if max_size <= 0:
            raise ValueError("Maximum file size must be positive")
        self.max_size = max_size

    def read(self, path: str) -> bytes:
        """Read the raw bytes of a file.

        Args:
            path: File path

        Returns:
            File contents

        Raises:
            IoError: If the file cannot be read
            ResourceLimitError: If the file is larger than max_size
        """
        try:
            size = os.path.getsize(path)
        except OSError as e:
            raise IoError(f"Failed to read file {path}: {e}") from e
        if size > self.max_size:
            raise ResourceLimitError(
                f"File {path} is {size} bytes, limit is {self.max_size} bytes"
            )
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise IoError(f"Failed to read file {path}: {e}") from e
        logger.debug(f"Read {len(data)} bytes from {path}")
        return data

    def realpath(self, path: str) -> str:
        """Return the canonical path used to identify a file."""
        return os.path.realpath(path)

# Exported names
__all__ = ['FileSystem', 'LocalFileSystem']
