"""Security utilities for CSS Optimizer."""

import os
import logging
from typing import Optional
from .error import PathTraversalError

logger = logging.getLogger(__name__)

class PathGuard:
    """Confine resolved stylesheet paths to a root directory."""

    def __init__(self, root: Optional[str] = None):
        """Initialize path guard.

        Args:
            root: Directory imports must stay within, None for no restriction
        """
        self.root = os.path.realpath(root) if root else None

    def is_path_allowed(self, path: str) -> bool:
        """Check if path is within the root directory.

        Args:
            path: Path to check

        Returns:
            True if path is allowed, False otherwise
        """
        if self.root is None:
            return True
        resolved = os.path.realpath(path)
        try:
            return os.path.commonpath([self.root, resolved]) == self.root
        except ValueError:
            # Different drives on Windows
            return False

    def check(self, path: str) -> str:
        """Raise if path escapes the root directory.

        Args:
            path: Path to check

        Returns:
            The path unchanged

        Raises:
            PathTraversalError: If path is outside the root
        """
        if not self.is_path_allowed(path):
            logger.warning(f"Security Event: blocked path outside {self.root}: {path}")
            raise PathTraversalError(f"Path {path} is outside of {self.root}")
        return path

# Exported class
__all__ = ['PathGuard']
