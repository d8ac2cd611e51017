"""Base manager class for CSS Optimizer."""

import logging
from typing import Dict, Any, Optional
from abc import ABC, abstractmethod

class BaseManager(ABC):
    """Base class for all managers."""

    def __init__(self):
        """Initialize base manager."""
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get usage statistics."""
        pass

    def log_error(self, message: str, error: Optional[Exception] = None) -> None:
        """Log error message.

        Args:
            message: Error message
            error: Optional exception
        """
        if error:
            self.logger.error(f"{message}: {error}")
        else:
            self.logger.error(message)

    def log_warning(self, message: str) -> None:
        """Log warning message.

        Args:
            message: Warning message
        """
        self.logger.warning(message)

    def log_info(self, message: str) -> None:
        """Log info message.

        Args:
            message: Info message
        """
        self.logger.info(message)

    def log_debug(self, message: str) -> None:
        """Log debug message.

        Args:
            message: Debug message
        """
        self.logger.debug(message)

    def cleanup(self) -> None:
        """Clean up per-run state."""
        pass

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.cleanup()

# Exported class
__all__ = ['BaseManager']
