"""Managers for CSS Optimizer."""

from .base import BaseManager
from .imports import ImportManager, ImportStack, ImportStatement, find_imports

# Exported classes
__all__ = [
    'BaseManager',
    'ImportManager',
    'ImportStack',
    'ImportStatement',
    'find_imports',
]
