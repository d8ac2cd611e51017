"""Path handling functionality.

Stylesheet paths and url() arguments are handled as forward-slash paths
relative to the process working directory, whatever the platform.
"""

import posixpath
import re
from typing import Tuple

_SUFFIX_RE = re.compile(r'[?#]')

def split_url_path(path: str) -> Tuple[str, str]:
    """Split a url path into its path part and its query/fragment suffix.

    Args:
        path: Path, possibly followed by ``?query`` or ``#fragment``

    Returns:
        Tuple of (path, suffix)
    """
    match = _SUFFIX_RE.search(path)
    if not match:
        return path, ''
    return path[:match.start()], path[match.start():]

def strip_url_suffix(path: str) -> str:
    """Drop any query string or fragment from a path."""
    return split_url_path(path)[0]

def normalize_url_path(path: str) -> str:
    """Collapse ``.`` and ``dir/..`` segments, keeping query and fragment.

    Leading ``..`` segments that cannot be collapsed are kept.

    Args:
        path: Relative path to normalize

    Returns:
        Normalized path
    """
    base, suffix = split_url_path(path)
    if not base:
        return path
    normalized = posixpath.normpath(base)
    if base.endswith('/') and normalized != '/':
        normalized += '/'
    return normalized + suffix

def join_url_path(directory: str, path: str) -> str:
    """Express ``path`` (relative to ``directory``) relative to the parent of ``directory``.

    Args:
        directory: Directory prefix, '' or '.' for none
        path: Relative path

    Returns:
        Normalized joined path
    """
    if not directory or directory == '.':
        return normalize_url_path(path)
    return normalize_url_path(directory.rstrip('/') + '/' + path)

def url_directory(path: str) -> str:
    """Return the directory part of a path, '' when it has none."""
    directory = posixpath.dirname(strip_url_suffix(path))
    return '' if directory == '.' else directory

# Exported functions
__all__ = [
    'split_url_path',
    'strip_url_suffix',
    'normalize_url_path',
    'join_url_path',
    'url_directory',
]
