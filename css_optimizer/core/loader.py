"""Loading and decoding of stylesheet files."""

import re
import codecs
import logging
from dataclasses import dataclass
from typing import Optional, Tuple
import chardet
from ..utils.config import DEFAULT_ENCODING, ENCODING_CONFIDENCE
from ..utils.file import FileSystem, LocalFileSystem
from ..utils.path import url_directory

logger = logging.getLogger(__name__)

BOMS = (
    (codecs.BOM_UTF8, 'utf-8'),
    (codecs.BOM_UTF16_LE, 'utf-16-le'),
    (codecs.BOM_UTF16_BE, 'utf-16-be'),
)

_CHARSET_BYTES_RE = re.compile(rb'^[ \t\r\n\f]*@charset[ \t]+(["\'])([^"\'\r\n]+)\1[ \t]*;[ \t]*(?:\r\n|\n|\r)?')
_CHARSET_TEXT_RE = re.compile(r'^[ \t\r\n\f]*@charset[ \t]+(["\'])[^"\'\r\n]*\1[ \t]*;[ \t]*(?:\r\n|\n|\r)?', re.IGNORECASE)

@dataclass(frozen=True)
class LoadedStylesheet:
    """Decoded stylesheet text and the directory its references are relative to."""
    path: str
    base_directory: str
    text: str
    encoding: str = DEFAULT_ENCODING

def detect_bom(data: bytes) -> Optional[Tuple[str, int]]:
    """Detect a byte-order mark.

    Args:
        data: Raw file contents

    Returns:
        Tuple of (encoding, mark length), or None without a mark
    """
    for bom, encoding in BOMS:
        if data.startswith(bom):
            return encoding, len(bom)
    return None

def strip_charset(text: str) -> str:
    """Remove a leading @charset rule and the line break that follows it.

    Args:
        text: Decoded stylesheet text

    Returns:
        Text without the rule
    """
    return _CHARSET_TEXT_RE.sub('', text, count=1)

def _detect_encoding(data: bytes) -> Optional[str]:
    result = chardet.detect(data)
    encoding = result.get('encoding')
    if encoding and (result.get('confidence') or 0) >= ENCODING_CONFIDENCE:
        return encoding
    return None

def _decode_default(data: bytes) -> Tuple[str, str]:
    try:
        return data.decode(DEFAULT_ENCODING), DEFAULT_ENCODING
    except UnicodeDecodeError as e:
        encoding = _detect_encoding(data)
        if encoding:
            try:
                logger.warning(f"Stylesheet is not valid {DEFAULT_ENCODING} ({e}), decoding as {encoding}")
                return data.decode(encoding), encoding
            except (LookupError, UnicodeDecodeError):
                pass
        logger.warning(f"Stylesheet is not valid {DEFAULT_ENCODING} ({e}), replacing undecodable bytes")
        return data.decode(DEFAULT_ENCODING, errors='replace'), DEFAULT_ENCODING

def decode_css(data: bytes) -> Tuple[str, str]:
    """Decode raw stylesheet bytes.

    A byte-order mark wins, then a leading @charset rule, then UTF-8. The
    returned text never contains the mark or a leading @charset rule.

    Args:
        data: Raw file contents

    Returns:
        Tuple of (text, encoding used)
    """
    bom = detect_bom(data)
    if bom:
        encoding, length = bom
        try:
            text = data[length:].decode(encoding)
        except UnicodeDecodeError as e:
            logger.warning(f"Invalid {encoding} after byte-order mark ({e}), replacing undecodable bytes")
            text = data[length:].decode(encoding, errors='replace')
        return strip_charset(text), encoding

    match = _CHARSET_BYTES_RE.match(data)
    if match:
        name = match.group(2).decode('ascii', errors='replace').strip()
        try:
            encoding = codecs.lookup(name).name
        except LookupError:
            logger.warning(f"Unknown @charset {name!r}, falling back to {DEFAULT_ENCODING}")
        else:
            remainder = data[match.end():]
            try:
                return remainder.decode(encoding), encoding
            except UnicodeDecodeError as e:
                logger.warning(f"Stylesheet does not match its @charset {name!r} ({e})")

    text, encoding = _decode_default(data)
    return strip_charset(text), encoding

class CssLoader:
    """Reads stylesheet files through a file system capability."""

    def __init__(self, file_system: Optional[FileSystem] = None):
        self.file_system = file_system or LocalFileSystem()

    def load(self, path: str) -> LoadedStylesheet:
        """Load and decode a stylesheet.

        Args:
            path: Stylesheet path

        Returns:
            LoadedStylesheet

        Raises:
            IoError: If the file cannot be read
            ResourceLimitError: If the file is too large
        """
        data = self.file_system.read(path)
        text, encoding = decode_css(data)
        logger.debug(f"Loaded {path} ({len(data)} bytes, {encoding})")
        return LoadedStylesheet(path, url_directory(path), text, encoding)

# Exported names
__all__ = [
    'BOMS',
    'LoadedStylesheet',
    'CssLoader',
    'detect_bom',
    'decode_css',
    'strip_charset',
]
