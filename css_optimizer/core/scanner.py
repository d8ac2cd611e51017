"""Tagged-state CSS scanner.

The scanner is not a CSS parser. It splits a stylesheet into regions that
the minifier and the import resolver treat differently:

- ``COMMENT``: an ordinary ``/* ... */`` comment
- ``HACK_COMMENT``: a comment that legacy browsers interpret, kept verbatim
- ``STRING``: a single or double quoted string
- ``URL``: a ``url(...)`` function, including its parentheses
- ``CODE``: everything else

Regions never overlap, and joining their texts yields the input exactly.

Two browser hacks are recognized:

- Mac-IE5: a comment whose body ends with a backslash (``/* \\*/``) hides
  the following rules from IE5/Mac until the next comment, so both the
  opening comment and the next comment are kept.
- IE7: an empty comment directly after a child combinator (``>/**/``).
"""

import re
import logging
from enum import Enum
from dataclasses import dataclass
from typing import List, Optional
from ..utils.config import STRICT_PARSING
from ..utils.error import MalformedCssError

logger = logging.getLogger(__name__)

class ScanState(Enum):
    """States of the scanner."""
    NORMAL = 'normal'
    IN_COMMENT = 'comment'
    IN_SINGLE_QUOTE_STRING = 'single-quote string'
    IN_DOUBLE_QUOTE_STRING = 'double-quote string'
    IN_URL = 'url'

class RegionKind(Enum):
    """Kinds of regions produced by the scanner."""
    COMMENT = 'comment'
    HACK_COMMENT = 'hack-comment'
    STRING = 'string'
    URL = 'url'
    CODE = 'code'

@dataclass(frozen=True)
class Region:
    """A contiguous slice of the scanned text."""
    kind: RegionKind
    start: int
    end: int
    text: str

# Escapes in code, comment openers, quotes and url( not preceded by an identifier character.
_NORMAL_TRIGGER_RE = re.compile(r'\\[\s\S]|/\*|[\'"]|(?<![\w\-\\])url\(', re.IGNORECASE)
_STRING_BODY_RE = {
    "'": re.compile(r"[^'\\]*(?:\\[\s\S][^'\\]*)*'"),
    '"': re.compile(r'[^"\\]*(?:\\[\s\S][^"\\]*)*"'),
}
_URL_BODY_RE = re.compile(r'[^)\\]*(?:\\[\s\S][^)\\]*)*\)')
_WHITESPACE_RE = re.compile(r'[ \t\r\n\f]*')
_WHITESPACE_CHARS = frozenset(' \t\r\n\f')

_QUOTE_STATES = {
    "'": ScanState.IN_SINGLE_QUOTE_STRING,
    '"': ScanState.IN_DOUBLE_QUOTE_STRING,
}

class CssScanner:
    """Single left-to-right scan of a stylesheet into regions."""

    def __init__(self, text: str, strict: bool = STRICT_PARSING):
        """Initialize scanner.

        Args:
            text: Stylesheet text
            strict: Raise MalformedCssError on unterminated constructs
                instead of treating the remainder as code
        """
        self.text = text
        self.strict = strict
        self.state = ScanState.NORMAL
        self.pos = 0
        self.regions: List[Region] = []
        self._region_start = 0
        self._in_mac_hack = False
        self._handlers = {
            ScanState.NORMAL: self._scan_normal,
            ScanState.IN_COMMENT: self._scan_comment,
            ScanState.IN_SINGLE_QUOTE_STRING: self._scan_string,
            ScanState.IN_DOUBLE_QUOTE_STRING: self._scan_string,
            ScanState.IN_URL: self._scan_url,
        }

    def scan(self) -> List[Region]:
        """Scan the whole text.

        Returns:
            Regions partitioning the text

        Raises:
            MalformedCssError: In strict mode, on unterminated constructs
        """
        while self.pos < len(self.text):
            self._handlers[self.state]()
        if self.state is not ScanState.NORMAL:
            self._unterminated()
        self._emit(RegionKind.CODE, len(self.text))
        return self.regions

    def _emit(self, kind: RegionKind, end: int) -> None:
        if end > self._region_start:
            self.regions.append(Region(kind, self._region_start, end, self.text[self._region_start:end]))
        self._region_start = end

    def _enter(self, state: ScanState, start: int, pos: int) -> None:
        self._emit(RegionKind.CODE, start)
        self.state = state
        self.pos = pos

    def _leave(self, kind: RegionKind, end: int) -> None:
        self._emit(kind, end)
        self.state = ScanState.NORMAL
        self.pos = end

    def _scan_normal(self) -> None:
        match = _NORMAL_TRIGGER_RE.search(self.text, self.pos)
        if not match:
            self.pos = len(self.text)
            return
        token = match.group()
        if token[0] == '\\':
            self.pos = match.end()
        elif token == '/*':
            self._enter(ScanState.IN_COMMENT, match.start(), match.end())
        elif token in _QUOTE_STATES:
            self._enter(_QUOTE_STATES[token], match.start(), match.end())
        else:
            self._enter(ScanState.IN_URL, match.start(), match.end())

    def _scan_comment(self) -> None:
        close = self.text.find('*/', self.pos)
        if close == -1:
            self.pos = len(self.text)
            return
        end = close + 2
        body = self.text[self._region_start + 2:close]
        self._leave(self._comment_kind(body), end)

    def _comment_kind(self, body: str) -> RegionKind:
        if self._in_mac_hack:
            self._in_mac_hack = False
            return RegionKind.HACK_COMMENT
        if body.endswith('\\'):
            self._in_mac_hack = True
            return RegionKind.HACK_COMMENT
        if not body and self._preceding_char() == '>':
            return RegionKind.HACK_COMMENT
        return RegionKind.COMMENT

    def _preceding_char(self) -> str:
        pos = self._region_start
        while pos > 0 and self.text[pos - 1] in _WHITESPACE_CHARS:
            pos -= 1
        return self.text[pos - 1] if pos else ''

    def _scan_string(self) -> None:
        quote = self.text[self._region_start]
        match = _STRING_BODY_RE[quote].match(self.text, self.pos)
        if not match:
            self.pos = len(self.text)
            return
        self._leave(RegionKind.STRING, match.end())

    def _scan_url(self) -> None:
        pos = _WHITESPACE_RE.match(self.text, self.pos).end()
        if pos < len(self.text) and self.text[pos] in _STRING_BODY_RE:
            string = _STRING_BODY_RE[self.text[pos]].match(self.text, pos + 1)
            if not string:
                self.pos = len(self.text)
                return
            pos = string.end()
        match = _URL_BODY_RE.match(self.text, pos)
        if not match:
            self.pos = len(self.text)
            return
        self._leave(RegionKind.URL, match.end())

    def _unterminated(self) -> None:
        message = f"Unterminated {self.state.value} starting at offset {self._region_start}"
        if self.strict:
            raise MalformedCssError(message)
        logger.warning(f"{message}, treating the remainder as code")
        self.state = ScanState.NORMAL

def scan(text: str, strict: Optional[bool] = None) -> List[Region]:
    """Scan text into regions.

    Args:
        text: Stylesheet text
        strict: Raise on unterminated constructs, defaults to STRICT_PARSING

    Returns:
        List of regions
    """
    return CssScanner(text, STRICT_PARSING if strict is None else strict).scan()

# Exported names
__all__ = ['ScanState', 'RegionKind', 'Region', 'CssScanner', 'scan']
