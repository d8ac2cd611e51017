"""@import resolution for CSS Optimizer."""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
from ..core.loader import CssLoader
from ..core.scanner import Region, RegionKind, scan
from ..core.urls import UrlKind, classify_url, rewrite_urls
from ..utils.config import MAX_IMPORT_DEPTH, STRICT_PARSING
from ..utils.error import CircularImportError, CSSOptimizerError, ImportDepthError
from ..utils.path import join_url_path, strip_url_suffix, url_directory
from ..utils.security import PathGuard
from .base import BaseManager

_IMPORT_KEYWORD_RE = re.compile(r'@import(?![\w\-])', re.IGNORECASE)
_IMPORT_STATEMENT_RE = re.compile(
    r'@import[ \t\r\n\f]*'
    r'(?:url\([ \t\r\n\f]*'
    r'(?:(?P<url_quote>["\'])(?P<quoted_url>.*?)(?P=url_quote)|(?P<bare_url>[^"\'()\s]*))'
    r'[ \t\r\n\f]*\)'
    r'|(?P<quote>["\'])(?P<string>.*?)(?P=quote))'
    r'(?P<conditions>[^;{}]*);',
    re.IGNORECASE | re.DOTALL
)
# Conditions that cannot be expressed by wrapping the content in @media.
_UNSUPPORTED_CONDITIONS_RE = re.compile(r'(?:supports\s*\(|layer\b)', re.IGNORECASE)
_COMMENT_KINDS = (RegionKind.COMMENT, RegionKind.HACK_COMMENT)

@dataclass(frozen=True)
class ImportStatement:
    """An @import rule found in stylesheet code."""
    start: int
    end: int
    text: str
    target: str
    quote: str = ''
    conditions: str = ''

    @classmethod
    def from_match(cls, match, source: str) -> 'ImportStatement':
        """Build a statement from a match against comment-masked text.

        Args:
            match: Match of the statement pattern
            source: Unmasked text the statement is copied from
        """
        if match.group('quote'):
            target, quote = match.group('string'), match.group('quote')
        elif match.group('url_quote'):
            target, quote = match.group('quoted_url'), match.group('url_quote')
        else:
            target, quote = match.group('bare_url'), ''
        return cls(match.start(), match.end(), source[match.start():match.end()], target, quote,
                   match.group('conditions'))

    @property
    def kind(self) -> UrlKind:
        return classify_url(self.target, quoted=bool(self.quote))

    @property
    def is_local(self) -> bool:
        return self.kind is UrlKind.RELATIVE

    @property
    def media(self) -> str:
        return ' '.join(self.conditions.split())

    @property
    def can_inline(self) -> bool:
        return self.is_local and not _UNSUPPORTED_CONDITIONS_RE.match(self.media)

def _mask_comments(regions: List[Region]) -> str:
    """Replace every comment with spaces of the same length."""
    parts = []
    for region in regions:
        if region.kind in _COMMENT_KINDS:
            parts.append(' ' * (region.end - region.start))
        else:
            parts.append(region.text)
    return ''.join(parts)

def find_imports(text: str, strict: bool = STRICT_PARSING) -> List[ImportStatement]:
    """Find the @import rules of a stylesheet, ignoring comments and strings.

    Comments inside a statement are allowed and left out of its conditions.

    Args:
        text: Stylesheet text
        strict: Raise on unterminated constructs

    Returns:
        Statements in source order
    """
    regions = scan(text, strict=strict)
    masked = _mask_comments(regions)
    statements = []
    position = 0
    for region in regions:
        if region.kind is not RegionKind.CODE or region.end <= position:
            continue
        for keyword in _IMPORT_KEYWORD_RE.finditer(masked, max(region.start, position), region.end):
            if keyword.start() < position:
                continue
            match = _IMPORT_STATEMENT_RE.match(masked, keyword.start())
            if match:
                statements.append(ImportStatement.from_match(match, text))
                position = match.end()
    return statements

class ImportStack:
    """Stylesheets currently being resolved, outermost first."""

    def __init__(self, max_depth: int = MAX_IMPORT_DEPTH):
        """Initialize import stack.

        Args:
            max_depth: Deepest allowed level of nested imports

        Raises:
            ValueError: If max_depth is negative
        """
        if max_depth < 0:
            raise ValueError("Maximum import depth cannot be negative")
        self.max_depth = max_depth
        self._entries: List[Tuple[str, str]] = []
        self._keys = set()
        self.deepest = 0

    @property
    def depth(self) -> int:
        """Nesting level of the innermost stylesheet, 0 for the entry file."""
        return len(self._entries) - 1

    def push(self, key: str, path: str) -> None:
        """Enter a stylesheet.

        Args:
            key: Canonical identity of the file
            path: Path used in messages

        Raises:
            CircularImportError: If the file is already being resolved
            ImportDepthError: If the maximum depth would be exceeded
        """
        if key in self._keys:
            chain = ' -> '.join([entry_path for _, entry_path in self._entries] + [path])
            raise CircularImportError(f"Circular @import detected: {chain}")
        if len(self._entries) > self.max_depth:
            raise ImportDepthError(
                f"Importing {path} exceeds the maximum @import depth of {self.max_depth}"
            )
        self._entries.append((key, path))
        self._keys.add(key)
        self.deepest = max(self.deepest, self.depth)

    def pop(self) -> str:
        """Leave the innermost stylesheet and return its path."""
        key, path = self._entries.pop()
        self._keys.discard(key)
        return path

    def clear(self) -> None:
        self._entries.clear()
        self._keys.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._entries)

class ImportManager(BaseManager):
    """Inline local @import rules depth-first, keeping external ones."""

    def __init__(self, loader: Optional[CssLoader] = None, guard: Optional[PathGuard] = None,
                 max_depth: int = MAX_IMPORT_DEPTH, strict: bool = STRICT_PARSING):
        """Initialize import manager.

        Args:
            loader: Loader used for imported files
            guard: Restricts which files may be imported
            max_depth: Deepest allowed level of nested imports
            strict: Raise on unterminated constructs
        """
        super().__init__()
        self.loader = loader or CssLoader()
        self.guard = guard or PathGuard()
        self.strict = strict
        self.stack = ImportStack(max_depth)
        self.stats = {
            'files_loaded': 0,
            'imports_inlined': 0,
            'imports_kept': 0,
        }

    def resolve_file(self, path: str) -> str:
        """Load a stylesheet and inline its imports."""
        sheet = self.loader.load(path)
        self.stats['files_loaded'] += 1
        return self.resolve(sheet.path, sheet.text)

    def resolve(self, entry_path: str, entry_text: str) -> str:
        """Inline the local imports of a stylesheet.

        Relative url() references of imported files are rewritten to be
        relative to the directory of ``entry_path``.

        Args:
            entry_path: Path of the stylesheet
            entry_text: Decoded stylesheet text

        Returns:
            Text without local @import rules

        Raises:
            CircularImportError: On import cycles or excessive nesting
            IoError: If an imported file cannot be read
        """
        self.stack.push(self.loader.file_system.realpath(entry_path), entry_path)
        try:
            return self._inline_imports(entry_path, entry_text)
        finally:
            self.stack.pop()

    def _inline_imports(self, path: str, text: str) -> str:
        statements = find_imports(text, self.strict)
        if not statements:
            return text
        directory = url_directory(path)
        parts = []
        cursor = 0
        for statement in statements:
            parts.append(text[cursor:statement.start])
            parts.append(self._expand(statement, path, directory))
            cursor = statement.end
        parts.append(text[cursor:])
        return ''.join(parts)

    def _expand(self, statement: ImportStatement, importer: str, directory: str) -> str:
        if not statement.can_inline:
            self.stats['imports_kept'] += 1
            self.log_debug(f"Keeping @import of {statement.target} in {importer}")
            return statement.text

        target = strip_url_suffix(statement.target)
        path = join_url_path(directory, target)
        self.guard.check(path)
        self.stack.push(self.loader.file_system.realpath(path), path)
        try:
            sheet = self.loader.load(path)
            self.stats['files_loaded'] += 1
            content = self._inline_imports(path, sheet.text)
        except CSSOptimizerError as e:
            if not isinstance(e, CircularImportError):
                self.log_error(f"Failed to import {path} from {importer}", e)
            raise
        finally:
            self.stack.pop()
        self.stats['imports_inlined'] += 1
        self.log_debug(f"Inlined {path} into {importer}")

        prefix = url_directory(target)
        if prefix:
            content = rewrite_urls(content, lambda reference: join_url_path(prefix, reference.argument),
                                   strict=self.strict)
        if statement.media:
            content = f"@media {statement.media}{{\n{content}\n}}"
        return content

    def get_stats(self) -> Dict[str, Any]:
        stats = dict(self.stats)
        stats['max_depth'] = self.stack.deepest
        return stats

    def cleanup(self) -> None:
        self.stack.clear()

# Exported names
__all__ = ['ImportStatement', 'ImportStack', 'ImportManager', 'find_imports']
