"""CSS minification."""

import re
import logging
from typing import List, Optional
from ..utils.config import STRICT_PARSING
from ..utils.path import join_url_path
from .scanner import Region, RegionKind, scan
from .urls import UrlGenerator, UrlReference

logger = logging.getLogger(__name__)

# Whitespace around these is never significant.
STRIP_AROUND = frozenset('{};,')
# Whitespace after an opening parenthesis or a colon can go, but not before:
# "@media (a) and (b)" and ".menu :hover" depend on it.
STRIP_AFTER = STRIP_AROUND | frozenset('(:')
STRIP_BEFORE = STRIP_AROUND | frozenset(')')

_CODE_TOKEN_RE = re.compile(
    r'(?P<space>[ \t\r\n\f]+)'
    r'|(?P<escape>\\[\s\S]?)'
    r'|(?P<word>[^ \t\r\n\f\\{};,:()]+)'
    r'|(?P<punct>[\s\S])'
)
_BLOCK_BOUNDARY_RE = re.compile(r'[{};]')
_BLOCK_BOUNDARIES = frozenset('{};')

class _CompactWriter:
    """Collects output tokens, deciding where a collapsed space survives."""

    def __init__(self):
        self.parts: List[str] = []
        self.last = ''
        self.last_escaped = False
        self.pending_space = False
        self.at_rule = False
        self.parens = 0

    @property
    def in_at_rule_parens(self) -> bool:
        """Inside parentheses of an at-rule prelude, e.g. a media feature."""
        return self.at_rule and self.parens > 0

    def space(self) -> None:
        if self.parts:
            self.pending_space = True

    def write(self, token: str, strip_before: bool = False, escaped: bool = False) -> None:
        if self.pending_space and not strip_before:
            if self.last_escaped or self.last not in STRIP_AFTER:
                self.parts.append(' ')
        self.pending_space = False
        self.parts.append(token)
        self.last = token[-1]
        self.last_escaped = escaped
        if not escaped:
            self._track(token)

    def _track(self, token: str) -> None:
        if token[0] == '@':
            self.at_rule = True
        elif token in _BLOCK_BOUNDARIES:
            self.at_rule = False
            self.parens = 0
        elif token == '(':
            self.parens += 1
        elif token == ')' and self.parens:
            self.parens -= 1

    def getvalue(self) -> str:
        return ''.join(self.parts)

class CssMinifier:
    """Remove comments and insignificant whitespace, rewriting relative url()s."""

    def __init__(self, url_generator: Optional[UrlGenerator] = None, strict: bool = STRICT_PARSING):
        """Initialize minifier.

        Args:
            url_generator: Collaborator turning local paths into public URLs,
                None to leave url() references alone
            strict: Raise MalformedCssError on unterminated constructs
        """
        self.url_generator = url_generator
        self.strict = strict

    def minify(self, text: str, base_directory: str = '') -> str:
        """Minify a stylesheet.

        Args:
            text: Stylesheet text
            base_directory: Directory relative url() references are resolved
                against before being passed to the URL generator

        Returns:
            Minified text ending with a newline, or '' for an empty stylesheet
        """
        regions = scan(text, strict=self.strict)
        following = self._following_boundaries(regions)
        writer = _CompactWriter()
        for index, region in enumerate(regions):
            if region.kind is RegionKind.CODE:
                self._write_code(writer, region.text, following[index])
            elif region.kind is RegionKind.URL:
                writer.write(self._rewrite_region(region.text, base_directory))
            elif region.kind is not RegionKind.COMMENT:
                writer.write(region.text)
        result = writer.getvalue()
        logger.debug(f"Minified {len(text)} characters to {len(result)}")
        return result + '\n' if result else ''

    def rewrite_url(self, argument: str, base_directory: str) -> str:
        """Resolve a relative url() argument and pass it to the URL generator.

        Args:
            argument: Relative path as written in the stylesheet
            base_directory: Directory the path is relative to

        Returns:
            Generated URL
        """
        return self.url_generator.generate(join_url_path(base_directory, argument))

    def _rewrite_region(self, text: str, base_directory: str) -> str:
        if self.url_generator is None:
            return text
        reference = UrlReference.parse(text)
        if reference is None or not reference.is_relative:
            return text
        return reference.with_argument(self.rewrite_url(reference.argument, base_directory))

    def _write_code(self, writer: _CompactWriter, code: str, following: Optional[str]) -> None:
        # The next block boundary starts at boundary_at.
        boundary_at, boundary = -1, None
        for match in _CODE_TOKEN_RE.finditer(code):
            kind = match.lastgroup
            token = match.group()
            if kind == 'space':
                writer.space()
            elif kind == 'escape':
                writer.write(token, escaped=True)
            elif kind == 'word':
                writer.write(token)
            elif token == ':' and writer.pending_space:
                if writer.in_at_rule_parens:
                    writer.write(token, strip_before=True)
                    continue
                if boundary_at < match.end():
                    found = _BLOCK_BOUNDARY_RE.search(code, match.end())
                    if found:
                        boundary_at, boundary = found.start(), found.group()
                    else:
                        boundary_at, boundary = len(code), following
                writer.write(token, strip_before=self._is_declaration_colon(boundary))
            else:
                writer.write(token, strip_before=token in STRIP_BEFORE)

    @staticmethod
    def _following_boundaries(regions: List[Region]) -> List[Optional[str]]:
        """For each region, the first of { ; } in the code regions after it."""
        following: List[Optional[str]] = [None] * len(regions)
        boundary = None
        for index in range(len(regions) - 1, -1, -1):
            following[index] = boundary
            if regions[index].kind is RegionKind.CODE:
                match = _BLOCK_BOUNDARY_RE.search(regions[index].text)
                if match:
                    boundary = match.group()
        return following

    @staticmethod
    def _is_declaration_colon(boundary: Optional[str]) -> bool:
        """A colon separates a property from its value unless a block opens before the statement ends."""
        return boundary is not None and boundary != '{'

def minify(text: str, base_directory: str = '', url_generator: Optional[UrlGenerator] = None) -> str:
    """Minify text with a one-off CssMinifier."""
    return CssMinifier(url_generator).minify(text, base_directory)

# Exported names
__all__ = ['CssMinifier', 'minify', 'STRIP_AROUND', 'STRIP_AFTER', 'STRIP_BEFORE']
