"""url() references and the URL generation collaborator."""

import re
from enum import Enum
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import quote
from typing_extensions import Protocol, runtime_checkable
from .scanner import RegionKind, scan

_SCHEME_RE = re.compile(r'[a-zA-Z][a-zA-Z0-9+.\-]*:')
_URL_FUNCTION_RE = re.compile(r'(?P<function>url)\(\s*(?P<body>.*?)\s*\)\Z', re.IGNORECASE | re.DOTALL)
_OPAQUE_CHARS = frozenset('"\'() \t\r\n\f\\')
# Spaces and parentheses are legal inside a quoted argument.
_QUOTED_OPAQUE_CHARS = frozenset('\r\n\f')

class UrlKind(Enum):
    """Classification of a url() argument."""
    ABSOLUTE = 'absolute'
    PROTOCOL_RELATIVE = 'protocol-relative'
    DATA_URI = 'data'
    FRAGMENT = 'fragment'
    OPAQUE = 'opaque'
    RELATIVE = 'relative'

def classify_url(argument: str, quoted: bool = False) -> UrlKind:
    """Classify a url() or @import argument.

    Args:
        argument: Argument without its quotes
        quoted: Whether the argument was written between quotes

    Returns:
        UrlKind of the argument
    """
    opaque = _QUOTED_OPAQUE_CHARS if quoted else _OPAQUE_CHARS
    if not argument or any(c in opaque for c in argument):
        return UrlKind.OPAQUE
    if argument[:5].lower() == 'data:':
        return UrlKind.DATA_URI
    if argument.startswith('//'):
        return UrlKind.PROTOCOL_RELATIVE
    if argument.startswith('/') or _SCHEME_RE.match(argument):
        return UrlKind.ABSOLUTE
    if argument.startswith('#') or argument[:3].lower() == '%23':
        return UrlKind.FRAGMENT
    return UrlKind.RELATIVE

@dataclass(frozen=True)
class UrlReference:
    """A url(...) occurrence with its raw argument and quote style."""
    function: str
    argument: str
    quote: str = ''

    @classmethod
    def parse(cls, text: str) -> Optional['UrlReference']:
        """Parse the text of a url region, None if it is not a complete url()."""
        match = _URL_FUNCTION_RE.match(text)
        if not match:
            return None
        body = match.group('body')
        if len(body) >= 2 and body[0] in '"\'' and body[-1] == body[0]:
            return cls(match.group('function'), body[1:-1], body[0])
        return cls(match.group('function'), body)

    @property
    def kind(self) -> UrlKind:
        return classify_url(self.argument, quoted=bool(self.quote))

    @property
    def is_relative(self) -> bool:
        return self.kind is UrlKind.RELATIVE

    def with_argument(self, argument: str) -> str:
        """Render the reference with a new argument, keeping function name and quotes."""
        return f"{self.function}({self.quote}{argument}{self.quote})"

@runtime_checkable
class UrlGenerator(Protocol):
    """Maps a local file reference to a publicly servable URL."""

    def generate(self, local_uri: str) -> str:
        ...

class BasePathUrlGenerator:
    """Serve local files below a fixed base path, e.g. ``/`` or ``/static/``."""

    def __init__(self, base_path: str = '/'):
        self.base_path = base_path if base_path.endswith('/') else base_path + '/'

    def generate(self, local_uri: str) -> str:
        return self.base_path + quote(local_uri.lstrip('/'), safe="/?#&=%+:;,@!$~*.-_")

def rewrite_urls(text: str, rewrite: Callable[[UrlReference], Optional[str]],
                 strict: bool = False) -> str:
    """Rewrite the relative url() references of a stylesheet.

    Everything other than relative url() references is copied unchanged.

    Args:
        text: Stylesheet text
        rewrite: Called with each relative reference, returns the new argument
            or None to keep the reference as it is
        strict: Raise on unterminated constructs

    Returns:
        Rewritten text
    """
    parts = []
    for region in scan(text, strict=strict):
        if region.kind is RegionKind.URL:
            reference = UrlReference.parse(region.text)
            if reference is not None and reference.is_relative:
                argument = rewrite(reference)
                if argument is not None:
                    parts.append(reference.with_argument(argument))
                    continue
        parts.append(region.text)
    return ''.join(parts)

# Exported names
__all__ = [
    'UrlKind',
    'UrlReference',
    'UrlGenerator',
    'BasePathUrlGenerator',
    'classify_url',
    'rewrite_urls',
]
