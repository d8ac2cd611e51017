"""Core functionality for CSS loading, scanning and optimization."""

from .asset import AssetKind, AssetDescriptor
from .loader import CssLoader, LoadedStylesheet, decode_css, strip_charset
from .minifier import CssMinifier, minify
from .optimizer import CssOptimizer
from .scanner import CssScanner, Region, RegionKind, ScanState, scan
from .urls import BasePathUrlGenerator, UrlGenerator, UrlKind, UrlReference, classify_url
from .validator import validate_asset

__all__ = [
    'AssetKind',
    'AssetDescriptor',
    'CssLoader',
    'LoadedStylesheet',
    'decode_css',
    'strip_charset',
    'CssMinifier',
    'minify',
    'CssOptimizer',
    'CssScanner',
    'Region',
    'RegionKind',
    'ScanState',
    'scan',
    'BasePathUrlGenerator',
    'UrlGenerator',
    'UrlKind',
    'UrlReference',
    'classify_url',
    'validate_asset',
]
