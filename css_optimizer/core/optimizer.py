"""Core CSS optimization functionality."""

import logging
from typing import Any, Mapping, Optional, Union
from ..managers.imports import ImportManager
from ..utils.config import MAX_IMPORT_DEPTH, STRICT_PARSING
from ..utils.file import FileSystem, LocalFileSystem
from ..utils.path import url_directory
from ..utils.security import PathGuard
from .asset import AssetDescriptor
from .loader import CssLoader, strip_charset
from .minifier import CssMinifier
from .urls import UrlGenerator
from .validator import validate_asset

logger = logging.getLogger(__name__)

class CssOptimizer:
    """Optimizes file CSS assets for aggregation.

    The optimizer loads the stylesheet, inlines its local @import rules,
    removes comments and insignificant whitespace and passes relative url()
    references through the URL generator. It keeps no state between calls.
    """

    def __init__(self, url_generator: UrlGenerator, file_system: Optional[FileSystem] = None,
                 root: Optional[str] = None, max_import_depth: int = MAX_IMPORT_DEPTH,
                 strict: bool = STRICT_PARSING):
        """Initialize optimizer.

        Args:
            url_generator: Turns local file paths into public URLs
            file_system: Read capability, defaults to the local disk
            root: Directory imported files must stay within, None for no restriction
            max_import_depth: Deepest allowed level of nested imports
            strict: Raise MalformedCssError on unterminated constructs
        """
        self.url_generator = url_generator
        self.file_system = file_system or LocalFileSystem()
        self.guard = PathGuard(root)
        self.max_import_depth = max_import_depth
        self.strict = strict
        self.loader = CssLoader(self.file_system)
        self.minifier = CssMinifier(url_generator, strict=strict)

    def optimize(self, css_asset: Union[AssetDescriptor, Mapping[str, Any]]) -> str:
        """Optimize a file CSS asset.

        Args:
            css_asset: Descriptor or asset definition mapping

        Returns:
            Optimized stylesheet

        Raises:
            UnsupportedAssetError: If the asset is not a file asset
            PreprocessingDisabledError: If preprocessing is disabled
            IoError: If the stylesheet or one of its imports cannot be read
            CircularImportError: On import cycles or excessive nesting
        """
        asset = validate_asset(css_asset)
        return self.process_file(asset)

    def process_file(self, asset: AssetDescriptor) -> str:
        """Load, inline and minify a validated asset."""
        contents = self.load_file(asset.source_path)
        optimized = self.minifier.minify(contents, url_directory(asset.source_path))
        logger.info(f"Optimized {asset.source_path}: {len(contents)} -> {len(optimized)} characters")
        return optimized

    def load_file(self, path: str, optimize: bool = False) -> str:
        """Load a stylesheet with its local imports inlined.

        url() references of imported files are made relative to ``path``'s
        directory but are not passed to the URL generator.

        Args:
            path: Stylesheet path
            optimize: Also remove comments and insignificant whitespace

        Returns:
            Stylesheet text
        """
        with ImportManager(self.loader, self.guard, self.max_import_depth, self.strict) as imports:
            contents = imports.resolve_file(path)
            imports.log_debug(f"Resolved {path}: {imports.get_stats()}")
        if optimize:
            contents = CssMinifier(strict=self.strict).minify(contents)
        return contents

    def clean(self, contents: str) -> str:
        """Remove a leading @charset rule."""
        return strip_charset(contents)

    def rewrite_file_uri(self, argument: str, base_directory: str) -> str:
        """Generate the public URL of a url() argument relative to ``base_directory``."""
        return self.minifier.rewrite_url(argument, base_directory)

# Exported class
__all__ = ['CssOptimizer']
