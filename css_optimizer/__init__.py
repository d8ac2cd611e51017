"""CSS Optimizer: minify file CSS assets with their imports inlined."""

from .core import (
    AssetDescriptor,
    AssetKind,
    BasePathUrlGenerator,
    CssMinifier,
    CssOptimizer,
    UrlGenerator,
    minify,
)
from .utils.config import VERSION
from .utils.error import (
    CSSOptimizerError,
    CircularImportError,
    ImportDepthError,
    IoError,
    MalformedCssError,
    PathTraversalError,
    PreprocessingDisabledError,
    ResourceLimitError,
    UnsupportedAssetError,
    ValidationError,
)

__version__ = VERSION

__all__ = [
    'AssetDescriptor',
    'AssetKind',
    'BasePathUrlGenerator',
    'CssMinifier',
    'CssOptimizer',
    'UrlGenerator',
    'minify',
    'CSSOptimizerError',
    'CircularImportError',
    'ImportDepthError',
    'IoError',
    'MalformedCssError',
    'PathTraversalError',
    'PreprocessingDisabledError',
    'ResourceLimitError',
    'UnsupportedAssetError',
    'ValidationError',
]
