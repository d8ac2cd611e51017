"""Error utility for CSS Optimizer."""

class CSSOptimizerError(Exception):
    """Base exception for CSS Optimizer."""
    pass

class ValidationError(CSSOptimizerError):
    """Raised when validation fails."""
    pass

class UnsupportedAssetError(ValidationError):
    """Raised when an asset is not a file asset."""
    pass

class PreprocessingDisabledError(ValidationError):
    """Raised when a file asset has preprocessing disabled."""
    pass

class PathTraversalError(ValidationError):
    """Raised when an import resolves outside the allowed root."""
    pass

class IoError(CSSOptimizerError):
    """Raised when a stylesheet cannot be read."""
    pass

class ResourceLimitError(CSSOptimizerError):
    """Raised when resource limits are exceeded."""
    pass

class CircularImportError(CSSOptimizerError):
    """Raised when a stylesheet imports itself, directly or transitively."""
    pass

class ImportDepthError(CircularImportError):
    """Raised when nested imports exceed the maximum depth."""
    pass

class MalformedCssError(CSSOptimizerError):
    """Raised in strict mode for unterminated comments, strings or urls."""
    pass

# Exported exceptions
__all__ = [
    'CSSOptimizerError',
    'ValidationError',
    'UnsupportedAssetError',
    'PreprocessingDisabledError',
    'PathTraversalError',
    'IoError',
    'ResourceLimitError',
    'CircularImportError',
    'ImportDepthError',
    'MalformedCssError',
]
