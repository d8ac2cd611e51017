"""Configuration utility for CSS Optimizer."""

# Project version
VERSION = "1.0.0"

# File size limits (in bytes)
MAX_CSS_SIZE = 5 * 1024 * 1024      # 5 MB

# Import depth
MAX_IMPORT_DEPTH = 10

# Encodings
DEFAULT_ENCODING = 'utf-8'
ENCODING_CONFIDENCE = 0.5

# Raise on unterminated comments, strings and url() instead of recovering
STRICT_PARSING = False

# Logging
LOG_LEVEL = 'INFO'

# Exported config
__all__ = [
    'VERSION',
    'MAX_CSS_SIZE', 'MAX_IMPORT_DEPTH',
    'DEFAULT_ENCODING', 'ENCODING_CONFIDENCE',
    'STRICT_PARSING', 'LOG_LEVEL',
]
