"""
forgeurl - Canonical URLs for code-forge entities.

Copyright (c) 2026 Nexus Team
Licensed under Apache 2.0
"""

__version__ = "0.1.0"

from forgeurl.config import ConfigurationError, get_base_url, reset_base_url, set_base_url
from forgeurl.core import (
    BatchLoader,
    Kind,
    Lazy,
    UnsupportedTypeError,
    UrlBuilder,
    UrlOptions,
    build,
    classify,
)

__all__ = [
    # Version
    "__version__",
    # Builder
    "UrlBuilder",
    "UrlOptions",
    "build",
    # Classification
    "Kind",
    "UnsupportedTypeError",
    "classify",
    # Deferred placeholders
    "BatchLoader",
    "Lazy",
    # Configuration
    "ConfigurationError",
    "get_base_url",
    "set_base_url",
    "reset_base_url",
]
