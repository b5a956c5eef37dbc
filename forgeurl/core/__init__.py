"""URL resolution for forge entities."""

from forgeurl.core.kinds import Kind, UnsupportedTypeError, classify
from forgeurl.core.lazy import BatchLoader, Lazy, is_lazy, unwrap
from forgeurl.core.options import UrlOptions
from forgeurl.core.paths import PATH_BUILDERS, build_path
from forgeurl.core.url_builder import UrlBuilder, build

__all__ = [
    # Classification
    "Kind",
    "UnsupportedTypeError",
    "classify",
    # Paths
    "PATH_BUILDERS",
    "build_path",
    # Composer
    "UrlBuilder",
    "UrlOptions",
    "build",
    # Deferred placeholders
    "BatchLoader",
    "Lazy",
    "is_lazy",
    "unwrap",
]
