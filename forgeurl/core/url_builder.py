"""Canonical URLs for forge entities.

Usage::

    from forgeurl import build

    build(issue)                        # "https://forge.example.com/g/p/-/issues/3"
    build(issue, only_path=True)        # "/g/p/-/issues/3"
    build(snippet, raw=True)            # ".../snippets/42/raw"
    build(design, ref="main", size="v432x230")
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from forgeurl import config
from forgeurl.core.kinds import classify
from forgeurl.core.options import UrlOptions
from forgeurl.core.paths import build_path

logger = logging.getLogger(__name__)


class UrlBuilder:
    """Turns entities into absolute URLs or paths.

    Args:
        base_url_getter: Returns the base URL; called on every build so
            configuration changes are picked up. Defaults to
            :func:`forgeurl.config.get_base_url`.
    """

    _instance: "UrlBuilder | None" = None
    _instance_lock = threading.Lock()

    def __init__(self, base_url_getter: Callable[[], str] | None = None):
        self._base_url_getter = base_url_getter or config.get_base_url

    @classmethod
    def instance(cls) -> "UrlBuilder":
        """Return the shared builder that reads the process-wide config."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def build(self, entity: Any, **options: Any) -> str:
        """Return the URL of *entity*.

        Args:
            entity: A forge entity or a deferred placeholder for one.
            **options: ``only_path``, ``raw``, ``ref`` and ``size``; other
                keys are ignored.

        Returns:
            The absolute URL, the path alone when ``only_path`` is set, or
            ``""`` when a relation the path needs is missing.

        Raises:
            UnsupportedTypeError: If the entity's class has no URL.
        """
        url_options = UrlOptions.from_kwargs(**options)
        kind = classify(entity)
        path = build_path(kind, entity, url_options)
        if path is None:
            logger.debug("No URL for %s: missing relation", kind.value)
            return ""
        if url_options.only_path:
            return path
        return f"{self._base_url_getter()}{path}"


def build(entity: Any, **options: Any) -> str:
    """Build a URL with the shared :class:`UrlBuilder`."""
    return UrlBuilder.instance().build(entity, **options)
