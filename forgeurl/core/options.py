"""Rendering options accepted by the URL builder."""

import logging
from dataclasses import dataclass, fields
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UrlOptions:
    """Options that change how a URL is rendered.

    Attributes:
        only_path: Return the path without the base URL.
        raw: Link to the raw content (snippets only).
        ref: Version of a design to link to (designs only).
        size: Resized image variant, used together with ``ref`` (designs only).
    """

    only_path: bool = False
    raw: bool = False
    ref: str | None = None
    size: str | None = None

    @classmethod
    def from_kwargs(cls, **options: Any) -> "UrlOptions":
        """Build options from keyword arguments, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            logger.debug("Ignoring unsupported URL options: %s", ", ".join(unknown))
        return cls(
            only_path=bool(options.get("only_path", False)),
            raw=bool(options.get("raw", False)),
            ref=options.get("ref") or None,
            size=options.get("size") or None,
        )
