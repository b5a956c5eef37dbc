"""Classification of entities into URL kinds."""

import logging
from enum import Enum
from typing import Any

from forgeurl.core import models
from forgeurl.core.lazy import unwrap

logger = logging.getLogger(__name__)


class UnsupportedTypeError(NotImplementedError):
    """Raised when an object's class maps to no known kind."""

    def __init__(self, obj_type: type):
        self.obj_type = obj_type
        super().__init__(f"No URL builder defined for {obj_type.__qualname__}")


class Kind(Enum):
    """Closed set of entity kinds, one path rule each."""

    PROJECT = "project"
    GROUP = "group"
    COMMIT = "commit"
    ISSUE = "issue"
    MERGE_REQUEST = "merge_request"
    PROJECT_MILESTONE = "project_milestone"
    GROUP_MILESTONE = "group_milestone"
    PROJECT_SNIPPET = "project_snippet"
    PERSONAL_SNIPPET = "personal_snippet"
    WIKI = "wiki"
    WIKI_PAGE = "wiki_page"
    CI_BUILD = "ci_build"
    DESIGN = "design"
    USER = "user"
    NOTE = "note"


# Looked up along the MRO, so note variants (DiffNote, DiscussionNote,
# LegacyDiffNote) and host subclasses land on their base entry.
_KIND_BY_CLASS: dict[type, Kind] = {
    models.Project: Kind.PROJECT,
    models.Group: Kind.GROUP,
    models.Commit: Kind.COMMIT,
    models.Issue: Kind.ISSUE,
    models.MergeRequest: Kind.MERGE_REQUEST,
    models.ProjectSnippet: Kind.PROJECT_SNIPPET,
    models.PersonalSnippet: Kind.PERSONAL_SNIPPET,
    models.Wiki: Kind.WIKI,
    models.WikiPage: Kind.WIKI_PAGE,
    models.CiBuild: Kind.CI_BUILD,
    models.Design: Kind.DESIGN,
    models.User: Kind.USER,
    models.Note: Kind.NOTE,
}


def _milestone_kind(milestone: models.Milestone) -> Kind:
    if milestone.project_milestone:
        return Kind.PROJECT_MILESTONE
    return Kind.GROUP_MILESTONE


def classify(entity: Any) -> Kind:
    """Return the kind of *entity*.

    Deferred placeholders are forced first so the concrete class is inspected.

    Raises:
        UnsupportedTypeError: If the class matches no kind.
    """
    obj = unwrap(entity)
    for cls in type(obj).__mro__:
        if cls is models.Milestone:
            return _milestone_kind(obj)
        kind = _KIND_BY_CLASS.get(cls)
        if kind is not None:
            return kind
    logger.debug("Cannot classify %s for URL building", type(obj).__qualname__)
    raise UnsupportedTypeError(type(obj))
