"""Path builders, one per :class:`~forgeurl.core.kinds.Kind`.

Each builder is a pure function of the entity's attributes and the rendering
options. A builder returns ``None`` when a relation it needs is missing; the
caller turns that into an empty URL.
"""

import logging
from collections.abc import Callable
from typing import Any

from forgeurl.core.kinds import Kind
from forgeurl.core.options import UrlOptions

logger = logging.getLogger(__name__)

PathBuilder = Callable[[Any, UrlOptions], str | None]


def _note_anchor(note: Any) -> str:
    return f"note_{note.id}"


# ---------------------------------------------------------------------------
# Namespaces
# ---------------------------------------------------------------------------


def project_path(project: Any, options: UrlOptions) -> str | None:
    return f"/{project.full_path}"


def group_path(group: Any, options: UrlOptions) -> str | None:
    return f"/groups/{group.full_path}"


def user_path(user: Any, options: UrlOptions) -> str | None:
    return f"/{user.full_path}"


# ---------------------------------------------------------------------------
# Project resources
# ---------------------------------------------------------------------------


def commit_path(commit: Any, options: UrlOptions) -> str | None:
    if not commit.project:
        return None
    return f"/{commit.project.full_path}/-/commit/{commit.id}"


def issue_path(issue: Any, options: UrlOptions) -> str | None:
    if not issue.project:
        return None
    return f"/{issue.project.full_path}/-/issues/{issue.iid}"


def merge_request_path(merge_request: Any, options: UrlOptions) -> str | None:
    if not merge_request.project:
        return None
    return f"/{merge_request.project.full_path}/-/merge_requests/{merge_request.iid}"


def project_milestone_path(milestone: Any, options: UrlOptions) -> str | None:
    if not milestone.project:
        return None
    return f"/{milestone.project.full_path}/-/milestones/{milestone.iid}"


def group_milestone_path(milestone: Any, options: UrlOptions) -> str | None:
    if not milestone.group:
        return None
    return f"/groups/{milestone.group.full_path}/-/milestones/{milestone.iid}"


def ci_build_path(build: Any, options: UrlOptions) -> str | None:
    if not build.project:
        return None
    return f"/{build.project.full_path}/-/jobs/{build.id}"


def design_path(design: Any, options: UrlOptions) -> str | None:
    if not design.project:
        return None
    if options.ref:
        variant = options.ref
        if options.size:
            variant = f"{options.ref}/resized_image/{options.size}"
    else:
        variant = "raw_image"
    return f"/{design.project.full_path}/-/design_management/designs/{design.id}/{variant}"


# ---------------------------------------------------------------------------
# Snippets
# ---------------------------------------------------------------------------


def _with_raw(path: str, options: UrlOptions) -> str:
    return f"{path}/raw" if options.raw else path


def project_snippet_path(snippet: Any, options: UrlOptions) -> str | None:
    if not snippet.project:
        return None
    return _with_raw(f"/{snippet.project.full_path}/snippets/{snippet.id}", options)


def personal_snippet_path(snippet: Any, options: UrlOptions) -> str | None:
    return _with_raw(f"/snippets/{snippet.id}", options)


# ---------------------------------------------------------------------------
# Wikis
# ---------------------------------------------------------------------------


def wiki_path(wiki: Any, options: UrlOptions) -> str | None:
    base_path = wiki.wiki_base_path
    if not base_path:
        return None
    return f"{base_path}/home"


def wiki_page_path(page: Any, options: UrlOptions) -> str | None:
    if not page.wiki:
        return None
    base_path = page.wiki.wiki_base_path
    if not base_path:
        return None
    return f"{base_path}/{page.slug}"


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------


def note_path(note: Any, options: UrlOptions) -> str | None:
    """Path of the noteable with the note's anchor.

    Diff, discussion and legacy diff notes share the rule of their noteable.
    """
    anchor = _note_anchor(note)
    if note.for_commit():
        if not note.project or note.commit_id is None:
            return None
        return f"/{note.project.full_path}/-/commit/{note.commit_id}#{anchor}"
    if note.for_issue():
        if not note.project or not note.noteable:
            return None
        return f"/{note.project.full_path}/-/issues/{note.noteable.iid}#{anchor}"
    if note.for_merge_request():
        if not note.project or not note.noteable:
            return None
        return f"/{note.project.full_path}/-/merge_requests/{note.noteable.iid}#{anchor}"
    if note.for_personal_snippet():
        if note.noteable_id is None:
            return None
        return f"/snippets/{note.noteable_id}#{anchor}"
    if note.for_project_snippet():
        if not note.project or note.noteable_id is None:
            return None
        return f"/{note.project.full_path}/snippets/{note.noteable_id}#{anchor}"
    logger.debug("Note %s is on an unsupported noteable: %r", note.id, note.noteable_type)
    return None


PATH_BUILDERS: dict[Kind, PathBuilder] = {
    Kind.PROJECT: project_path,
    Kind.GROUP: group_path,
    Kind.USER: user_path,
    Kind.COMMIT: commit_path,
    Kind.ISSUE: issue_path,
    Kind.MERGE_REQUEST: merge_request_path,
    Kind.PROJECT_MILESTONE: project_milestone_path,
    Kind.GROUP_MILESTONE: group_milestone_path,
    Kind.PROJECT_SNIPPET: project_snippet_path,
    Kind.PERSONAL_SNIPPET: personal_snippet_path,
    Kind.WIKI: wiki_path,
    Kind.WIKI_PAGE: wiki_page_path,
    Kind.CI_BUILD: ci_build_path,
    Kind.DESIGN: design_path,
    Kind.NOTE: note_path,
}


def build_path(kind: Kind, entity: Any, options: UrlOptions | None = None) -> str | None:
    """Return the path for *entity* of the given *kind*, or None if unresolvable."""
    return PATH_BUILDERS[kind](entity, options or UrlOptions())
