"""Domain entities consumed by the URL builder.

These are read-only views of forge objects. Hosts may pass their own objects
instead, as long as they subclass the matching entity here so the classifier
can place them.
"""
from dataclasses import dataclass
from typing import Any


@dataclass
class Group:
    """A namespace that can own projects, milestones and wikis."""

    full_path: str
    name: str | None = None


@dataclass
class Project:
    """A repository inside a namespace."""

    full_path: str
    name: str | None = None
    namespace: Group | None = None


@dataclass
class User:
    """A user account; its profile lives at the root namespace."""

    username: str
    name: str | None = None

    @property
    def full_path(self) -> str:
        return self.username


@dataclass
class Commit:
    """A commit, identified by its sha."""

    id: str
    project: Project | None = None
    title: str | None = None


@dataclass
class Issue:
    """A project issue. ``iid`` is the project-scoped number."""

    iid: int
    project: Project | None = None
    id: int | None = None
    title: str | None = None


@dataclass
class MergeRequest:
    """A project merge request. ``iid`` is the project-scoped number."""

    iid: int
    project: Project | None = None
    id: int | None = None
    title: str | None = None
    source_branch: str | None = None
    target_branch: str | None = None


@dataclass
class Milestone:
    """A milestone scoped to either a project or a group."""

    iid: int
    project: Project | None = None
    group: Group | None = None
    id: int | None = None
    title: str | None = None

    @property
    def project_milestone(self) -> bool:
        return self.project is not None


@dataclass
class Snippet:
    """Base snippet; use :class:`ProjectSnippet` or :class:`PersonalSnippet`."""

    id: int
    title: str | None = None


@dataclass
class ProjectSnippet(Snippet):
    project: Project | None = None


@dataclass
class PersonalSnippet(Snippet):
    author: User | None = None


@dataclass
class Wiki:
    """Base wiki bound to a container (a project or a group)."""

    container: Any = None

    @property
    def wiki_base_path(self) -> str | None:
        if self.container is None:
            return None
        return f"/{self.container.full_path}/-/wikis"


@dataclass
class ProjectWiki(Wiki):
    container: Project | None = None


@dataclass
class GroupWiki(Wiki):
    container: Group | None = None

    @property
    def wiki_base_path(self) -> str | None:
        if self.container is None:
            return None
        return f"/groups/{self.container.full_path}/-/wikis"


@dataclass
class WikiPage:
    """A single page of a wiki, addressed by slug."""

    slug: str
    wiki: Wiki | None = None
    title: str | None = None


@dataclass
class CiBuild:
    """A CI job."""

    id: int
    project: Project | None = None
    name: str | None = None


# Marks a relation-derived attribute that was not given explicitly. Derived
# values are read from the relation on access, so a deferred relation is not
# loaded when the entity is built.
_DERIVED = object()


class Design:
    """A design attached to an issue.

    ``project`` falls back to the issue's project unless given explicitly.
    """

    def __init__(
        self,
        id: int,
        issue: Issue | None = None,
        project: Project | None | object = _DERIVED,
        filename: str | None = None,
    ):
        self.id = id
        self.issue = issue
        self._project = project
        self.filename = filename

    @property
    def project(self) -> Project | None:
        if self._project is not _DERIVED:
            return self._project
        if self.issue is None:
            return None
        return self.issue.project

    @project.setter
    def project(self, value: Project | None) -> None:
        self._project = value

    def __repr__(self) -> str:
        return f"Design(id={self.id!r}, filename={self.filename!r})"


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------

NOTEABLE_COMMIT = "Commit"
NOTEABLE_ISSUE = "Issue"
NOTEABLE_MERGE_REQUEST = "MergeRequest"
NOTEABLE_SNIPPET = "Snippet"


def _noteable_type_of(noteable: Any) -> str | None:
    if isinstance(noteable, Commit):
        return NOTEABLE_COMMIT
    if isinstance(noteable, Issue):
        return NOTEABLE_ISSUE
    if isinstance(noteable, MergeRequest):
        return NOTEABLE_MERGE_REQUEST
    if isinstance(noteable, Snippet):
        return NOTEABLE_SNIPPET
    return None


class Note:
    """A comment on a commit, issue, merge request or snippet.

    ``project``, ``noteable_type``, ``noteable_id`` and ``commit_id`` are
    read from ``noteable`` when not given explicitly. Passing ``None``
    explicitly marks the value as missing.
    """

    def __init__(
        self,
        id: int,
        noteable: Any = None,
        project: Project | None | object = _DERIVED,
        noteable_type: str | None | object = _DERIVED,
        noteable_id: Any = _DERIVED,
        commit_id: str | None | object = _DERIVED,
        note: str = "",
    ):
        self.id = id
        self.noteable = noteable
        self._project = project
        self._noteable_type = noteable_type
        self._noteable_id = noteable_id
        self._commit_id = commit_id
        self.note = note

    @property
    def project(self) -> Project | None:
        if self._project is not _DERIVED:
            return self._project
        if self.noteable is None:
            return None
        return getattr(self.noteable, "project", None)

    @project.setter
    def project(self, value: Project | None) -> None:
        self._project = value

    @property
    def noteable_type(self) -> str | None:
        if self._noteable_type is not _DERIVED:
            return self._noteable_type
        if self.noteable is None:
            return None
        return _noteable_type_of(self.noteable)

    @noteable_type.setter
    def noteable_type(self, value: str | None) -> None:
        self._noteable_type = value

    @property
    def noteable_id(self) -> Any:
        if self._noteable_id is not _DERIVED:
            return self._noteable_id
        if self.noteable is None or self.for_commit():
            return None
        return getattr(self.noteable, "id", None)

    @noteable_id.setter
    def noteable_id(self, value: Any) -> None:
        self._noteable_id = value

    @property
    def commit_id(self) -> str | None:
        if self._commit_id is not _DERIVED:
            return self._commit_id
        if self.noteable is None or not self.for_commit():
            return None
        return getattr(self.noteable, "id", None)

    @commit_id.setter
    def commit_id(self, value: str | None) -> None:
        self._commit_id = value

    def for_commit(self) -> bool:
        return self.noteable_type == NOTEABLE_COMMIT

    def for_issue(self) -> bool:
        return self.noteable_type == NOTEABLE_ISSUE

    def for_merge_request(self) -> bool:
        return self.noteable_type == NOTEABLE_MERGE_REQUEST

    def for_snippet(self) -> bool:
        return self.noteable_type == NOTEABLE_SNIPPET

    def for_personal_snippet(self) -> bool:
        return self.for_snippet() and isinstance(self.noteable, PersonalSnippet)

    def for_project_snippet(self) -> bool:
        return self.for_snippet() and not isinstance(self.noteable, PersonalSnippet)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


class DiffNote(Note):
    """A note anchored to a line of a diff."""

    def __init__(self, *args: Any, line_code: str | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.line_code = line_code


class DiscussionNote(Note):
    """A note that starts or replies to a discussion thread."""

    def __init__(self, *args: Any, discussion_id: str | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.discussion_id = discussion_id


class LegacyDiffNote(Note):
    """A diff note stored in the pre-discussion format."""

    def __init__(self, *args: Any, line_code: str | None = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.line_code = line_code
