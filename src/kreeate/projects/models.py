"""Data models for GitHub Project boards."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class OwnerType(StrEnum):
    """Kind of account that owns a project board."""

    USER = "user"
    ORG = "org"


class StatusType(StrEnum):
    """Lifecycle category derived from a free-text Status value."""

    DONE = "done"
    IN_PROGRESS = "in_progress"
    TODO = "todo"
    UNKNOWN = "unknown"


class ContentType(StrEnum):
    """What backs a board item."""

    ISSUE = "issue"
    PULL_REQUEST = "pull_request"
    DRAFT = "draft"


@dataclass(frozen=True)
class PinnedProject:
    """A board the user pinned, identified by owner and project number."""

    owner: str
    number: int
    owner_type: OwnerType = OwnerType.USER

    @property
    def key(self) -> str:
        """Case-insensitive identity key, e.g. "acme#3"."""
        return f"{self.owner.lower()}#{self.number}"

    def to_dict(self) -> dict[str, str | int]:
        return {"owner": self.owner, "number": self.number, "owner_type": self.owner_type.value}


@dataclass(frozen=True)
class Assignee:
    """GitHub user assigned to an issue or pull request."""

    login: str
    avatar_url: str = ""


# Item content variants. GitHub returns a union; each variant carries
# different fields, so they are kept as separate types.


@dataclass(frozen=True)
class IssueContent:
    title: str | None
    url: str | None
    state: str | None
    updated_at: str | None
    repo_full_name: str | None
    assignees: list[Assignee] = field(default_factory=list)


@dataclass(frozen=True)
class PullRequestContent:
    title: str | None
    url: str | None
    state: str | None
    updated_at: str | None
    repo_full_name: str | None
    assignees: list[Assignee] = field(default_factory=list)


@dataclass(frozen=True)
class DraftIssueContent:
    title: str | None


ItemContent = IssueContent | PullRequestContent | DraftIssueContent


@dataclass
class ProjectBoardItem:
    """One normalized row of a project board."""

    id: str
    title: str
    url: str
    status: str
    status_type: StatusType
    is_pending: bool
    is_assigned_to_viewer: bool
    assignees: list[Assignee]
    repo_full_name: str | None
    content_type: ContentType
    state: str | None
    updated_at: str | None


@dataclass
class BoardStats:
    """Aggregate counts over a board's items."""

    total: int = 0
    pending: int = 0
    assigned_to_viewer: int = 0
    done: int = 0


@dataclass
class ProjectBoardData:
    """Result of fetching a single board."""

    id: str
    title: str
    url: str
    owner: str
    number: int
    owner_type: OwnerType
    viewer_login: str
    stats: BoardStats
    items: list[ProjectBoardItem] = field(default_factory=list)


@dataclass
class SavedBoardCard:
    """Summary card for a pinned board.

    Boards that could not be fetched still get a card with zeroed stats,
    has_access=False and the failure message in error.
    """

    owner: str
    number: int
    owner_type: OwnerType
    title: str
    url: str
    stats: BoardStats
    last_updated_at: str | None
    has_access: bool
    error: str | None
