"""Turns raw ProjectV2 item nodes into ProjectBoardItem rows."""

from __future__ import annotations

from typing import Any

from kreeate.projects.models import (
    Assignee,
    BoardStats,
    ContentType,
    DraftIssueContent,
    IssueContent,
    ItemContent,
    ProjectBoardItem,
    PullRequestContent,
    StatusType,
)
from kreeate.projects.status import derive_status

UNTITLED = "Untitled"

# Content states that end an item's pending life regardless of its column
CLOSED_STATES = frozenset({"CLOSED", "MERGED"})


def _nodes(connection: dict[str, Any] | None) -> list[dict[str, Any]]:
    """Return ``connection.nodes`` as a list, tolerating nulls."""
    if not connection:
        return []
    return [node for node in connection.get("nodes") or [] if isinstance(node, dict)]


def parse_assignees(content: dict[str, Any]) -> list[Assignee]:
    """Extract assignees, skipping entries without a login."""
    assignees = []
    for entry in _nodes(content.get("assignees")):
        login = entry.get("login") or ""
        if login:
            assignees.append(Assignee(login=login, avatar_url=entry.get("avatarUrl") or ""))
    return assignees


def parse_content(content: dict[str, Any] | None) -> ItemContent | None:
    """Parse the polymorphic ``content`` field of an item node.

    Returns None for absent content or an unrecognized type.
    """
    if not content:
        return None

    typename = content.get("__typename")
    if typename in ("Issue", "PullRequest"):
        fields = {
            "title": content.get("title"),
            "url": content.get("url"),
            "state": content.get("state"),
            "updated_at": content.get("updatedAt"),
            "repo_full_name": (content.get("repository") or {}).get("nameWithOwner"),
            "assignees": parse_assignees(content),
        }
        if typename == "Issue":
            return IssueContent(**fields)
        return PullRequestContent(**fields)
    if typename == "DraftIssue":
        return DraftIssueContent(title=content.get("title"))
    return None


def normalize_item(
    node: dict[str, Any],
    viewer_login: str,
    project_url: str,
) -> ProjectBoardItem:
    """Normalize one item node.

    Args:
        node: Raw item node (id, isArchived, fieldValues, content)
        viewer_login: Login of the authenticated viewer, may be empty
        project_url: Board URL, used when the item has no URL of its own

    Returns:
        The normalized item
    """
    status, status_type = derive_status(_nodes(node.get("fieldValues")))
    content = parse_content(node.get("content"))

    title: str | None = None
    url: str | None = None
    state: str | None = None
    updated_at: str | None = None
    repo_full_name: str | None = None
    assignees: list[Assignee] = []

    match content:
        case IssueContent() | PullRequestContent():
            content_type = (
                ContentType.ISSUE if isinstance(content, IssueContent) else ContentType.PULL_REQUEST
            )
            title = content.title
            url = content.url
            state = content.state or None
            updated_at = content.updated_at or None
            repo_full_name = content.repo_full_name or None
            assignees = content.assignees
        case DraftIssueContent():
            content_type = ContentType.DRAFT
            title = content.title
        case None:
            content_type = ContentType.DRAFT

    is_closed = state in CLOSED_STATES
    is_pending = not (bool(node.get("isArchived")) or status_type == StatusType.DONE or is_closed)

    viewer = viewer_login.lower()
    is_assigned = bool(viewer) and any(a.login.lower() == viewer for a in assignees)

    return ProjectBoardItem(
        id=str(node.get("id", "")),
        title=(title or "").strip() or UNTITLED,
        url=url or project_url,
        status=status,
        status_type=status_type,
        is_pending=is_pending,
        is_assigned_to_viewer=is_assigned,
        assignees=assignees,
        repo_full_name=repo_full_name,
        content_type=content_type,
        state=state,
        updated_at=updated_at,
    )


def normalize_items(
    nodes: list[dict[str, Any]],
    viewer_login: str,
    project_url: str,
) -> list[ProjectBoardItem]:
    """Normalize item nodes, preserving upstream order."""
    return [normalize_item(node, viewer_login, project_url) for node in nodes]


def compute_stats(items: list[ProjectBoardItem]) -> BoardStats:
    """Fold items into board-level counts."""
    stats = BoardStats()
    for item in items:
        stats.total += 1
        if item.is_pending:
            stats.pending += 1
        if item.is_assigned_to_viewer:
            stats.assigned_to_viewer += 1
        if item.status_type == StatusType.DONE:
            stats.done += 1
    return stats
