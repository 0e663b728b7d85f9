"""Unit tests for item normalization and stats."""

import pytest

from kreeate.projects import (
    Assignee,
    BoardStats,
    ContentType,
    StatusType,
    compute_stats,
    normalize_item,
    parse_content,
)
from kreeate.projects.models import DraftIssueContent, IssueContent, PullRequestContent

PROJECT_URL = "https://github.com/orgs/acme/projects/3"


def _node(
    status: str | None = "Todo",
    content: dict | None = None,
    archived: bool = False,
    item_id: str = "PVTI_1",
) -> dict:
    field_values = []
    if status is not None:
        field_values.append(
            {
                "__typename": "ProjectV2ItemFieldSingleSelectValue",
                "name": status,
                "field": {"name": "Status"},
            }
        )
    return {
        "id": item_id,
        "isArchived": archived,
        "fieldValues": {"nodes": field_values},
        "content": content,
    }


def _issue(
    typename: str = "Issue",
    state: str = "OPEN",
    assignees: list[dict] | None = None,
    title: str | None = "Fix login",
    url: str | None = "https://github.com/acme/web/issues/1",
) -> dict:
    return {
        "__typename": typename,
        "title": title,
        "url": url,
        "state": state,
        "updatedAt": "2026-02-10T12:00:00Z",
        "repository": {"nameWithOwner": "acme/web"},
        "assignees": {"nodes": assignees or []},
    }


@pytest.mark.unit
class TestParseContent:
    """Tests for parse_content."""

    def test_issue(self) -> None:
        content = parse_content(_issue(assignees=[{"login": "alice", "avatarUrl": "a.png"}]))

        assert isinstance(content, IssueContent)
        assert content.state == "OPEN"
        assert content.repo_full_name == "acme/web"
        assert content.assignees == [Assignee(login="alice", avatar_url="a.png")]

    def test_pull_request(self) -> None:
        assert isinstance(parse_content(_issue(typename="PullRequest")), PullRequestContent)

    def test_draft(self) -> None:
        content = parse_content({"__typename": "DraftIssue", "title": "Idea"})
        assert content == DraftIssueContent(title="Idea")

    def test_absent(self) -> None:
        assert parse_content(None) is None
        assert parse_content({}) is None

    def test_unknown_type(self) -> None:
        assert parse_content({"__typename": "RedactedItem"}) is None

    def test_skips_assignees_without_login(self) -> None:
        content = parse_content(
            _issue(
                assignees=[
                    {"login": "", "avatarUrl": "x.png"},
                    {"login": None},
                    {"login": "bob"},
                ]
            )
        )

        assert content.assignees == [Assignee(login="bob", avatar_url="")]


@pytest.mark.unit
class TestNormalizeItem:
    """Tests for normalize_item."""

    def test_open_issue(self) -> None:
        item = normalize_item(
            _node(status="In Progress", content=_issue()), viewer_login="", project_url=PROJECT_URL
        )

        assert item.id == "PVTI_1"
        assert item.title == "Fix login"
        assert item.url == "https://github.com/acme/web/issues/1"
        assert item.status == "In Progress"
        assert item.status_type == StatusType.IN_PROGRESS
        assert item.content_type == ContentType.ISSUE
        assert item.state == "OPEN"
        assert item.repo_full_name == "acme/web"
        assert item.updated_at == "2026-02-10T12:00:00Z"
        assert item.is_pending is True

    def test_pull_request_content_type(self) -> None:
        item = normalize_item(_node(content=_issue(typename="PullRequest")), "", PROJECT_URL)
        assert item.content_type == ContentType.PULL_REQUEST

    def test_draft_issue(self) -> None:
        item = normalize_item(
            _node(content={"__typename": "DraftIssue", "title": "Sketch"}), "alice", PROJECT_URL
        )

        assert item.content_type == ContentType.DRAFT
        assert item.title == "Sketch"
        assert item.url == PROJECT_URL
        assert item.assignees == []
        assert item.state is None
        assert item.repo_full_name is None
        assert item.updated_at is None
        assert item.is_assigned_to_viewer is False

    def test_missing_content(self) -> None:
        item = normalize_item(_node(content=None), "alice", PROJECT_URL)

        assert item.content_type == ContentType.DRAFT
        assert item.title == "Untitled"
        assert item.url == PROJECT_URL

    def test_blank_title_defaults(self) -> None:
        item = normalize_item(_node(content=_issue(title="   ")), "", PROJECT_URL)
        assert item.title == "Untitled"

    def test_title_trimmed(self) -> None:
        item = normalize_item(_node(content=_issue(title="  Fix it  ")), "", PROJECT_URL)
        assert item.title == "Fix it"

    def test_missing_url_falls_back_to_project(self) -> None:
        item = normalize_item(_node(content=_issue(url=None)), "", PROJECT_URL)
        assert item.url == PROJECT_URL

    def test_done_status_not_pending(self) -> None:
        item = normalize_item(_node(status="Done", content=_issue()), "", PROJECT_URL)

        assert item.status_type == StatusType.DONE
        assert item.is_pending is False

    @pytest.mark.parametrize("state", ["CLOSED", "MERGED"])
    def test_closed_or_merged_not_pending(self, state: str) -> None:
        item = normalize_item(_node(status="Todo", content=_issue(state=state)), "", PROJECT_URL)

        assert item.status_type == StatusType.TODO
        assert item.is_pending is False

    def test_merged_never_pending_without_status(self) -> None:
        item = normalize_item(
            _node(status=None, content=_issue(typename="PullRequest", state="MERGED")),
            "",
            PROJECT_URL,
        )

        assert item.status_type == StatusType.UNKNOWN
        assert item.is_pending is False

    def test_archived_not_pending(self) -> None:
        item = normalize_item(_node(status="Todo", content=_issue(), archived=True), "", PROJECT_URL)
        assert item.is_pending is False

    def test_unknown_status_open_item_is_pending(self) -> None:
        item = normalize_item(_node(status=None, content=_issue()), "", PROJECT_URL)

        assert item.status == "No status"
        assert item.is_pending is True

    def test_assigned_to_viewer_case_insensitive(self) -> None:
        node = _node(content=_issue(assignees=[{"login": "Alice"}, {"login": "bob"}]))

        assert normalize_item(node, "alice", PROJECT_URL).is_assigned_to_viewer is True
        assert normalize_item(node, "ALICE", PROJECT_URL).is_assigned_to_viewer is True

    def test_not_assigned_to_other_viewer(self) -> None:
        node = _node(content=_issue(assignees=[{"login": "Alice"}]))
        assert normalize_item(node, "alicia", PROJECT_URL).is_assigned_to_viewer is False

    def test_empty_viewer_never_assigned(self) -> None:
        node = _node(content=_issue(assignees=[{"login": "alice"}]))
        assert normalize_item(node, "", PROJECT_URL).is_assigned_to_viewer is False

    def test_tolerates_null_connections(self) -> None:
        node = {"id": "PVTI_9", "fieldValues": None, "content": {**_issue(), "assignees": None}}
        item = normalize_item(node, "alice", PROJECT_URL)

        assert item.status == "No status"
        assert item.assignees == []

    def test_deterministic(self) -> None:
        node = _node(status="Review", content=_issue(assignees=[{"login": "alice"}]))
        assert normalize_item(node, "alice", PROJECT_URL) == normalize_item(
            node, "alice", PROJECT_URL
        )


@pytest.mark.unit
class TestComputeStats:
    """Tests for compute_stats."""

    def test_empty(self) -> None:
        assert compute_stats([]) == BoardStats(total=0, pending=0, assigned_to_viewer=0, done=0)

    def test_counts(self) -> None:
        nodes = [
            _node(status="Todo", content=_issue(assignees=[{"login": "alice"}]), item_id="1"),
            _node(status="Done", content=_issue(state="CLOSED"), item_id="2"),
            _node(status="In Progress", content=_issue(assignees=[{"login": "alice"}]), item_id="3"),
            _node(status="Backlog", content=_issue(typename="PullRequest", state="MERGED"), item_id="4"),
            _node(status=None, content=None, item_id="5"),
        ]
        items = [normalize_item(n, "alice", PROJECT_URL) for n in nodes]

        stats = compute_stats(items)

        assert stats == BoardStats(total=5, pending=3, assigned_to_viewer=2, done=1)
        assert stats.total == len(items)
        assert stats.pending + stats.done <= stats.total
