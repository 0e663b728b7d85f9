"""GitHub Projects (v2) board reading and aggregation."""

from kreeate.projects.boards import (
    fetch_project_board,
    fetch_saved_board,
    fetch_saved_boards,
    latest_update,
    placeholder_card,
)
from kreeate.projects.client import GraphQLClient
from kreeate.projects.exceptions import (
    BoardNotFoundError,
    InvalidProjectURLError,
    ProjectsError,
    RemoteAPIError,
)
from kreeate.projects.models import (
    Assignee,
    BoardStats,
    ContentType,
    OwnerType,
    PinnedProject,
    ProjectBoardData,
    ProjectBoardItem,
    SavedBoardCard,
    StatusType,
)
from kreeate.projects.normalizer import compute_stats, normalize_item, parse_content
from kreeate.projects.status import derive_status
from kreeate.projects.urls import (
    MAX_PINNED_PROJECTS,
    add_pinned_project,
    normalize_pinned_projects,
    parse_project_url,
    project_url,
    remove_pinned_project,
)

__all__ = [
    "MAX_PINNED_PROJECTS",
    "Assignee",
    "BoardNotFoundError",
    "BoardStats",
    "ContentType",
    "GraphQLClient",
    "InvalidProjectURLError",
    "OwnerType",
    "PinnedProject",
    "ProjectBoardData",
    "ProjectBoardItem",
    "ProjectsError",
    "RemoteAPIError",
    "SavedBoardCard",
    "StatusType",
    "add_pinned_project",
    "compute_stats",
    "derive_status",
    "fetch_project_board",
    "fetch_saved_board",
    "fetch_saved_boards",
    "latest_update",
    "normalize_item",
    "normalize_pinned_projects",
    "parse_content",
    "parse_project_url",
    "placeholder_card",
    "project_url",
    "remove_pinned_project",
]
