"""Pydantic models for REST API."""

from dataclasses import asdict
from datetime import datetime
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from kreeate.projects.models import (
    ContentType,
    OwnerType,
    PinnedProject,
    ProjectBoardData,
    SavedBoardCard,
    StatusType,
)
from kreeate.state_store.models import AnalyticsEvent, AnalyticsSummary

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


# Project board models


class PinnedProjectModel(BaseModel):
    """A pinned board as exchanged with clients."""

    model_config = ConfigDict(str_strip_whitespace=True)

    owner: str = Field(..., min_length=1, max_length=255)
    number: int = Field(..., gt=0)
    owner_type: OwnerType

    def to_pinned(self) -> PinnedProject:
        return PinnedProject(owner=self.owner, number=self.number, owner_type=self.owner_type)


class AddProjectRequest(BaseModel):
    """Pin a board by its github.com URL."""

    action: Literal["add"]
    url: str = Field(..., min_length=1, max_length=2048)


class RemoveProjectRequest(BaseModel):
    """Unpin a board."""

    action: Literal["remove"]
    project: PinnedProjectModel


class BoardStatsModel(BaseModel):
    total: int
    pending: int
    assigned_to_viewer: int
    done: int


class AssigneeModel(BaseModel):
    login: str
    avatar_url: str


class ProjectBoardItemModel(BaseModel):
    id: str
    title: str
    url: str
    status: str
    status_type: StatusType
    is_pending: bool
    is_assigned_to_viewer: bool
    assignees: list[AssigneeModel]
    repo_full_name: str | None
    content_type: ContentType
    state: str | None
    updated_at: str | None


class ProjectBoardModel(BaseModel):
    """Response model for a single board."""

    id: str
    title: str
    url: str
    owner: str
    number: int
    owner_type: OwnerType
    viewer_login: str
    stats: BoardStatsModel
    items: list[ProjectBoardItemModel]


class SavedBoardCardModel(BaseModel):
    owner: str
    number: int
    owner_type: OwnerType
    title: str
    url: str
    stats: BoardStatsModel
    last_updated_at: str | None
    has_access: bool
    error: str | None


class BoardResponse(BaseModel):
    board: ProjectBoardModel


class BoardListResponse(BaseModel):
    boards: list[SavedBoardCardModel]


class PinnedProjectsResponse(BaseModel):
    pinned_projects: list[PinnedProjectModel]


def board_to_response(board: ProjectBoardData) -> ProjectBoardModel:
    """Convert ProjectBoardData to its response model."""
    return ProjectBoardModel.model_validate(asdict(board))


def card_to_response(card: SavedBoardCard) -> SavedBoardCardModel:
    """Convert a SavedBoardCard to its response model."""
    return SavedBoardCardModel.model_validate(asdict(card))


def pinned_to_response(board: PinnedProject) -> PinnedProjectModel:
    return PinnedProjectModel(owner=board.owner, number=board.number, owner_type=board.owner_type)


# Preference models


class RepoModel(BaseModel):
    """A repository reference."""

    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)

    owner: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)


class UpdatePinnedReposRequest(BaseModel):
    action: Literal["pin", "unpin"]
    repo: RepoModel


class PreferencesResponse(BaseModel):
    last_repo: RepoModel | None
    pinned_repos: list[RepoModel]


class PinnedReposResponse(BaseModel):
    pinned_repos: list[RepoModel]


# Analytics models


class DailyAnalyticsModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day: str
    success: int
    failed: int


class AnalyticsSummaryResponse(BaseModel):
    """Response model for the admin analytics summary."""

    model_config = ConfigDict(from_attributes=True)

    range_days: int
    generated_at: datetime
    success: int
    failed: int
    total: int
    success_rate: float
    daily: list[DailyAnalyticsModel]


def summary_to_response(summary: AnalyticsSummary) -> AnalyticsSummaryResponse:
    """Convert an AnalyticsSummary to AnalyticsSummaryResponse."""
    return AnalyticsSummaryResponse.model_validate(summary)


class AnalyticsEventModel(BaseModel):
    """A single recorded usage event."""

    id: str
    user_id: str
    event_type: str
    status: str
    repo_owner: str | None
    repo_name: str | None
    label: str | None
    latency_ms: int | None
    error_code: str | None
    metadata: dict[str, Any] | None
    occurred_at: datetime


class EventListResponse(BaseModel):
    events: list[AnalyticsEventModel]


def event_to_response(event: AnalyticsEvent) -> AnalyticsEventModel:
    """Convert an AnalyticsEvent row to AnalyticsEventModel."""
    return AnalyticsEventModel(
        id=event.id,
        user_id=event.user_id,
        event_type=event.event_type,
        status=event.status,
        repo_owner=event.repo_owner,
        repo_name=event.repo_name,
        label=event.label,
        latency_ms=event.latency_ms,
        error_code=event.error_code,
        metadata=event.event_metadata,
        occurred_at=event.occurred_at,
    )
