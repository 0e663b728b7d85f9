"""SQLAlchemy models for State Store."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from sqlalchemy import JSON, DateTime, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class EventStatus(StrEnum):
    """Outcome recorded for an analytics event."""

    REQUESTED = "requested"
    SUCCESS = "success"
    FAILED = "failed"


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp, the form stored in SQLite."""
    return datetime.now(UTC).replace(tzinfo=None)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class UserPreferences(Base):
    """Per-user preferences: pinned boards, pinned repos, last repo."""

    __tablename__ = "user_preferences"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    last_repo_owner: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_repo_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Stored as raw JSON; validated on read since older rows may be malformed
    pinned_projects: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    pinned_repos: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )

    def __repr__(self) -> str:
        return f"<UserPreferences(user_id={self.user_id!r})>"


class AnalyticsEvent(Base):
    """A single usage event."""

    __tablename__ = "analytics_events"
    __table_args__ = (
        Index("analytics_events_user_occurred_idx", "user_id", "occurred_at"),
        Index("analytics_events_type_occurred_idx", "event_type", "occurred_at"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    event_type: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    repo_owner: Mapped[str | None] = mapped_column(String(255), nullable=True)
    repo_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    label: Mapped[str | None] = mapped_column(String(255), nullable=True)
    latency_ms: Mapped[int | None] = mapped_column(Integer, nullable=True)
    error_code: Mapped[str | None] = mapped_column(String(100), nullable=True)
    # "metadata" is reserved on declarative classes
    event_metadata: Mapped[dict[str, Any] | None] = mapped_column("metadata", JSON, nullable=True)
    occurred_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return (
            f"<AnalyticsEvent(event_type={self.event_type!r}, status={self.status!r}, "
            f"occurred_at={self.occurred_at!r})>"
        )


@dataclass
class DailyAnalytics:
    """Event counts for one day."""

    day: str
    success: int
    failed: int


@dataclass
class AnalyticsSummary:
    """Aggregated analytics over a trailing window."""

    range_days: int
    generated_at: datetime
    success: int
    failed: int
    total: int
    success_rate: float
    daily: list[DailyAnalytics] = field(default_factory=list)
