"""StateStore - Main API for State Store operations."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any

from sqlalchemy import case, func, select
from sqlalchemy.exc import SQLAlchemyError

from kreeate.projects.models import PinnedProject
from kreeate.projects.urls import normalize_pinned_projects
from kreeate.state_store.database import Database
from kreeate.state_store.exceptions import InvalidEventStatusError, StateStoreError
from kreeate.state_store.models import (
    AnalyticsEvent,
    AnalyticsSummary,
    DailyAnalytics,
    EventStatus,
    UserPreferences,
    utcnow,
)
from kreeate.state_store.preferences import PinnedRepo, normalize_pinned_repos

logger = logging.getLogger("kreeate.state_store")


class StateStore:
    """Main API for State Store operations.

    Stores user preferences and analytics events.
    """

    def __init__(self, db_path: str = "kreeate.db") -> None:
        """Initialize State Store with SQLite database.

        Creates database and tables if they don't exist.

        Args:
            db_path: Path to SQLite database file
        """
        self._db = Database(db_path)
        self._db.create_tables()

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    # --- Preferences ---

    def get_preferences(self, user_id: str) -> UserPreferences | None:
        """Get a user's preferences row, or None if never saved."""
        session = self._db.get_session()
        try:
            stmt = select(UserPreferences).where(UserPreferences.user_id == user_id)
            return session.execute(stmt).scalar_one_or_none()
        finally:
            session.close()

    def _update_preferences(self, user_id: str, **values: Any) -> UserPreferences:
        """Update a user's preferences, creating the row on first write.

        Raises:
            StateStoreError: If the write fails
        """
        session = self._db.get_session()
        try:
            stmt = select(UserPreferences).where(UserPreferences.user_id == user_id)
            prefs = session.execute(stmt).scalar_one_or_none()
            if prefs is None:
                prefs = UserPreferences(user_id=user_id, pinned_projects=[], pinned_repos=[])
                session.add(prefs)
            for name, value in values.items():
                setattr(prefs, name, value)
            prefs.updated_at = utcnow()
            session.commit()
            session.refresh(prefs)
            return prefs
        except SQLAlchemyError as e:
            session.rollback()
            raise StateStoreError(f"Failed to save preferences for user '{user_id}'") from e
        finally:
            session.close()

    def get_pinned_projects(self, user_id: str) -> list[PinnedProject]:
        """Get a user's pinned boards, validated and de-duplicated."""
        prefs = self.get_preferences(user_id)
        return normalize_pinned_projects(prefs.pinned_projects if prefs else None)

    def save_pinned_projects(
        self, user_id: str, boards: list[PinnedProject]
    ) -> list[PinnedProject]:
        """Replace a user's pinned boards.

        Returns:
            The stored list
        """
        self._update_preferences(user_id, pinned_projects=[b.to_dict() for b in boards])
        return list(boards)

    def get_pinned_repos(self, user_id: str) -> list[PinnedRepo]:
        """Get a user's pinned repositories."""
        prefs = self.get_preferences(user_id)
        return normalize_pinned_repos(prefs.pinned_repos if prefs else None)

    def save_pinned_repos(self, user_id: str, repos: list[PinnedRepo]) -> list[PinnedRepo]:
        """Replace a user's pinned repositories."""
        self._update_preferences(user_id, pinned_repos=[r.to_dict() for r in repos])
        return list(repos)

    def get_last_repo(self, user_id: str) -> PinnedRepo | None:
        """Get the repository the user last submitted to, if any."""
        prefs = self.get_preferences(user_id)
        if prefs is None or not prefs.last_repo_owner or not prefs.last_repo_name:
            return None
        return PinnedRepo(owner=prefs.last_repo_owner, name=prefs.last_repo_name)

    def set_last_repo(self, user_id: str, repo: PinnedRepo) -> PinnedRepo:
        """Remember the repository the user last submitted to."""
        self._update_preferences(user_id, last_repo_owner=repo.owner, last_repo_name=repo.name)
        return repo

    # --- Analytics ---

    def track_event(
        self,
        user_id: str,
        event_type: str,
        status: EventStatus | str,
        repo_owner: str | None = None,
        repo_name: str | None = None,
        label: str | None = None,
        latency_ms: int | None = None,
        error_code: str | None = None,
        metadata: dict[str, Any] | None = None,
        occurred_at: datetime | None = None,
    ) -> bool:
        """Record a usage event.

        Storage failures are logged and swallowed so that analytics never
        breaks the request being tracked.

        Returns:
            True if the event was stored

        Raises:
            InvalidEventStatusError: If status is not a known EventStatus
        """
        try:
            event_status = EventStatus(status)
        except ValueError as e:
            raise InvalidEventStatusError(f"Unknown event status: {status!r}") from e

        session = self._db.get_session()
        try:
            session.add(
                AnalyticsEvent(
                    user_id=user_id,
                    event_type=event_type,
                    status=event_status.value,
                    repo_owner=repo_owner,
                    repo_name=repo_name,
                    label=label,
                    latency_ms=latency_ms,
                    error_code=error_code,
                    event_metadata=metadata,
                    occurred_at=occurred_at or utcnow(),
                )
            )
            session.commit()
            return True
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Failed to track analytics event %s/%s", event_type, status)
            return False
        finally:
            session.close()

    def list_events(
        self,
        user_id: str | None = None,
        event_type: str | None = None,
        limit: int = 100,
    ) -> list[AnalyticsEvent]:
        """List events, newest first."""
        session = self._db.get_session()
        try:
            stmt = select(AnalyticsEvent)
            if user_id is not None:
                stmt = stmt.where(AnalyticsEvent.user_id == user_id)
            if event_type is not None:
                stmt = stmt.where(AnalyticsEvent.event_type == event_type)
            stmt = stmt.order_by(AnalyticsEvent.occurred_at.desc()).limit(limit)
            return list(session.execute(stmt).scalars().all())
        finally:
            session.close()

    def get_analytics_summary(
        self,
        days: int = 7,
        event_type: str | None = None,
        now: datetime | None = None,
    ) -> AnalyticsSummary:
        """Summarize success/failure counts over the trailing window.

        Args:
            days: Window length in days
            event_type: Restrict to one event type (None = all)
            now: Reference time, naive UTC (defaults to the current time)

        Returns:
            Totals plus one row per day that had events, oldest first
        """
        now = now or utcnow()
        since = now - timedelta(days=days)

        success_col = func.sum(
            case((AnalyticsEvent.status == EventStatus.SUCCESS.value, 1), else_=0)
        )
        failed_col = func.sum(case((AnalyticsEvent.status == EventStatus.FAILED.value, 1), else_=0))
        day_col = func.date(AnalyticsEvent.occurred_at)

        session = self._db.get_session()
        try:
            filters = [AnalyticsEvent.occurred_at >= since]
            if event_type is not None:
                filters.append(AnalyticsEvent.event_type == event_type)

            totals = session.execute(
                select(success_col.label("success"), failed_col.label("failed")).where(*filters)
            ).one()

            daily_rows = session.execute(
                select(
                    day_col.label("day"),
                    success_col.label("success"),
                    failed_col.label("failed"),
                )
                .where(*filters)
                .group_by(day_col)
                .order_by(day_col.asc())
            ).all()
        finally:
            session.close()

        success = int(totals.success or 0)
        failed = int(totals.failed or 0)
        total = success + failed

        return AnalyticsSummary(
            range_days=days,
            generated_at=now,
            success=success,
            failed=failed,
            total=total,
            success_rate=round(success / total * 100, 1) if total else 0.0,
            daily=[
                DailyAnalytics(
                    day=str(row.day),
                    success=int(row.success or 0),
                    failed=int(row.failed or 0),
                )
                for row in daily_rows
            ],
        )
