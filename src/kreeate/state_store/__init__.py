"""State Store - Persistent storage for user preferences and analytics."""

from kreeate.state_store.exceptions import InvalidEventStatusError, StateStoreError
from kreeate.state_store.models import (
    AnalyticsEvent,
    AnalyticsSummary,
    DailyAnalytics,
    EventStatus,
    UserPreferences,
)
from kreeate.state_store.preferences import (
    MAX_PINNED_REPOS,
    PinnedRepo,
    normalize_pinned_repos,
    pin_repo,
    unpin_repo,
)
from kreeate.state_store.store import StateStore

__all__ = [
    "MAX_PINNED_REPOS",
    "AnalyticsEvent",
    "AnalyticsSummary",
    "DailyAnalytics",
    "EventStatus",
    "InvalidEventStatusError",
    "PinnedRepo",
    "StateStore",
    "StateStoreError",
    "UserPreferences",
    "normalize_pinned_repos",
    "pin_repo",
    "unpin_repo",
]
