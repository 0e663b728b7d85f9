"""Admin analytics endpoints."""

from fastapi import APIRouter, Query

from kreeate.api.dependencies import AdminDep, StateStoreDep
from kreeate.api.models import (
    AnalyticsSummaryResponse,
    APIResponse,
    EventListResponse,
    event_to_response,
    summary_to_response,
)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/analytics", response_model=APIResponse[AnalyticsSummaryResponse])
def get_analytics(
    _admin: AdminDep,
    store: StateStoreDep,
    days: int = Query(default=7, ge=1, le=90, description="Trailing window in days"),
    event_type: str | None = Query(default=None, description="Filter by event type"),
) -> APIResponse[AnalyticsSummaryResponse]:
    """Success/failure counts over the trailing window, totals and per day."""
    summary = store.get_analytics_summary(days=days, event_type=event_type)
    return APIResponse(data=summary_to_response(summary))


@router.get("/events", response_model=APIResponse[EventListResponse])
def list_events(
    _admin: AdminDep,
    store: StateStoreDep,
    user_id: str | None = Query(default=None, description="Filter by user"),
    event_type: str | None = Query(default=None, description="Filter by event type"),
    limit: int = Query(default=100, ge=1, le=500, description="Maximum number of events"),
) -> APIResponse[EventListResponse]:
    """Recent events, newest first."""
    events = store.list_events(user_id=user_id, event_type=event_type, limit=limit)
    return APIResponse(data=EventListResponse(events=[event_to_response(e) for e in events]))
