"""Status classification for project board items."""

from __future__ import annotations

from typing import Any

from kreeate.projects.models import StatusType

NO_STATUS = "No status"

SINGLE_SELECT_VALUE = "ProjectV2ItemFieldSingleSelectValue"

# Checked in order, first match wins. "Ready for Review" is in_progress
# because in_progress is tested before todo.
STATUS_KEYWORDS: list[tuple[StatusType, tuple[str, ...]]] = [
    (StatusType.DONE, ("done", "closed", "complete", "completed", "merged", "shipped")),
    (StatusType.IN_PROGRESS, ("in progress", "active", "review", "blocked")),
    (StatusType.TODO, ("todo", "to do", "backlog", "ready", "next")),
]


def find_status_value(field_values: list[dict[str, Any]]) -> str:
    """Return the trimmed Status option name, or "No status"."""
    for entry in field_values:
        if not isinstance(entry, dict) or entry.get("__typename") != SINGLE_SELECT_VALUE:
            continue
        field_name = ((entry.get("field") or {}).get("name") or "").strip().lower()
        if field_name == "status":
            return (entry.get("name") or "").strip() or NO_STATUS
    return NO_STATUS


def classify_status_text(status: str) -> StatusType:
    """Map free-text status to a lifecycle category by keyword."""
    lower = status.lower()
    for status_type, keywords in STATUS_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return status_type
    return StatusType.UNKNOWN


def derive_status(field_values: list[dict[str, Any]]) -> tuple[str, StatusType]:
    """Classify an item from its field value nodes.

    Args:
        field_values: ``fieldValues.nodes`` of a project item

    Returns:
        Tuple of (display status, status type)
    """
    status = find_status_value(field_values)
    return status, classify_status_text(status)
