"""Board fetching and multi-board aggregation."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from kreeate.projects.exceptions import BoardNotFoundError, ProjectsError, RemoteAPIError
from kreeate.projects.models import (
    BoardStats,
    OwnerType,
    PinnedProject,
    ProjectBoardData,
    ProjectBoardItem,
    SavedBoardCard,
)
from kreeate.projects.normalizer import compute_stats, normalize_items
from kreeate.projects.queries import PROJECT_BOARD_QUERY
from kreeate.projects.urls import project_url

if TYPE_CHECKING:
    from kreeate.projects.client import GraphQLClient

logger = logging.getLogger("kreeate.projects.boards")


async def fetch_project_board(client: GraphQLClient, owner: str, number: int) -> ProjectBoardData:
    """Fetch and normalize one project board.

    The owner type is taken from whichever of user/organization resolved,
    not from the caller.

    Args:
        client: GraphQL client authenticated as the viewer
        owner: Board owner login
        number: Board number

    Returns:
        Board data with normalized items and stats

    Raises:
        RemoteAPIError: If the GraphQL call fails or the response has an
            unexpected shape
        BoardNotFoundError: If neither owner kind has the board
    """
    data = await client.execute(PROJECT_BOARD_QUERY, {"owner": owner, "number": number})
    try:
        return _build_board(data, owner, number)
    except (AttributeError, TypeError, ValueError) as e:
        logger.warning("Malformed board payload for %s#%d: %s", owner, number, e)
        raise RemoteAPIError("GitHub GraphQL response was malformed.") from e


def _build_board(data: dict[str, Any], owner: str, number: int) -> ProjectBoardData:
    user_project = (data.get("user") or {}).get("projectV2")
    org_project = (data.get("organization") or {}).get("projectV2")
    project: dict[str, Any] | None = user_project or org_project

    if not project:
        raise BoardNotFoundError("Project board not found or access denied.")

    owner_type = OwnerType.USER if user_project else OwnerType.ORG
    viewer_login = (data.get("viewer") or {}).get("login") or ""
    url = project.get("url") or ""
    nodes = (project.get("items") or {}).get("nodes") or []

    items = normalize_items([n for n in nodes if isinstance(n, dict)], viewer_login, url)
    stats = compute_stats(items)

    logger.debug(
        "Fetched board %s#%d: %d item(s), %d pending", owner, number, stats.total, stats.pending
    )

    return ProjectBoardData(
        id=str(project.get("id", "")),
        title=project.get("title") or "",
        url=url,
        owner=owner,
        number=number,
        owner_type=owner_type,
        viewer_login=viewer_login,
        stats=stats,
        items=items,
    )


def _parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO timestamp; values without an offset are taken as UTC."""
    if not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def latest_update(items: list[ProjectBoardItem]) -> str | None:
    """Return the most recent ``updated_at`` among items, as given upstream."""
    latest: str | None = None
    latest_at: datetime | None = None
    for item in items:
        if not item.updated_at:
            continue
        parsed = _parse_timestamp(item.updated_at)
        if parsed is None:
            continue
        if latest_at is None or parsed > latest_at:
            latest, latest_at = item.updated_at, parsed
    return latest


def placeholder_card(board: PinnedProject, error: str) -> SavedBoardCard:
    """Card for a pinned board that could not be fetched."""
    return SavedBoardCard(
        owner=board.owner,
        number=board.number,
        owner_type=board.owner_type,
        title=f"{board.owner} / Project {board.number}",
        url=project_url(board),
        stats=BoardStats(),
        last_updated_at=None,
        has_access=False,
        error=error,
    )


async def fetch_saved_board(client: GraphQLClient, board: PinnedProject) -> SavedBoardCard:
    """Fetch one pinned board, turning any project error into a placeholder."""
    try:
        data = await fetch_project_board(client, board.owner, board.number)
    except ProjectsError as e:
        logger.info("Board %s unavailable: %s", board.key, e)
        return placeholder_card(board, str(e) or "Unable to fetch board data.")

    return SavedBoardCard(
        owner=data.owner,
        number=data.number,
        owner_type=data.owner_type,
        title=data.title,
        url=data.url,
        stats=data.stats,
        last_updated_at=latest_update(data.items),
        has_access=True,
        error=None,
    )


async def fetch_saved_boards(
    client: GraphQLClient, boards: list[PinnedProject]
) -> list[SavedBoardCard]:
    """Fetch pinned boards concurrently.

    One board failing never affects the others; results keep input order.
    """
    if not boards:
        return []
    cards = await asyncio.gather(*(fetch_saved_board(client, board) for board in boards))
    return list(cards)
