"""Project board endpoints."""

import logging
import time
from typing import Annotated

from fastapi import APIRouter, Body, Path

from kreeate.api.dependencies import (
    CurrentUserDep,
    GraphQLClientDep,
    RequestContextDep,
    StateStoreDep,
)
from kreeate.api.exceptions import BadRequestError
from kreeate.api.models import (
    AddProjectRequest,
    APIResponse,
    BoardListResponse,
    BoardResponse,
    PinnedProjectsResponse,
    RemoveProjectRequest,
    board_to_response,
    card_to_response,
    pinned_to_response,
)
from kreeate.projects import (
    RemoteAPIError,
    add_pinned_project,
    fetch_project_board,
    fetch_saved_boards,
    parse_project_url,
    remove_pinned_project,
)
from kreeate.state_store import EventStatus

logger = logging.getLogger("kreeate.api.projects")

router = APIRouter(prefix="/projects", tags=["projects"])

BOARD_FETCH_EVENT = "project_board_fetch"


@router.get("", response_model=APIResponse[BoardListResponse])
async def list_boards(
    user_id: CurrentUserDep,
    store: StateStoreDep,
    client: GraphQLClientDep,
) -> APIResponse[BoardListResponse]:
    """Fetch summary cards for every pinned board."""
    boards = store.get_pinned_projects(user_id)
    cards = await fetch_saved_boards(client, boards)
    logger.info(
        "Fetched %d pinned board(s) for user %s (%d unavailable)",
        len(cards),
        user_id,
        sum(1 for card in cards if not card.has_access),
    )
    return APIResponse(data=BoardListResponse(boards=[card_to_response(c) for c in cards]))


@router.post("", response_model=APIResponse[PinnedProjectsResponse])
def update_pinned_boards(
    payload: Annotated[
        AddProjectRequest | RemoveProjectRequest, Body(discriminator="action")
    ],
    user_id: CurrentUserDep,
    store: StateStoreDep,
) -> APIResponse[PinnedProjectsResponse]:
    """Pin a board by URL or unpin one."""
    current = store.get_pinned_projects(user_id)

    if isinstance(payload, AddProjectRequest):
        board = parse_project_url(payload.url)
        updated = add_pinned_project(current, board)
    else:
        updated = remove_pinned_project(current, payload.project.to_pinned())

    saved = store.save_pinned_projects(user_id, updated)
    return APIResponse(
        data=PinnedProjectsResponse(pinned_projects=[pinned_to_response(b) for b in saved])
    )


@router.get("/{owner}/{number}", response_model=APIResponse[BoardResponse])
async def get_board(
    owner: Annotated[str, Path(min_length=1, max_length=255)],
    number: Annotated[int, Path(gt=0)],
    context: RequestContextDep,
    store: StateStoreDep,
    client: GraphQLClientDep,
) -> APIResponse[BoardResponse]:
    """Fetch one board with all of its items."""
    owner = owner.strip()
    if not owner:
        raise BadRequestError("Invalid board route parameters")

    started = time.perf_counter()
    try:
        board = await fetch_project_board(client, owner, number)
    except RemoteAPIError as e:
        if context.user_id:
            store.track_event(
                context.user_id,
                BOARD_FETCH_EVENT,
                EventStatus.FAILED,
                repo_owner=owner,
                latency_ms=_elapsed_ms(started),
                error_code=type(e).__name__,
                metadata={"number": number, "message": str(e)},
            )
        raise

    if context.user_id:
        store.track_event(
            context.user_id,
            BOARD_FETCH_EVENT,
            EventStatus.SUCCESS,
            repo_owner=owner,
            latency_ms=_elapsed_ms(started),
            metadata={"number": number, "items": board.stats.total},
        )
    return APIResponse(data=BoardResponse(board=board_to_response(board)))


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
