"""User preference endpoints."""

from fastapi import APIRouter

from kreeate.api.dependencies import CurrentUserDep, StateStoreDep
from kreeate.api.models import (
    APIResponse,
    PinnedReposResponse,
    PreferencesResponse,
    RepoModel,
    UpdatePinnedReposRequest,
)
from kreeate.state_store import PinnedRepo, pin_repo, unpin_repo

router = APIRouter(prefix="/preferences", tags=["preferences"])


@router.get("", response_model=APIResponse[PreferencesResponse])
def get_preferences(
    user_id: CurrentUserDep, store: StateStoreDep
) -> APIResponse[PreferencesResponse]:
    """Get the last used repository and pinned repositories."""
    last_repo = store.get_last_repo(user_id)
    pinned = store.get_pinned_repos(user_id)
    return APIResponse(
        data=PreferencesResponse(
            last_repo=RepoModel.model_validate(last_repo) if last_repo else None,
            pinned_repos=[RepoModel.model_validate(r) for r in pinned],
        )
    )


@router.post("", response_model=APIResponse[PinnedReposResponse])
def update_pinned_repos(
    payload: UpdatePinnedReposRequest,
    user_id: CurrentUserDep,
    store: StateStoreDep,
) -> APIResponse[PinnedReposResponse]:
    """Pin or unpin a repository."""
    repo = PinnedRepo(owner=payload.repo.owner, name=payload.repo.name)
    current = store.get_pinned_repos(user_id)
    updated = pin_repo(current, repo) if payload.action == "pin" else unpin_repo(current, repo)
    saved = store.save_pinned_repos(user_id, updated)
    return APIResponse(
        data=PinnedReposResponse(pinned_repos=[RepoModel.model_validate(r) for r in saved])
    )


@router.put("/last-repo", response_model=APIResponse[RepoModel])
def set_last_repo(
    payload: RepoModel,
    user_id: CurrentUserDep,
    store: StateStoreDep,
) -> APIResponse[RepoModel]:
    """Remember the repository the user last submitted to."""
    saved = store.set_last_repo(user_id, PinnedRepo(owner=payload.owner, name=payload.name))
    return APIResponse(data=RepoModel.model_validate(saved))
