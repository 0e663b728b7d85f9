"""Pinned repository list helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

MAX_PINNED_REPOS = 10


@dataclass(frozen=True)
class PinnedRepo:
    """A repository the user pinned for quick issue submission."""

    owner: str
    name: str

    @property
    def key(self) -> str:
        return f"{self.owner}/{self.name}".lower()

    def to_dict(self) -> dict[str, str]:
        return {"owner": self.owner, "name": self.name}


def normalize_pinned_repos(value: Any) -> list[PinnedRepo]:
    """Validate and de-duplicate a stored repo list, capped at MAX_PINNED_REPOS."""
    if not isinstance(value, list):
        return []

    unique: dict[str, PinnedRepo] = {}
    for entry in value:
        if not isinstance(entry, dict):
            continue
        owner, name = entry.get("owner"), entry.get("name")
        if not isinstance(owner, str) or not isinstance(name, str):
            continue
        if not owner.strip() or not name.strip():
            continue
        repo = PinnedRepo(owner=owner.strip(), name=name.strip())
        unique[repo.key] = repo
    return list(unique.values())[:MAX_PINNED_REPOS]


def pin_repo(current: list[PinnedRepo], repo: PinnedRepo) -> list[PinnedRepo]:
    """Move or add a repo to the front of the list."""
    others = [item for item in current if item.key != repo.key]
    return [repo, *others][:MAX_PINNED_REPOS]


def unpin_repo(current: list[PinnedRepo], repo: PinnedRepo) -> list[PinnedRepo]:
    return [item for item in current if item.key != repo.key]
