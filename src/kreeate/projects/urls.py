"""Project URL parsing and pinned-board list helpers."""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlparse

from kreeate.projects.exceptions import InvalidProjectURLError
from kreeate.projects.models import OwnerType, PinnedProject

MAX_PINNED_PROJECTS = 10

_PROJECT_PATH = re.compile(
    r"^/(users|orgs)/([^/]+)/projects/(\d+)/?$", re.IGNORECASE | re.ASCII
)


def parse_project_url(value: str) -> PinnedProject:
    """Parse a GitHub project URL into a PinnedProject.

    Accepts https://github.com/users/<owner>/projects/<number> and the
    /orgs/ equivalent, with an optional trailing slash.

    Raises:
        InvalidProjectURLError: If the host is not github.com or the path
            has another shape
    """
    try:
        parsed = urlparse(value.strip())
        hostname = parsed.hostname
    except ValueError as e:
        raise InvalidProjectURLError("Only github.com project URLs are supported.") from e

    if hostname != "github.com":
        raise InvalidProjectURLError("Only github.com project URLs are supported.")

    match = _PROJECT_PATH.match(parsed.path)
    if not match:
        raise InvalidProjectURLError(
            "Use a GitHub project URL like https://github.com/users/<owner>/projects/<number>."
        )

    scope, owner, number = match.groups()
    return PinnedProject(
        owner=owner,
        number=int(number),
        owner_type=OwnerType.ORG if scope.lower() == "orgs" else OwnerType.USER,
    )


def project_url(board: PinnedProject) -> str:
    """Build the canonical github.com URL for a board."""
    scope = "orgs" if board.owner_type == OwnerType.ORG else "users"
    return f"https://github.com/{scope}/{board.owner}/projects/{board.number}"


def coerce_pinned_project(entry: Any) -> PinnedProject | None:
    """Validate one stored entry, returning None when it is malformed."""
    if not isinstance(entry, dict):
        return None

    owner = entry.get("owner")
    number = entry.get("number")
    owner_type = entry.get("owner_type", entry.get("ownerType"))

    if not isinstance(owner, str) or not owner.strip():
        return None
    if isinstance(number, bool) or not isinstance(number, int) or number <= 0:
        return None
    try:
        kind = OwnerType(owner_type)
    except ValueError:
        return None

    return PinnedProject(owner=owner.strip(), number=number, owner_type=kind)


def normalize_pinned_projects(value: Any) -> list[PinnedProject]:
    """Validate and de-duplicate a stored pinned-board list.

    Invalid entries are dropped. Duplicates (same owner, ignoring case, and
    number) collapse to the last one, kept at the first one's position.
    """
    if not isinstance(value, list):
        return []

    unique: dict[str, PinnedProject] = {}
    for entry in value:
        board = coerce_pinned_project(entry)
        if board is not None:
            unique[board.key] = board
    return list(unique.values())


def add_pinned_project(current: list[PinnedProject], board: PinnedProject) -> list[PinnedProject]:
    """Pin a board at the front, replacing any existing entry for it."""
    others = [item for item in current if item.key != board.key]
    return [board, *others][:MAX_PINNED_PROJECTS]


def remove_pinned_project(
    current: list[PinnedProject], board: PinnedProject
) -> list[PinnedProject]:
    """Unpin a board."""
    return [item for item in current if item.key != board.key]
