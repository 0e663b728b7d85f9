"""REST API for Kreeate."""

from kreeate.api.app import create_app
from kreeate.api.models import (
    APIResponse,
    BoardListResponse,
    BoardResponse,
    PinnedProjectsResponse,
)

__all__ = [
    "APIResponse",
    "BoardListResponse",
    "BoardResponse",
    "PinnedProjectsResponse",
    "create_app",
]
