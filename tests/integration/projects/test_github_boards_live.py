"""Integration tests against the live GitHub GraphQL API.

These tests require:
- GITHUB_TOKEN environment variable (scopes: read:project, repo)
- GITHUB_TEST_PROJECT_URL environment variable
  (e.g., "https://github.com/orgs/acme/projects/3")

Run with: pytest tests/integration/projects/ -m real
"""

import os

import pytest
import pytest_asyncio

from kreeate.projects import (
    GraphQLClient,
    PinnedProject,
    fetch_project_board,
    fetch_saved_boards,
    parse_project_url,
)

pytestmark = [
    pytest.mark.integration,
    pytest.mark.real,
    pytest.mark.skipif(
        not os.environ.get("GITHUB_TOKEN") or not os.environ.get("GITHUB_TEST_PROJECT_URL"),
        reason="GITHUB_TOKEN and GITHUB_TEST_PROJECT_URL required",
    ),
]


@pytest.fixture
def board() -> PinnedProject:
    return parse_project_url(os.environ["GITHUB_TEST_PROJECT_URL"])


@pytest_asyncio.fixture
async def client():
    async with GraphQLClient(token=os.environ["GITHUB_TOKEN"]) as client:
        yield client


class TestLiveBoards:
    """Reads a real board."""

    @pytest.mark.asyncio
    async def test_fetch_board(self, client: GraphQLClient, board: PinnedProject) -> None:
        data = await fetch_project_board(client, board.owner, board.number)

        assert data.owner_type == board.owner_type
        assert data.viewer_login
        assert data.stats.total == len(data.items)
        assert data.stats.pending + data.stats.done <= data.stats.total

    @pytest.mark.asyncio
    async def test_missing_board_does_not_break_others(
        self, client: GraphQLClient, board: PinnedProject
    ) -> None:
        missing = PinnedProject(owner=board.owner, number=999999, owner_type=board.owner_type)

        cards = await fetch_saved_boards(client, [board, missing])

        assert cards[0].has_access is True
        assert cards[1].has_access is False
        assert cards[1].error
