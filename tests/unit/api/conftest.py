"""Fixtures for API route tests."""

import json

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from kreeate.api.app import create_app
from kreeate.api.dependencies import AccessTokenDep, get_graphql_client, get_state_store
from kreeate.config import Settings
from kreeate.projects import GraphQLClient
from kreeate.state_store import StateStore


class FakeGitHub:
    """Answers board queries from canned responses keyed by (owner, number)."""

    def __init__(self) -> None:
        self.boards: dict[tuple[str, int], tuple[int, dict]] = {}
        self.requests: list[httpx.Request] = []

    def add_board(self, owner: str, number: int, project: dict, owner_type: str = "org") -> None:
        scope = "organization" if owner_type == "org" else "user"
        data = {"viewer": {"login": "alice"}, "user": None, "organization": None}
        data[scope] = {"projectV2": project}
        self.boards[(owner, number)] = (200, {"data": data})

    def fail(self, owner: str, number: int, status_code: int, body: dict) -> None:
        self.boards[(owner, number)] = (status_code, body)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        variables = json.loads(request.content)["variables"]
        key = (variables["owner"], variables["number"])
        if key in self.boards:
            status_code, body = self.boards[key]
            return httpx.Response(status_code, json=body)
        return httpx.Response(
            200, json={"data": {"viewer": {"login": "alice"}, "user": None, "organization": None}}
        )


@pytest.fixture
def settings() -> Settings:
    return Settings(db_path=":memory:")


@pytest.fixture
def store():
    """Create an in-memory StateStore."""
    s = StateStore(":memory:")
    yield s
    s.close()


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def app(settings: Settings, store: StateStore, github: FakeGitHub) -> FastAPI:
    """Create the app with the store and GitHub stubbed out."""
    app = create_app(settings)

    def override_get_state_store():
        yield store

    async def override_get_graphql_client(token: AccessTokenDep):
        client = GraphQLClient(token=token, transport=httpx.MockTransport(github.handle))
        try:
            yield client
        finally:
            await client.close()

    app.dependency_overrides[get_state_store] = override_get_state_store
    app.dependency_overrides[get_graphql_client] = override_get_graphql_client
    return app


@pytest.fixture
def client(app: FastAPI):
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
