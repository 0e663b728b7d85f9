"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import AsyncGenerator, Generator  # noqa: TC003
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header

from kreeate.api.exceptions import ForbiddenError, UnauthorizedError
from kreeate.config import Settings
from kreeate.projects import GraphQLClient
from kreeate.state_store import StateStore

# Global Settings instance (initialized on app startup)
_settings: Settings | None = None


def init_settings(settings: Settings) -> Settings:
    """Install the global Settings instance."""
    global _settings  # noqa: PLW0603
    _settings = settings
    return _settings


def get_settings() -> Settings:
    """Dependency that provides the Settings instance."""
    if _settings is None:
        raise RuntimeError("Settings not initialized. Call init_settings() first.")
    return _settings


SettingsDep = Annotated[Settings, Depends(get_settings)]

# Global StateStore instance (initialized on app startup)
_state_store: StateStore | None = None


def init_state_store(db_path: str = "kreeate.db") -> StateStore:
    """Initialize the global StateStore instance."""
    global _state_store  # noqa: PLW0603
    _state_store = StateStore(db_path)
    return _state_store


def close_state_store() -> None:
    """Close the global StateStore instance."""
    global _state_store  # noqa: PLW0603
    if _state_store is not None:
        _state_store.close()
        _state_store = None


def get_state_store() -> Generator[StateStore, None, None]:
    """Dependency that provides the StateStore instance."""
    if _state_store is None:
        raise RuntimeError("StateStore not initialized. Call init_state_store() first.")
    yield _state_store


StateStoreDep = Annotated[StateStore, Depends(get_state_store)]


@dataclass(frozen=True)
class RequestContext:
    """Identity of the caller, supplied by the session layer in front of the API.

    Attributes:
        user_id: Application user ID (X-User-Id header).
        access_token: GitHub OAuth token (Authorization: Bearer header).
        email: User email (X-User-Email header), used for the admin check.
    """

    user_id: str | None
    access_token: str | None
    email: str | None = None


def get_request_context(
    authorization: Annotated[str | None, Header()] = None,
    x_user_id: Annotated[str | None, Header()] = None,
    x_user_email: Annotated[str | None, Header()] = None,
) -> RequestContext:
    """Read the caller's identity from request headers."""
    token = None
    if authorization:
        scheme, _, value = authorization.partition(" ")
        if scheme.lower() == "bearer" and value.strip():
            token = value.strip()
    return RequestContext(
        user_id=(x_user_id or "").strip() or None,
        access_token=token,
        email=(x_user_email or "").strip() or None,
    )


RequestContextDep = Annotated[RequestContext, Depends(get_request_context)]


def get_current_user_id(context: RequestContextDep) -> str:
    """Require a signed-in user."""
    if not context.user_id:
        raise UnauthorizedError("Missing user identity")
    return context.user_id


CurrentUserDep = Annotated[str, Depends(get_current_user_id)]


def get_access_token(context: RequestContextDep) -> str:
    """Require a GitHub access token."""
    if not context.access_token:
        raise UnauthorizedError("Missing GitHub access token")
    return context.access_token


AccessTokenDep = Annotated[str, Depends(get_access_token)]


def require_admin(context: RequestContextDep, settings: SettingsDep) -> RequestContext:
    """Require a signed-in user on the admin allowlist."""
    if not context.user_id:
        raise UnauthorizedError("Missing user identity")
    if not settings.is_admin_email(context.email):
        raise ForbiddenError("Admin access required")
    return context


AdminDep = Annotated[RequestContext, Depends(require_admin)]


async def get_graphql_client(
    token: AccessTokenDep, settings: SettingsDep
) -> AsyncGenerator[GraphQLClient, None]:
    """Dependency that provides a GraphQL client for the caller's token."""
    client = GraphQLClient(
        token=token,
        base_url=settings.graphql_url,
        timeout=settings.http_timeout,
    )
    try:
        yield client
    finally:
        await client.close()


GraphQLClientDep = Annotated[GraphQLClient, Depends(get_graphql_client)]
