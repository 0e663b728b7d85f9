"""GraphQLClient - Minimal async client for the GitHub GraphQL API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from kreeate.config import DEFAULT_GRAPHQL_URL, DEFAULT_HTTP_TIMEOUT
from kreeate.logging import sanitize_for_log, truncate_output
from kreeate.projects.exceptions import RemoteAPIError

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger("kreeate.projects.client")

USER_AGENT = "Kreeate-Issue-Generator"


class GraphQLClient:
    """Sends single GraphQL requests to GitHub on behalf of one viewer.

    Every call is independent: no retries and no caching.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_GRAPHQL_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: GitHub OAuth or personal access token (read:project, repo)
            base_url: GraphQL endpoint (for testing/enterprise)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests to stub GitHub
        """
        self.token = token
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the underlying HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Content-Type": "application/json",
                    "Accept": "application/vnd.github+json",
                    "User-Agent": USER_AGENT,
                },
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> GraphQLClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def execute(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a GraphQL query and return its ``data`` object.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            The response ``data`` mapping

        Raises:
            RemoteAPIError: On transport failure, non-2xx status, a non-empty
                ``errors`` array, or a response without ``data``
        """
        payload: dict[str, Any] = {"query": query, "variables": variables or {}}

        try:
            response = await self.client.post(self.base_url, json=payload)
        except httpx.HTTPError as e:
            logger.warning("GitHub GraphQL transport failure: %s", sanitize_for_log(str(e)))
            raise RemoteAPIError(f"GitHub GraphQL request failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        messages = _error_messages(body)

        if not response.is_success:
            logger.warning(
                "GitHub GraphQL returned %d: %s",
                response.status_code,
                truncate_output(sanitize_for_log(response.text)),
            )
            raise RemoteAPIError(
                "; ".join(messages) if messages else f"GitHub GraphQL error: {response.status_code}"
            )

        if body.get("errors"):
            detail = "; ".join(messages) or "GitHub GraphQL returned errors."
            logger.warning("GitHub GraphQL errors: %s", detail)
            raise RemoteAPIError(detail)

        data = body.get("data")
        if not isinstance(data, dict):
            raise RemoteAPIError("GitHub GraphQL response did not include data.")

        return dict(data)


def _error_messages(body: dict[str, Any]) -> list[str]:
    """Collect ``errors[].message`` strings from a GraphQL envelope."""
    errors = body.get("errors") or []
    if not isinstance(errors, list):
        return []
    messages = (str(entry.get("message") or "") for entry in errors if isinstance(entry, dict))
    return [message for message in messages if message]
