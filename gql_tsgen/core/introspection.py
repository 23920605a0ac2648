"""Introspection client for fetching a schema from a GraphQL endpoint.

Handles HTTP communication, error handling, and response parsing.
"""

import logging
from typing import Any

import httpx
from graphql import get_introspection_query

from .auth import Auth, NoAuth
from .errors import AcquisitionError

logger = logging.getLogger(__name__)


class IntrospectionClient:
    """Runs the standard introspection query against an endpoint.

    Supports pluggable authentication via the Auth protocol.

    Examples:
        async with IntrospectionClient(url) as client:
            data = await client.fetch()

        client = IntrospectionClient(url, auth=BearerAuth(token), timeout=10)
    """

    def __init__(
        self,
        url: str,
        auth: Auth | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            url: GraphQL endpoint URL
            auth: Authentication handler (implements Auth protocol)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for tests
        """
        self.url = url
        self.timeout = timeout
        self._auth = auth or NoAuth()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "IntrospectionClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {"Content-Type": "application/json"}
            headers.update(self._auth.get_headers())

            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch(self) -> dict[str, Any]:
        """Execute the introspection query.

        Returns:
            The 'data' portion of the response

        Raises:
            AcquisitionError: On transport failure, a non-2xx status,
                GraphQL errors or a response without data
        """
        client = await self._get_client()
        payload = {"query": get_introspection_query()}

        try:
            response = await client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            raise AcquisitionError(f"Error fetching schema from URL {self.url}: {e}") from e

        logger.debug("POST %s -> %s", self.url, response.status_code)
        if not response.is_success:
            raise AcquisitionError(
                f"Failed to fetch schema from URL {self.url}: "
                f"{response.status_code} {response.reason_phrase}"
            )

        try:
            result = response.json()
        except ValueError as e:
            raise AcquisitionError(f"Invalid JSON from {self.url}: {e}") from e

        if not isinstance(result, dict):
            raise AcquisitionError(
                f"Unexpected response from {self.url}: expected a JSON object, "
                f"got {type(result).__name__}"
            )

        if result.get("errors"):
            errors = result["errors"]
            if not isinstance(errors, list):
                errors = [errors]
            error_messages = "; ".join(
                e.get("message", str(e)) if isinstance(e, dict) else str(e) for e in errors
            )
            raise AcquisitionError(
                f"Errors in introspection query: {error_messages}", errors
            )

        data = result.get("data")
        if not data:
            raise AcquisitionError(f"Introspection response from {self.url} has no data")
        return data
