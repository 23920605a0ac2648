"""Authentication handlers for the introspection client.

Provides pluggable authentication via the Auth protocol.
Users can implement custom auth or use built-in handlers.
"""

from typing import Dict, Protocol, runtime_checkable


@runtime_checkable
class Auth(Protocol):
    """Protocol for authentication handlers.

    Example:
        class SessionAuth:
            def __init__(self, cookie: str):
                self.cookie = cookie

            def get_headers(self) -> dict[str, str]:
                return {"Cookie": f"session={self.cookie}"}
    """

    def get_headers(self) -> Dict[str, str]:
        """Return headers to include in the introspection request."""
        ...


class BearerAuth:
    """Bearer token authentication.

    Example:
        auth = BearerAuth("eyJhbGciOiJIUzI1NiIs...")
    """

    def __init__(self, token: str):
        self.token = token

    def get_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class HeaderAuth:
    """Fixed headers, e.g. from the ``headers`` config entry.

    Example:
        auth = HeaderAuth({"X-API-Key": "key123"})
    """

    def __init__(self, headers: Dict[str, str]):
        self._headers = dict(headers)

    def get_headers(self) -> Dict[str, str]:
        return self._headers.copy()


class CombinedAuth:
    """Merges the headers of several handlers; later handlers win."""

    def __init__(self, *handlers: Auth):
        self.handlers = handlers

    def get_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        for handler in self.handlers:
            headers.update(handler.get_headers())
        return headers


class NoAuth:
    """No authentication (for public endpoints or testing)."""

    def get_headers(self) -> Dict[str, str]:
        return {}
