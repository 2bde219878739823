"""
Authentication provider abstractions for the v20 API.

The v20 API authenticates with a personal access token sent as a bearer
token.  Keeping header construction out of the HTTP client allows the
token source to change (rotation, a secrets backend) without touching
the transport.
"""
from __future__ import annotations

from typing import Dict


class AuthProvider:
    """Abstract base class for authentication providers."""

    async def get_headers(self, method: str, path: str) -> Dict[str, str]:
        """Return authentication headers for the given request.

        Subclasses must implement this method.
        """
        raise NotImplementedError


class BearerTokenProvider(AuthProvider):
    """Bearer-token authentication with a fixed access token."""

    def __init__(self, access_token: str) -> None:
        if not access_token:
            raise ValueError("access token must not be empty")
        self.access_token = access_token

    async def get_headers(self, method: str, path: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}

    def __repr__(self) -> str:
        return "BearerTokenProvider(access_token=***)"
