"""Credentials sub-client for the Timekit API.

Credentials are additional API key pairs for the current user
(/credentials/*), e.g. for server-to-server integrations.

This is an internal module. Import from `timekit` instead.
"""

from typing import Any

from timekit._base import AsyncBaseClient, BaseClient


class CredentialsClient(BaseClient):
    """Synchronous client for the credential endpoints (/credentials/*)."""

    _BASE_PATH = "/credentials"

    def list(self) -> Any:
        """List all of the current user's credentials."""
        return self._get(self._BASE_PATH)

    def create(self, **data: Any) -> Any:
        """Create a new credential pair.

        Args:
            **data: Credential settings such as ``type`` and ``scopes``.
        """
        return self._post(self._BASE_PATH, json=data)

    def delete(self, credential_id: str) -> Any:
        """Delete a credential pair."""
        return self._delete(f"{self._BASE_PATH}/{credential_id}")


class AsyncCredentialsClient(AsyncBaseClient):
    """Asynchronous client for the credential endpoints (/credentials/*)."""

    _BASE_PATH = "/credentials"

    async def list(self) -> Any:
        return await self._get(self._BASE_PATH)

    async def create(self, **data: Any) -> Any:
        return await self._post(self._BASE_PATH, json=data)

    async def delete(self, credential_id: str) -> Any:
        return await self._delete(f"{self._BASE_PATH}/{credential_id}")
