"""Contacts sub-client for the Timekit API (/contacts/).

This is an internal module. Import from `timekit` instead.
"""

from typing import Any

from timekit._base import AsyncBaseClient, BaseClient


class ContactsClient(BaseClient):
    """Synchronous client for the contacts endpoint."""

    _BASE_PATH = "/contacts/"

    def list(self) -> Any:
        """List the user's contacts synced from their providers."""
        return self._get(self._BASE_PATH)


class AsyncContactsClient(AsyncBaseClient):
    """Asynchronous client for the contacts endpoint."""

    _BASE_PATH = "/contacts/"

    async def list(self) -> Any:
        """List the user's contacts synced from their providers."""
        return await self._get(self._BASE_PATH)
