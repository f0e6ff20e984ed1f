"""Apps sub-client for the Timekit API.

This module provides AppsClient and AsyncAppsClient for managing Timekit
apps (/apps/*). Apps are addressed by their slug.

This is an internal module. Import from `timekit` instead.
"""

from typing import Any

from timekit._base import AsyncBaseClient, BaseClient


class AppsClient(BaseClient):
    """Synchronous client for the app endpoints (/apps/*).

    Example:
        with TimekitClient() as client:
            client.auth(email="doc.brown@timekit.io", password="secret")
            app = client.apps.create(name="Back to the Future", slug="bttf")
            client.apps.update("bttf", name="Back to the Future II")
    """

    _BASE_PATH = "/apps"

    def list(self) -> Any:
        """List the apps owned by the current user."""
        return self._get(self._BASE_PATH)

    def get(self, slug: str) -> Any:
        """Get the settings of an app.

        Args:
            slug: The app's unique slug.
        """
        return self._get(f"{self._BASE_PATH}/{slug}")

    def create(self, **data: Any) -> Any:
        """Create a new app.

        Args:
            **data: App settings (e.g. ``name``, ``slug``, ``settings``).
        """
        return self._post(self._BASE_PATH, json=data)

    def update(self, slug: str, **data: Any) -> Any:
        """Update the settings of an app.

        Args:
            slug: The app's unique slug; sent in the path, not the body.
            **data: Settings to change.
        """
        return self._put(f"{self._BASE_PATH}/{slug}", json=data)

    def delete(self, slug: str) -> Any:
        """Delete an app."""
        return self._delete(f"{self._BASE_PATH}/{slug}")


class AsyncAppsClient(AsyncBaseClient):
    """Asynchronous client for the app endpoints (/apps/*)."""

    _BASE_PATH = "/apps"

    async def list(self) -> Any:
        """List the apps owned by the current user."""
        return await self._get(self._BASE_PATH)

    async def get(self, slug: str) -> Any:
        """Get the settings of an app."""
        return await self._get(f"{self._BASE_PATH}/{slug}")

    async def create(self, **data: Any) -> Any:
        """Create a new app."""
        return await self._post(self._BASE_PATH, json=data)

    async def update(self, slug: str, **data: Any) -> Any:
        """Update the settings of an app."""
        return await self._put(f"{self._BASE_PATH}/{slug}", json=data)

    async def delete(self, slug: str) -> Any:
        """Delete an app."""
        return await self._delete(f"{self._BASE_PATH}/{slug}")
