"""Calendars sub-client for the Timekit API.

This module provides CalendarsClient and AsyncCalendarsClient for the
calendar endpoints (/calendars/*). Calendars are synced from the user's
providers or created directly on Timekit.

This is an internal module. Import from `timekit` instead.
"""

from typing import Any

from timekit._base import AsyncBaseClient, BaseClient, _filter_none


class CalendarsClient(BaseClient):
    """Synchronous client for the calendar endpoints (/calendars/*).

    Example:
        with TimekitClient() as client:
            calendar = client.calendars.create(name="Lab", description="DeLorean tests")
            client.calendars.delete(calendar["id"])
    """

    _BASE_PATH = "/calendars"

    def list(self) -> Any:
        """List the user's calendars present on Timekit."""
        return self._get(self._BASE_PATH)

    def get(self, calendar_id: str) -> Any:
        """Get a single calendar by ID."""
        return self._get(f"{self._BASE_PATH}/{calendar_id}")

    def create(self, name: str, description: str | None = None, **extra: Any) -> Any:
        """Create a new calendar for the current user.

        Args:
            name: Display name of the calendar.
            description: Optional description.
            **extra: Additional calendar fields, sent as-is.

        Returns:
            The created calendar.
        """
        body = _filter_none(name=name, description=description, **extra)
        return self._post(f"{self._BASE_PATH}/", json=body)

    def delete(self, calendar_id: str) -> Any:
        """Delete a calendar."""
        return self._delete(f"{self._BASE_PATH}/{calendar_id}")


class AsyncCalendarsClient(AsyncBaseClient):
    """Asynchronous client for the calendar endpoints (/calendars/*)."""

    _BASE_PATH = "/calendars"

    async def list(self) -> Any:
        return await self._get(self._BASE_PATH)

    async def get(self, calendar_id: str) -> Any:
        return await self._get(f"{self._BASE_PATH}/{calendar_id}")

    async def create(self, name: str, description: str | None = None, **extra: Any) -> Any:
        """Create a new calendar for the current user."""
        body = _filter_none(name=name, description=description, **extra)
        return await self._post(f"{self._BASE_PATH}/", json=body)

    async def delete(self, calendar_id: str) -> Any:
        return await self._delete(f"{self._BASE_PATH}/{calendar_id}")
