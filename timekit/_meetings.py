"""Meetings sub-client for the Timekit API.

This module provides MeetingsClient and AsyncMeetingsClient for the
meeting endpoints (/meetings/*). A meeting collects time suggestions,
participants mark their availability on each suggestion, and booking
finalizes it and sends invites.

This is an internal module. Import from `timekit` instead.
"""

from typing import Any

from timekit._base import AsyncBaseClient, BaseClient


class MeetingsClient(BaseClient):
    """Synchronous client for the meeting endpoints (/meetings/*).

    Example:
        with TimekitClient() as client:
            meeting = client.meetings.create(what="Flux capacitor review", suggestions=[...])
            client.meetings.invite(meeting["id"], emails=["marty.mcfly@timekit.io"])
            client.meetings.set_availability(suggestion_id=42, available=True)
            client.meetings.book(suggestion_id=42)
    """

    _BASE_PATH = "/meetings"

    def list(self) -> Any:
        """List the user's meetings."""
        return self._get(self._BASE_PATH)

    def get(self, meeting_id: str) -> Any:
        """Get a single meeting by ID."""
        return self._get(f"{self._BASE_PATH}/{meeting_id}")

    def create(self, **data: Any) -> Any:
        """Create a new meeting.

        Args:
            **data: Meeting fields such as ``what``, ``where`` and
                ``suggestions``.
        """
        return self._post(self._BASE_PATH, json=data)

    def update(self, meeting_id: str, **data: Any) -> Any:
        """Update a meeting.

        Args:
            meeting_id: The meeting to update; sent in the path, not the body.
            **data: Fields to change.
        """
        return self._put(f"{self._BASE_PATH}/{meeting_id}", json=data)

    def set_availability(self, **data: Any) -> Any:
        """Mark the current user as available or not on a suggestion.

        Args:
            **data: Typically ``suggestion_id`` and ``available``.
        """
        return self._post(f"{self._BASE_PATH}/availability", json=data)

    def book(self, **data: Any) -> Any:
        """Book a meeting, sending calendar invites to all participants.

        Args:
            **data: Typically the chosen ``suggestion_id``.
        """
        return self._post(f"{self._BASE_PATH}/book", json=data)

    def invite(self, meeting_id: str, **data: Any) -> Any:
        """Invite users to a meeting by email.

        Args:
            meeting_id: The meeting to invite to; sent in the path.
            **data: Typically ``emails``.
        """
        return self._post(f"{self._BASE_PATH}/{meeting_id}/invite", json=data)


class AsyncMeetingsClient(AsyncBaseClient):
    """Asynchronous client for the meeting endpoints (/meetings/*)."""

    _BASE_PATH = "/meetings"

    async def list(self) -> Any:
        return await self._get(self._BASE_PATH)

    async def get(self, meeting_id: str) -> Any:
        return await self._get(f"{self._BASE_PATH}/{meeting_id}")

    async def create(self, **data: Any) -> Any:
        return await self._post(self._BASE_PATH, json=data)

    async def update(self, meeting_id: str, **data: Any) -> Any:
        return await self._put(f"{self._BASE_PATH}/{meeting_id}", json=data)

    async def set_availability(self, **data: Any) -> Any:
        return await self._post(f"{self._BASE_PATH}/availability", json=data)

    async def book(self, **data: Any) -> Any:
        return await self._post(f"{self._BASE_PATH}/book", json=data)

    async def invite(self, meeting_id: str, **data: Any) -> Any:
        return await self._post(f"{self._BASE_PATH}/{meeting_id}/invite", json=data)
