"""Events sub-client for the Timekit API.

This module provides EventsClient and AsyncEventsClient for the calendar
event endpoints (/events/*), including the anonymized availability lookup
(/events/availability).

Timestamps may be given as ``datetime`` objects (serialized to ISO 8601) or
as strings, which are sent unchanged so callers can use whatever format the
``inputTimestampFormat`` option announces.

This is an internal module. Import from `timekit` instead.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from timekit._base import AsyncBaseClient, BaseClient, _filter_none, _timestamp


def _event_body(
    start: datetime | str,
    end: datetime | str,
    what: str,
    calendar_id: str,
    where: str | None,
    participants: list[str] | None,
    description: str | None,
    extra: dict[str, Any],
) -> dict[str, Any]:
    return _filter_none(
        start=_timestamp(start),
        end=_timestamp(end),
        what=what,
        calendar_id=calendar_id,
        where=where,
        participants=participants,
        description=description,
        **extra,
    )


class EventsClient(BaseClient):
    """Synchronous client for the event endpoints (/events/*).

    Example:
        with TimekitClient() as client:
            events = client.include("attendees").events.list(
                start=datetime(2015, 10, 21, tzinfo=timezone.utc),
                end=datetime(2015, 10, 22, tzinfo=timezone.utc),
            )
            free = client.events.availability(
                start="2015-10-21T00:00:00+00:00",
                end="2015-10-22T00:00:00+00:00",
                email="marty.mcfly@timekit.io",
            )
    """

    _BASE_PATH = "/events"

    def list(
        self,
        start: datetime | str | None = None,
        end: datetime | str | None = None,
        **params: Any,
    ) -> Any:
        """List the user's events.

        Args:
            start: Only events ending after this time.
            end: Only events starting before this time.
            **params: Further query parameters, sent as-is.

        Returns:
            The matching events.
        """
        query = _filter_none(start=_timestamp(start), end=_timestamp(end), **params)
        return self._get(self._BASE_PATH, params=query or None)

    def get(self, event_id: str) -> Any:
        """Get a single event by ID."""
        return self._get(f"{self._BASE_PATH}/{event_id}")

    def create(
        self,
        start: datetime | str,
        end: datetime | str,
        what: str,
        calendar_id: str,
        where: str | None = None,
        participants: list[str] | None = None,
        description: str | None = None,
        **extra: Any,
    ) -> Any:
        """Create a new event.

        Args:
            start: When the event starts.
            end: When the event ends.
            what: Title of the event.
            calendar_id: Calendar to create the event in.
            where: Location of the event.
            participants: Email addresses of the participants.
            description: Longer description of the event.
            **extra: Additional event fields, sent as-is.

        Returns:
            The created event.
        """
        body = _event_body(start, end, what, calendar_id, where, participants, description, extra)
        return self._post(self._BASE_PATH, json=body)

    def delete(self, event_id: str) -> Any:
        """Delete an event by ID."""
        return self._delete(f"{self._BASE_PATH}/{event_id}")

    def availability(
        self,
        start: datetime | str | None = None,
        end: datetime | str | None = None,
        email: str | None = None,
        **params: Any,
    ) -> Any:
        """Get anonymized availability for a user.

        Other Timekit users can be queried by supplying their email;
        without it the current user's availability is returned.

        Args:
            start: Start of the window.
            end: End of the window.
            email: Email of the user to look up.
            **params: Further query parameters, sent as-is.
        """
        query = _filter_none(start=_timestamp(start), end=_timestamp(end), email=email, **params)
        return self._get(f"{self._BASE_PATH}/availability", params=query or None)


class AsyncEventsClient(AsyncBaseClient):
    """Asynchronous client for the event endpoints (/events/*)."""

    _BASE_PATH = "/events"

    async def list(
        self,
        start: datetime | str | None = None,
        end: datetime | str | None = None,
        **params: Any,
    ) -> Any:
        """List the user's events."""
        query = _filter_none(start=_timestamp(start), end=_timestamp(end), **params)
        return await self._get(self._BASE_PATH, params=query or None)

    async def get(self, event_id: str) -> Any:
        """Get a single event by ID."""
        return await self._get(f"{self._BASE_PATH}/{event_id}")

    async def create(
        self,
        start: datetime | str,
        end: datetime | str,
        what: str,
        calendar_id: str,
        where: str | None = None,
        participants: list[str] | None = None,
        description: str | None = None,
        **extra: Any,
    ) -> Any:
        """Create a new event."""
        body = _event_body(start, end, what, calendar_id, where, participants, description, extra)
        return await self._post(self._BASE_PATH, json=body)

    async def delete(self, event_id: str) -> Any:
        """Delete an event by ID."""
        return await self._delete(f"{self._BASE_PATH}/{event_id}")

    async def availability(
        self,
        start: datetime | str | None = None,
        end: datetime | str | None = None,
        email: str | None = None,
        **params: Any,
    ) -> Any:
        """Get anonymized availability for a user."""
        query = _filter_none(start=_timestamp(start), end=_timestamp(end), email=email, **params)
        return await self._get(f"{self._BASE_PATH}/availability", params=query or None)
