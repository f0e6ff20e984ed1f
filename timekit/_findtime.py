"""FindTime sub-client for the Timekit API.

FindTime searches for mutual availability across multiple users and
calendars (/findtime), optionally for several queries in one request
(/findtime/bulk).

This is an internal module. Import from `timekit` instead.
"""

from typing import Any

from timekit._base import AsyncBaseClient, BaseClient, _filter_none


class FindTimeClient(BaseClient):
    """Synchronous client for the availability search endpoints.

    Example:
        with TimekitClient() as client:
            slots = client.findtime.find(
                emails=["doc.brown@timekit.io", "marty.mcfly@timekit.io"],
                future="2 days",
                length="30 minutes",
                filters={"and": [{"business_hours": {}}]},
            )
    """

    _BASE_PATH = "/findtime"

    def find(
        self,
        emails: list[str],
        future: str | None = None,
        length: str | None = None,
        filters: dict[str, Any] | None = None,
        **extra: Any,
    ) -> Any:
        """Find time slots where all the given users are available.

        Args:
            emails: Users (or calendar owners) to search across.
            future: How far ahead to search, e.g. ``"2 days"``.
            length: Slot length, e.g. ``"30 minutes"``.
            filters: Filter tree narrowing the acceptable slots.
            **extra: Additional search options, sent as-is.

        Returns:
            The available slots.
        """
        body = _filter_none(emails=emails, future=future, length=length, filters=filters, **extra)
        return self._post(self._BASE_PATH, json=body)

    def bulk(self, queries: list[dict[str, Any]]) -> Any:
        """Run several FindTime queries in one request.

        Args:
            queries: One FindTime body per query, in the shape ``find`` sends.

        Returns:
            One result per query, in order.
        """
        return self._post(f"{self._BASE_PATH}/bulk", json=queries)


class AsyncFindTimeClient(AsyncBaseClient):
    """Asynchronous client for the availability search endpoints."""

    _BASE_PATH = "/findtime"

    async def find(
        self,
        emails: list[str],
        future: str | None = None,
        length: str | None = None,
        filters: dict[str, Any] | None = None,
        **extra: Any,
    ) -> Any:
        """Find time slots where all the given users are available."""
        body = _filter_none(emails=emails, future=future, length=length, filters=filters, **extra)
        return await self._post(self._BASE_PATH, json=body)

    async def bulk(self, queries: list[dict[str, Any]]) -> Any:
        """Run several FindTime queries in one request."""
        return await self._post(f"{self._BASE_PATH}/bulk", json=queries)
