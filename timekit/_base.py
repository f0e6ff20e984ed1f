"""Base class for all sub-clients.

This module provides the base classes that every resource sub-client
(EventsClient, MeetingsClient, etc.) inherits from, plus small helpers for
building request payloads.

This is an internal module and should not be imported directly by users.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from timekit._http import AsyncHTTPClient, HTTPClient


def _filter_none(**fields: Any) -> dict[str, Any]:
    """Drop fields whose value is None."""
    return {k: v for k, v in fields.items() if v is not None}


def _timestamp(value: datetime | str | None) -> str | None:
    """Serialize a datetime to ISO 8601; strings pass through unchanged."""
    if isinstance(value, datetime):
        return value.isoformat()
    return value


class BaseClient:
    """Base class for synchronous sub-clients.

    Attributes:
        _http: The shared HTTP client for making requests.
    """

    def __init__(self, http_client: "HTTPClient") -> None:
        self._http = http_client

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._http.get(path, params=params)

    def _post(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self._http.post(path, json=json, params=params)

    def _put(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self._http.put(path, json=json, params=params)

    def _delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._http.delete(path, params=params)


class AsyncBaseClient:
    """Base class for asynchronous sub-clients.

    Attributes:
        _http: The shared async HTTP client for making requests.
    """

    def __init__(self, http_client: "AsyncHTTPClient") -> None:
        self._http = http_client

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._http.get(path, params=params)

    async def _post(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self._http.post(path, json=json, params=params)

    async def _put(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self._http.put(path, json=json, params=params)

    async def _delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._http.delete(path, params=params)
