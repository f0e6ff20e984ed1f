"""Timekit API Client Library.

This package provides a Python client for the Timekit scheduling API:
accounts, apps, calendars, contacts, events, availability search, meetings,
users, properties and credentials. It supports both synchronous and
asynchronous usage patterns.

Every request goes through one pipeline that adds the ``Timekit-App`` and
Basic auth headers, sends body keys in snake_case, and unwraps the
``data`` envelope of responses (camelizing keys when
``convertResponseToCamelcase`` is enabled).

Example:
    Synchronous usage::

        from timekit import TimekitClient

        with TimekitClient(app="back-to-the-future") as client:
            client.auth(email="doc.brown@timekit.io", password="secret")
            slots = client.findtime.find(
                emails=["doc.brown@timekit.io", "marty.mcfly@timekit.io"],
                future="2 days",
                length="30 minutes",
            )

    Asynchronous usage::

        from timekit import AsyncTimekitClient

        async with AsyncTimekitClient(app="back-to-the-future") as client:
            await client.auth(email="doc.brown@timekit.io", password="secret")
            events = await client.include("attendees").events.list()

Exports:
    TimekitClient: Synchronous client for the Timekit API.
    AsyncTimekitClient: Asynchronous client for the Timekit API.
    TimekitConfig: Client configuration model.
    User: Active user identity.

    Exceptions:
        TimekitClientError: Base exception for all client errors.
        ConnectionError: Failed to connect to the server.
        TimeoutError: Request timed out.
        APIError: Server returned an error response.
        AuthenticationError: Credentials missing or rejected (HTTP 401).
        NotFoundError: Resource not found (HTTP 404).
        ValidationError: Request rejected by the server (HTTP 422).
        ServerError: Server-side error (HTTP 5xx).
"""

from timekit._session import TimekitConfig, User
from timekit.client import AsyncTimekitClient, TimekitClient
from timekit.exceptions import (
    APIError,
    AuthenticationError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimekitClientError,
    TimeoutError,
    ValidationError,
)

__all__ = [
    # Main clients
    "TimekitClient",
    "AsyncTimekitClient",
    # Session models
    "TimekitConfig",
    "User",
    # Exceptions
    "TimekitClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "ServerError",
]
