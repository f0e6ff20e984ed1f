"""Main Timekit client classes.

This module provides the main entry points for interacting with the Timekit
API:
- TimekitClient: Synchronous client
- AsyncTimekitClient: Asynchronous client

Both clients hold the session (configuration and current user), expose
namespaced access to every resource through sub-client properties (e.g.
``client.events``, ``client.meetings``) and authenticate with ``auth()``.

Example:
    Synchronous usage::

        from timekit import TimekitClient

        with TimekitClient(app="back-to-the-future") as client:
            client.auth(email="doc.brown@timekit.io", password="secret")
            events = client.include("attendees", "calendar").events.list()

    Asynchronous usage::

        from timekit import AsyncTimekitClient

        async with AsyncTimekitClient(app="back-to-the-future") as client:
            await client.auth(email="doc.brown@timekit.io", password="secret")
            meetings = await client.meetings.list()
"""

import logging
from typing import Any, Mapping

import httpx

from timekit._accounts import AccountsClient, AsyncAccountsClient
from timekit._apps import AppsClient, AsyncAppsClient
from timekit._calendars import AsyncCalendarsClient, CalendarsClient
from timekit._contacts import AsyncContactsClient, ContactsClient
from timekit._credentials import AsyncCredentialsClient, CredentialsClient
from timekit._events import AsyncEventsClient, EventsClient
from timekit._findtime import AsyncFindTimeClient, FindTimeClient
from timekit._http import AsyncHTTPClient, HTTPClient
from timekit._meetings import AsyncMeetingsClient, MeetingsClient
from timekit._session import Session, User, load_env_options
from timekit._users import AsyncPropertiesClient, AsyncUsersClient, PropertiesClient, UsersClient

logger = logging.getLogger(__name__)

AUTH_PATH = "/auth"


def _credentials_from(body: Any) -> tuple[str, str]:
    """Extract (email, api_token) from an auth response body.

    Accepts both wire keys and camelized keys. Returns empty credentials
    unless both values are present.
    """
    if not isinstance(body, dict):
        return "", ""
    email = body.get("email") or ""
    api_token = body.get("api_token") or body.get("apiToken") or ""
    if not (email and api_token):
        return "", ""
    return email, api_token


class _SessionMixin:
    """Session operations shared by the sync and async clients."""

    _session: Session

    def configure(self, options: Mapping[str, Any] | None = None, /, **kwargs: Any) -> dict[str, Any]:
        """Merge options into the client configuration.

        Options may be given by wire name (``apiBaseUrl``) or Python name
        (``api_base_url``). Keys not supplied keep their current values.

        Returns:
            The full resulting configuration keyed by wire names.
        """
        return self._session.configure(options, **kwargs)

    def get_config(self) -> dict[str, Any]:
        """Return a copy of the current configuration."""
        return self._session.get_config()

    def set_user(self, email: str, api_token: str) -> None:
        """Set the active user manually (``auth()`` does this automatically).

        Both values are stored as given, including empty strings; requests
        carry Basic auth only while both are non-empty.
        """
        self._session.set_user(email, api_token)

    def get_user(self) -> User:
        """Return a snapshot of the active user."""
        return self._session.get_user()

    def _store_auth_result(self, body: Any) -> None:
        email, api_token = _credentials_from(body)
        self._session.set_user(email, api_token)
        if api_token:
            logger.info("Authenticated as %s", email)
        else:
            logger.warning("Auth response did not contain credentials; user cleared")

    def _clear_user_after_failure(self, error: Exception) -> None:
        logger.warning("Authentication failed, clearing user: %s", error)
        self._session.set_user("", "")


class TimekitClient(_SessionMixin):
    """Synchronous client for the Timekit API.

    Provides a unified interface to all Timekit endpoints through namespaced
    sub-clients. Supports the context manager protocol for automatic
    resource cleanup.

    Example:
        Basic usage with context manager::

            with TimekitClient(app="back-to-the-future", timezone="America/Los_Angeles") as client:
                client.auth(email="doc.brown@timekit.io", password="secret")
                client.events.create(
                    start=datetime(2015, 10, 21, 16, 29, tzinfo=timezone.utc),
                    end=datetime(2015, 10, 21, 17, 0, tzinfo=timezone.utc),
                    what="Time travel",
                    calendar_id="22f86f0c-ee80-470c-95e8-dadd9d05edd2",
                )

        Including related resources in a single call::

            events = client.include("attendees", "calendar").events.list()
    """

    def __init__(
        self,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
        email: str = "",
        api_token: str = "",
        **config: Any,
    ) -> None:
        """Initialize the Timekit client.

        Args:
            timeout: Request timeout in seconds (default: 30.0).
            transport: Custom HTTP transport (e.g., MockTransport for testing).
            email: Email of the user to act as, if already known.
            api_token: API token of that user.
            **config: Initial configuration options (``app``,
                ``api_base_url``, ``timezone``, ...).
        """
        session = Session(**config)
        if email or api_token:
            session.set_user(email, api_token)
        self._init_from_http(HTTPClient(session, timeout=timeout, transport=transport))

    def _init_from_http(self, http: HTTPClient) -> None:
        self._http = http
        self._session = http.session

        # Sub-clients are created lazily by the properties below
        self._accounts: AccountsClient | None = None
        self._apps: AppsClient | None = None
        self._calendars: CalendarsClient | None = None
        self._contacts: ContactsClient | None = None
        self._events: EventsClient | None = None
        self._findtime: FindTimeClient | None = None
        self._meetings: MeetingsClient | None = None
        self._users: UsersClient | None = None
        self._properties: PropertiesClient | None = None
        self._credentials: CredentialsClient | None = None

    @classmethod
    def from_env(cls, **kwargs: Any) -> "TimekitClient":
        """Create a client configured from ``TIMEKIT_*`` environment variables.

        A ``.env`` file is loaded first. Keyword arguments override values
        read from the environment.
        """
        options, email, api_token = load_env_options()
        settings: dict[str, Any] = {**options, "email": email, "api_token": api_token}
        settings.update(kwargs)
        return cls(**settings)

    def __enter__(self) -> "TimekitClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources.

        Include views share the transport of the client they were derived
        from; close the original client, not the view.
        """
        self._http.close()

    def include(self, *items: str) -> "TimekitClient":
        """Request related resources inline with the next call.

        Returns a view of this client that shares its session and
        connection pool. The first request made through the view carries
        ``include=<items joined by commas>``; later requests through it do
        not. The client itself is not modified, so concurrent calls on it
        never pick up these includes.

        Example:
            client.include("attendees", "calendar").events.get(event_id)
        """
        view = TimekitClient.__new__(TimekitClient)
        view._init_from_http(self._http.with_includes(items))
        return view

    def auth(self, email: str, password: str, **extra: Any) -> Any:
        """Authenticate a user and store their API token for later calls.

        On success the returned email and API token become the active user.
        On failure the active user is cleared and the error is re-raised.

        Args:
            email: The user's email.
            password: The user's password.
            **extra: Additional fields for the auth request.

        Returns:
            The authenticated user as returned by the API.

        Raises:
            AuthenticationError: If the credentials are rejected.
            TimekitClientError: For any other failure.
        """
        try:
            body = self._http.post(AUTH_PATH, json={"email": email, "password": password, **extra})
        except Exception as e:
            self._clear_user_after_failure(e)
            raise
        self._store_auth_result(body)
        return body

    # Sub-client properties (lazy initialization)

    @property
    def accounts(self) -> AccountsClient:
        """Access connected account endpoints (/accounts/*)."""
        if self._accounts is None:
            self._accounts = AccountsClient(self._http)
        return self._accounts

    @property
    def apps(self) -> AppsClient:
        """Access app management endpoints (/apps/*)."""
        if self._apps is None:
            self._apps = AppsClient(self._http)
        return self._apps

    @property
    def calendars(self) -> CalendarsClient:
        """Access calendar endpoints (/calendars/*)."""
        if self._calendars is None:
            self._calendars = CalendarsClient(self._http)
        return self._calendars

    @property
    def contacts(self) -> ContactsClient:
        """Access the contacts endpoint (/contacts/)."""
        if self._contacts is None:
            self._contacts = ContactsClient(self._http)
        return self._contacts

    @property
    def events(self) -> EventsClient:
        """Access event and availability endpoints (/events/*)."""
        if self._events is None:
            self._events = EventsClient(self._http)
        return self._events

    @property
    def findtime(self) -> FindTimeClient:
        """Access mutual availability search (/findtime, /findtime/bulk)."""
        if self._findtime is None:
            self._findtime = FindTimeClient(self._http)
        return self._findtime

    @property
    def meetings(self) -> MeetingsClient:
        """Access meeting endpoints (/meetings/*)."""
        if self._meetings is None:
            self._meetings = MeetingsClient(self._http)
        return self._meetings

    @property
    def users(self) -> UsersClient:
        """Access user endpoints (/users/*)."""
        if self._users is None:
            self._users = UsersClient(self._http)
        return self._users

    @property
    def properties(self) -> PropertiesClient:
        """Access user properties (/properties/*)."""
        if self._properties is None:
            self._properties = PropertiesClient(self._http)
        return self._properties

    @property
    def credentials(self) -> CredentialsClient:
        """Access credential endpoints (/credentials/*)."""
        if self._credentials is None:
            self._credentials = CredentialsClient(self._http)
        return self._credentials


class AsyncTimekitClient(_SessionMixin):
    """Asynchronous client for the Timekit API.

    Same surface as TimekitClient; request methods are coroutines.

    Example:
        async with AsyncTimekitClient(app="back-to-the-future") as client:
            await client.auth(email="doc.brown@timekit.io", password="secret")
            results = await asyncio.gather(
                client.include("attendees").events.list(),
                client.meetings.list(),
            )
    """

    def __init__(
        self,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
        email: str = "",
        api_token: str = "",
        **config: Any,
    ) -> None:
        """Initialize the async Timekit client.

        Args:
            timeout: Request timeout in seconds (default: 30.0).
            transport: Custom async HTTP transport.
            email: Email of the user to act as, if already known.
            api_token: API token of that user.
            **config: Initial configuration options.
        """
        session = Session(**config)
        if email or api_token:
            session.set_user(email, api_token)
        self._init_from_http(AsyncHTTPClient(session, timeout=timeout, transport=transport))

    def _init_from_http(self, http: AsyncHTTPClient) -> None:
        self._http = http
        self._session = http.session

        self._accounts: AsyncAccountsClient | None = None
        self._apps: AsyncAppsClient | None = None
        self._calendars: AsyncCalendarsClient | None = None
        self._contacts: AsyncContactsClient | None = None
        self._events: AsyncEventsClient | None = None
        self._findtime: AsyncFindTimeClient | None = None
        self._meetings: AsyncMeetingsClient | None = None
        self._users: AsyncUsersClient | None = None
        self._properties: AsyncPropertiesClient | None = None
        self._credentials: AsyncCredentialsClient | None = None

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AsyncTimekitClient":
        """Create a client configured from ``TIMEKIT_*`` environment variables."""
        options, email, api_token = load_env_options()
        settings: dict[str, Any] = {**options, "email": email, "api_token": api_token}
        settings.update(kwargs)
        return cls(**settings)

    async def __aenter__(self) -> "AsyncTimekitClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()

    def include(self, *items: str) -> "AsyncTimekitClient":
        """Request related resources inline with the next call.

        See ``TimekitClient.include``.
        """
        view = AsyncTimekitClient.__new__(AsyncTimekitClient)
        view._init_from_http(self._http.with_includes(items))
        return view

    async def auth(self, email: str, password: str, **extra: Any) -> Any:
        """Authenticate a user and store their API token for later calls.

        See ``TimekitClient.auth``.
        """
        try:
            body = await self._http.post(AUTH_PATH, json={"email": email, "password": password, **extra})
        except Exception as e:
            self._clear_user_after_failure(e)
            raise
        self._store_auth_result(body)
        return body

    @property
    def accounts(self) -> AsyncAccountsClient:
        """Access connected account endpoints (/accounts/*)."""
        if self._accounts is None:
            self._accounts = AsyncAccountsClient(self._http)
        return self._accounts

    @property
    def apps(self) -> AsyncAppsClient:
        """Access app management endpoints (/apps/*)."""
        if self._apps is None:
            self._apps = AsyncAppsClient(self._http)
        return self._apps

    @property
    def calendars(self) -> AsyncCalendarsClient:
        """Access calendar endpoints (/calendars/*)."""
        if self._calendars is None:
            self._calendars = AsyncCalendarsClient(self._http)
        return self._calendars

    @property
    def contacts(self) -> AsyncContactsClient:
        """Access the contacts endpoint (/contacts/)."""
        if self._contacts is None:
            self._contacts = AsyncContactsClient(self._http)
        return self._contacts

    @property
    def events(self) -> AsyncEventsClient:
        """Access event and availability endpoints (/events/*)."""
        if self._events is None:
            self._events = AsyncEventsClient(self._http)
        return self._events

    @property
    def findtime(self) -> AsyncFindTimeClient:
        """Access mutual availability search (/findtime, /findtime/bulk)."""
        if self._findtime is None:
            self._findtime = AsyncFindTimeClient(self._http)
        return self._findtime

    @property
    def meetings(self) -> AsyncMeetingsClient:
        """Access meeting endpoints (/meetings/*)."""
        if self._meetings is None:
            self._meetings = AsyncMeetingsClient(self._http)
        return self._meetings

    @property
    def users(self) -> AsyncUsersClient:
        """Access user endpoints (/users/*)."""
        if self._users is None:
            self._users = AsyncUsersClient(self._http)
        return self._users

    @property
    def properties(self) -> AsyncPropertiesClient:
        """Access user properties (/properties/*)."""
        if self._properties is None:
            self._properties = AsyncPropertiesClient(self._http)
        return self._properties

    @property
    def credentials(self) -> AsyncCredentialsClient:
        """Access credential endpoints (/credentials/*)."""
        if self._credentials is None:
            self._credentials = AsyncCredentialsClient(self._http)
        return self._credentials
