"""Unit tests for the resource sub-clients.

Each sub-client maps its methods 1:1 to an HTTP method and path. These
tests run them against MagicMock / AsyncMock HTTP clients and check the
path, body and query parameters handed to the pipeline.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from timekit._accounts import AccountsClient, AsyncAccountsClient
from timekit._apps import AppsClient, AsyncAppsClient
from timekit._calendars import AsyncCalendarsClient, CalendarsClient
from timekit._contacts import AsyncContactsClient, ContactsClient
from timekit._credentials import AsyncCredentialsClient, CredentialsClient
from timekit._events import AsyncEventsClient, EventsClient
from timekit._findtime import AsyncFindTimeClient, FindTimeClient
from timekit._http import HTTPClient
from timekit._meetings import AsyncMeetingsClient, MeetingsClient
from timekit._session import Session
from timekit._users import (
    AsyncPropertiesClient,
    AsyncUsersClient,
    PropertiesClient,
    UsersClient,
)


@pytest.fixture
def mock_http() -> MagicMock:
    http = MagicMock()
    http.get.return_value = {"ok": True}
    http.post.return_value = {"ok": True}
    http.put.return_value = {"ok": True}
    http.delete.return_value = {"ok": True}
    return http


# =============================================================================
# Accounts
# =============================================================================


class TestAccountsClient:
    """Tests for AccountsClient."""

    def test_list(self, mock_http) -> None:
        result = AccountsClient(mock_http).list()

        mock_http.get.assert_called_once_with("/accounts", params=None)
        assert result == {"ok": True}

    def test_google_calendars(self, mock_http) -> None:
        AccountsClient(mock_http).google_calendars()

        mock_http.get.assert_called_once_with("/accounts/google/calendars", params=None)

    def test_sync(self, mock_http) -> None:
        AccountsClient(mock_http).sync()

        mock_http.get.assert_called_once_with("/accounts/sync", params=None)


class TestGoogleSignup:
    """Tests for the Google signup redirect helper."""

    @pytest.fixture
    def http(self):
        client = HTTPClient(Session(app="bttf"))
        yield client
        client.close()

    def test_returns_url(self, http) -> None:
        url = AccountsClient(http).google_signup()

        assert url == "https://api.timekit.io/v1/accounts/google/signup?Timekit-App=bttf"

    def test_callback_appended(self, http) -> None:
        url = AccountsClient(http).google_signup(callback="https://example.com/done")

        assert url == (
            "https://api.timekit.io/v1/accounts/google/signup"
            "?Timekit-App=bttf&callback=https%3A%2F%2Fexample.com%2Fdone"
        )

    def test_no_request_made(self, mock_http) -> None:
        mock_http.session = Session()
        mock_http.build_url.return_value = "https://api.timekit.io/v1/accounts/google/signup"

        AccountsClient(mock_http).google_signup()

        mock_http.get.assert_not_called()
        mock_http.build_url.assert_called_once_with("/accounts/google/signup")

    def test_auto_redirect_opens_browser(self, http, monkeypatch: pytest.MonkeyPatch) -> None:
        opened = []
        monkeypatch.setattr("timekit._accounts.webbrowser.open", lambda url: opened.append(url) or True)

        result = AccountsClient(http).google_signup(auto_redirect=True)

        assert result is None
        assert opened == ["https://api.timekit.io/v1/accounts/google/signup?Timekit-App=bttf"]

    def test_auto_redirect_without_browser_returns_url(self, http, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("timekit._accounts.webbrowser.open", lambda url: False)

        result = AccountsClient(http).google_signup(auto_redirect=True)

        assert result == "https://api.timekit.io/v1/accounts/google/signup?Timekit-App=bttf"

    def test_without_auto_redirect_browser_untouched(self, http, monkeypatch: pytest.MonkeyPatch) -> None:
        opener = MagicMock()
        monkeypatch.setattr("timekit._accounts.webbrowser.open", opener)

        AccountsClient(http).google_signup()

        opener.assert_not_called()

    def test_async_client_builds_same_url(self, http) -> None:
        assert AsyncAccountsClient(http).google_signup() == AccountsClient(http).google_signup()


# =============================================================================
# Apps
# =============================================================================


class TestAppsClient:
    """Tests for AppsClient."""

    def test_list(self, mock_http) -> None:
        AppsClient(mock_http).list()

        mock_http.get.assert_called_once_with("/apps", params=None)

    def test_get(self, mock_http) -> None:
        AppsClient(mock_http).get("bttf")

        mock_http.get.assert_called_once_with("/apps/bttf", params=None)

    def test_create(self, mock_http) -> None:
        AppsClient(mock_http).create(name="Back to the Future", slug="bttf")

        mock_http.post.assert_called_once_with(
            "/apps", json={"name": "Back to the Future", "slug": "bttf"}, params=None
        )

    def test_update_moves_slug_to_path(self, mock_http) -> None:
        AppsClient(mock_http).update("bttf", name="Back to the Future II")

        mock_http.put.assert_called_once_with(
            "/apps/bttf", json={"name": "Back to the Future II"}, params=None
        )

    def test_delete(self, mock_http) -> None:
        AppsClient(mock_http).delete("bttf")

        mock_http.delete.assert_called_once_with("/apps/bttf", params=None)


# =============================================================================
# Calendars and contacts
# =============================================================================


class TestCalendarsClient:
    """Tests for CalendarsClient."""

    def test_list(self, mock_http) -> None:
        CalendarsClient(mock_http).list()

        mock_http.get.assert_called_once_with("/calendars", params=None)

    def test_get(self, mock_http) -> None:
        CalendarsClient(mock_http).get("cal-1")

        mock_http.get.assert_called_once_with("/calendars/cal-1", params=None)

    def test_create(self, mock_http) -> None:
        CalendarsClient(mock_http).create(name="Lab", description="DeLorean tests")

        mock_http.post.assert_called_once_with(
            "/calendars/", json={"name": "Lab", "description": "DeLorean tests"}, params=None
        )

    def test_create_omits_missing_description(self, mock_http) -> None:
        CalendarsClient(mock_http).create(name="Lab")

        assert mock_http.post.call_args[1]["json"] == {"name": "Lab"}

    def test_delete(self, mock_http) -> None:
        CalendarsClient(mock_http).delete("cal-1")

        mock_http.delete.assert_called_once_with("/calendars/cal-1", params=None)


class TestContactsClient:
    def test_list(self, mock_http) -> None:
        ContactsClient(mock_http).list()

        mock_http.get.assert_called_once_with("/contacts/", params=None)


# =============================================================================
# Events
# =============================================================================


class TestEventsClient:
    """Tests for EventsClient."""

    def test_list_without_filters(self, mock_http) -> None:
        EventsClient(mock_http).list()

        mock_http.get.assert_called_once_with("/events", params=None)

    def test_list_serializes_datetimes(self, mock_http) -> None:
        start = datetime(2015, 10, 21, 16, 29, tzinfo=timezone.utc)
        EventsClient(mock_http).list(start=start, end="2015-10-22T00:00:00+00:00")

        mock_http.get.assert_called_once_with(
            "/events",
            params={"start": "2015-10-21T16:29:00+00:00", "end": "2015-10-22T00:00:00+00:00"},
        )

    def test_get(self, mock_http) -> None:
        EventsClient(mock_http).get("evt-1")

        mock_http.get.assert_called_once_with("/events/evt-1", params=None)

    def test_create(self, mock_http) -> None:
        EventsClient(mock_http).create(
            start=datetime(2015, 10, 21, 16, 29, tzinfo=timezone.utc),
            end=datetime(2015, 10, 21, 17, 0, tzinfo=timezone.utc),
            what="Time travel",
            calendar_id="cal-1",
            participants=["marty.mcfly@timekit.io"],
        )

        mock_http.post.assert_called_once_with(
            "/events",
            json={
                "start": "2015-10-21T16:29:00+00:00",
                "end": "2015-10-21T17:00:00+00:00",
                "what": "Time travel",
                "calendar_id": "cal-1",
                "participants": ["marty.mcfly@timekit.io"],
            },
            params=None,
        )

    def test_create_passes_extra_fields(self, mock_http) -> None:
        EventsClient(mock_http).create(
            start="a", end="b", what="w", calendar_id="c", allDay=True
        )

        assert mock_http.post.call_args[1]["json"]["allDay"] is True

    def test_delete(self, mock_http) -> None:
        EventsClient(mock_http).delete("evt-1")

        mock_http.delete.assert_called_once_with("/events/evt-1", params=None)

    def test_availability(self, mock_http) -> None:
        EventsClient(mock_http).availability(
            start="2015-10-21T00:00:00+00:00",
            end="2015-10-22T00:00:00+00:00",
            email="marty.mcfly@timekit.io",
        )

        mock_http.get.assert_called_once_with(
            "/events/availability",
            params={
                "start": "2015-10-21T00:00:00+00:00",
                "end": "2015-10-22T00:00:00+00:00",
                "email": "marty.mcfly@timekit.io",
            },
        )


# =============================================================================
# FindTime
# =============================================================================


class TestFindTimeClient:
    """Tests for FindTimeClient."""

    def test_find(self, mock_http) -> None:
        FindTimeClient(mock_http).find(
            emails=["doc.brown@timekit.io", "marty.mcfly@timekit.io"],
            future="2 days",
            length="30 minutes",
        )

        mock_http.post.assert_called_once_with(
            "/findtime",
            json={
                "emails": ["doc.brown@timekit.io", "marty.mcfly@timekit.io"],
                "future": "2 days",
                "length": "30 minutes",
            },
            params=None,
        )

    def test_bulk(self, mock_http) -> None:
        queries = [{"emails": ["a@b.c"]}, {"emails": ["d@e.f"]}]
        FindTimeClient(mock_http).bulk(queries)

        mock_http.post.assert_called_once_with("/findtime/bulk", json=queries, params=None)


# =============================================================================
# Meetings
# =============================================================================


class TestMeetingsClient:
    """Tests for MeetingsClient."""

    def test_list(self, mock_http) -> None:
        MeetingsClient(mock_http).list()

        mock_http.get.assert_called_once_with("/meetings", params=None)

    def test_get(self, mock_http) -> None:
        MeetingsClient(mock_http).get("m-1")

        mock_http.get.assert_called_once_with("/meetings/m-1", params=None)

    def test_create(self, mock_http) -> None:
        MeetingsClient(mock_http).create(what="Flux capacitor review")

        mock_http.post.assert_called_once_with(
            "/meetings", json={"what": "Flux capacitor review"}, params=None
        )

    def test_update_moves_id_to_path(self, mock_http) -> None:
        MeetingsClient(mock_http).update("m-1", what="Renamed")

        mock_http.put.assert_called_once_with("/meetings/m-1", json={"what": "Renamed"}, params=None)

    def test_set_availability(self, mock_http) -> None:
        MeetingsClient(mock_http).set_availability(suggestion_id=42, available=True)

        mock_http.post.assert_called_once_with(
            "/meetings/availability", json={"suggestion_id": 42, "available": True}, params=None
        )

    def test_book(self, mock_http) -> None:
        MeetingsClient(mock_http).book(suggestion_id=42)

        mock_http.post.assert_called_once_with(
            "/meetings/book", json={"suggestion_id": 42}, params=None
        )

    def test_invite(self, mock_http) -> None:
        MeetingsClient(mock_http).invite("m-1", emails=["marty.mcfly@timekit.io"])

        mock_http.post.assert_called_once_with(
            "/meetings/m-1/invite", json={"emails": ["marty.mcfly@timekit.io"]}, params=None
        )


# =============================================================================
# Users, properties and credentials
# =============================================================================


class TestUsersClient:
    """Tests for UsersClient."""

    def test_create(self, mock_http) -> None:
        UsersClient(mock_http).create(first_name="Marty", email="marty.mcfly@timekit.io")

        mock_http.post.assert_called_once_with(
            "/users", json={"first_name": "Marty", "email": "marty.mcfly@timekit.io"}, params=None
        )

    def test_me(self, mock_http) -> None:
        UsersClient(mock_http).me()

        mock_http.get.assert_called_once_with("/users/me", params=None)

    def test_update(self, mock_http) -> None:
        UsersClient(mock_http).update(timezone="America/Los_Angeles")

        mock_http.put.assert_called_once_with(
            "/users/me", json={"timezone": "America/Los_Angeles"}, params=None
        )

    def test_reset_password(self, mock_http) -> None:
        UsersClient(mock_http).reset_password("marty.mcfly@timekit.io")

        mock_http.post.assert_called_once_with(
            "/users/resetpassword", json={"email": "marty.mcfly@timekit.io"}, params=None
        )

    def test_timezone(self, mock_http) -> None:
        UsersClient(mock_http).timezone("marty.mcfly@timekit.io")

        mock_http.get.assert_called_once_with("/users/timezone/marty.mcfly@timekit.io", params=None)


class TestPropertiesClient:
    """Tests for PropertiesClient."""

    def test_list(self, mock_http) -> None:
        PropertiesClient(mock_http).list()

        mock_http.get.assert_called_once_with("/properties", params=None)

    def test_get(self, mock_http) -> None:
        PropertiesClient(mock_http).get("favorite_year")

        mock_http.get.assert_called_once_with("/properties/favorite_year", params=None)

    def test_set(self, mock_http) -> None:
        PropertiesClient(mock_http).set(favorite_year="1955")

        mock_http.put.assert_called_once_with(
            "/properties", json={"favorite_year": "1955"}, params=None
        )


class TestCredentialsClient:
    """Tests for CredentialsClient."""

    def test_list(self, mock_http) -> None:
        CredentialsClient(mock_http).list()

        mock_http.get.assert_called_once_with("/credentials", params=None)

    def test_create(self, mock_http) -> None:
        CredentialsClient(mock_http).create(type="client-token", scopes=["findtime"])

        mock_http.post.assert_called_once_with(
            "/credentials", json={"type": "client-token", "scopes": ["findtime"]}, params=None
        )

    def test_delete(self, mock_http) -> None:
        CredentialsClient(mock_http).delete("cred-1")

        mock_http.delete.assert_called_once_with("/credentials/cred-1", params=None)


# =============================================================================
# Async sub-clients
# =============================================================================


class TestAsyncSubClients:
    """The async sub-clients map to the same paths as the sync ones."""

    @pytest.fixture
    def async_http(self) -> AsyncMock:
        http = AsyncMock()
        http.get.return_value = {"ok": True}
        http.post.return_value = {"ok": True}
        http.put.return_value = {"ok": True}
        http.delete.return_value = {"ok": True}
        return http

    async def test_accounts(self, async_http) -> None:
        client = AsyncAccountsClient(async_http)
        await client.list()
        await client.google_calendars()
        await client.sync()

        paths = [call.args[0] for call in async_http.get.call_args_list]
        assert paths == ["/accounts", "/accounts/google/calendars", "/accounts/sync"]

    async def test_apps(self, async_http) -> None:
        client = AsyncAppsClient(async_http)
        await client.update("bttf", name="II")
        await client.delete("bttf")

        async_http.put.assert_called_once_with("/apps/bttf", json={"name": "II"}, params=None)
        async_http.delete.assert_called_once_with("/apps/bttf", params=None)

    async def test_calendars_and_contacts(self, async_http) -> None:
        await AsyncCalendarsClient(async_http).create(name="Lab")
        await AsyncContactsClient(async_http).list()

        async_http.post.assert_called_once_with("/calendars/", json={"name": "Lab"}, params=None)
        async_http.get.assert_called_once_with("/contacts/", params=None)

    async def test_events(self, async_http) -> None:
        result = await AsyncEventsClient(async_http).availability(email="a@b.c")

        async_http.get.assert_called_once_with("/events/availability", params={"email": "a@b.c"})
        assert result == {"ok": True}

    async def test_findtime(self, async_http) -> None:
        await AsyncFindTimeClient(async_http).find(emails=["a@b.c"], length="1 hour")

        async_http.post.assert_called_once_with(
            "/findtime", json={"emails": ["a@b.c"], "length": "1 hour"}, params=None
        )

    async def test_meetings(self, async_http) -> None:
        await AsyncMeetingsClient(async_http).invite("m-1", emails=["a@b.c"])

        async_http.post.assert_called_once_with(
            "/meetings/m-1/invite", json={"emails": ["a@b.c"]}, params=None
        )

    async def test_users_properties_credentials(self, async_http) -> None:
        await AsyncUsersClient(async_http).timezone("a@b.c")
        await AsyncPropertiesClient(async_http).set(key="value")
        await AsyncCredentialsClient(async_http).delete("cred-1")

        async_http.get.assert_called_once_with("/users/timezone/a@b.c", params=None)
        async_http.put.assert_called_once_with("/properties", json={"key": "value"}, params=None)
        async_http.delete.assert_called_once_with("/credentials/cred-1", params=None)
