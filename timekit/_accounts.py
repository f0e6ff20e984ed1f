"""Accounts sub-client for the Timekit API.

This module provides AccountsClient and AsyncAccountsClient for the
connected-account endpoints (/accounts/*): listing the user's provider
accounts, the Google signup redirect and triggering a provider sync.

This is an internal module. Import from `timekit` instead.
"""

import logging
import webbrowser
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from timekit._base import AsyncBaseClient, BaseClient, _filter_none

if TYPE_CHECKING:
    from timekit._http import AsyncHTTPClient, HTTPClient

logger = logging.getLogger(__name__)

GOOGLE_SIGNUP_PATH = "/accounts/google/signup"


def _google_signup(
    http: "HTTPClient | AsyncHTTPClient",
    callback: str | None,
    auto_redirect: bool,
) -> str | None:
    query = urlencode(_filter_none(**{"Timekit-App": http.session.config.app, "callback": callback}))
    url = f"{http.build_url(GOOGLE_SIGNUP_PATH)}?{query}"
    if auto_redirect and webbrowser.open(url):
        logger.info("Opened Google signup in a browser")
        return None
    return url


class AccountsClient(BaseClient):
    """Synchronous client for the account endpoints (/accounts/*).

    Example:
        with TimekitClient(app="back-to-the-future") as client:
            url = client.accounts.google_signup(callback="https://example.com/done")
            accounts = client.accounts.list()
    """

    _BASE_PATH = "/accounts"

    def list(self) -> Any:
        """List the provider accounts connected to the current user."""
        return self._get(self._BASE_PATH)

    def google_signup(self, callback: str | None = None, auto_redirect: bool = False) -> str | None:
        """Build the URL of the Google signup/login flow.

        No request is made. When ``auto_redirect`` is set and a web browser
        is available, the URL is opened in it instead of being returned.

        Args:
            callback: URL the flow returns to when finished.
            auto_redirect: Open the URL in a browser if one is available.

        Returns:
            The signup URL, or None if it was opened in a browser.
        """
        return _google_signup(self._http, callback, auto_redirect)

    def google_calendars(self) -> Any:
        """List the calendars of the user's connected Google account."""
        return self._get(f"{self._BASE_PATH}/google/calendars")

    def sync(self) -> Any:
        """Start a server-side sync of all the user's accounts."""
        return self._get(f"{self._BASE_PATH}/sync")


class AsyncAccountsClient(AsyncBaseClient):
    """Asynchronous client for the account endpoints (/accounts/*)."""

    _BASE_PATH = "/accounts"

    async def list(self) -> Any:
        """List the provider accounts connected to the current user."""
        return await self._get(self._BASE_PATH)

    def google_signup(self, callback: str | None = None, auto_redirect: bool = False) -> str | None:
        """Build the URL of the Google signup/login flow.

        Synchronous even on the async client since no request is made.
        """
        return _google_signup(self._http, callback, auto_redirect)

    async def google_calendars(self) -> Any:
        """List the calendars of the user's connected Google account."""
        return await self._get(f"{self._BASE_PATH}/google/calendars")

    async def sync(self) -> Any:
        """Start a server-side sync of all the user's accounts."""
        return await self._get(f"{self._BASE_PATH}/sync")
