"""Users sub-client for the Timekit API.

This module provides UsersClient and AsyncUsersClient for the user
endpoints (/users/*) and the user properties store (/properties/*).

This is an internal module. Import from `timekit` instead.
"""

from typing import Any

from timekit._base import AsyncBaseClient, BaseClient


class UsersClient(BaseClient):
    """Synchronous client for the user endpoints (/users/*).

    Creating a user does not authenticate as that user; call
    ``TimekitClient.auth`` afterwards.

    Example:
        with TimekitClient() as client:
            client.users.create(
                first_name="Marty",
                last_name="McFly",
                email="marty.mcfly@timekit.io",
                password="einstein",
                timezone="America/Los_Angeles",
            )
            client.auth(email="marty.mcfly@timekit.io", password="einstein")
            me = client.users.me()
    """

    _BASE_PATH = "/users"

    def create(self, **data: Any) -> Any:
        """Create a new user with the given properties."""
        return self._post(self._BASE_PATH, json=data)

    def me(self) -> Any:
        """Fetch the current user's data from the server."""
        return self._get(f"{self._BASE_PATH}/me")

    def update(self, **data: Any) -> Any:
        """Update the current user."""
        return self._put(f"{self._BASE_PATH}/me", json=data)

    def reset_password(self, email: str, **extra: Any) -> Any:
        """Request a password reset email for a user."""
        return self._post(f"{self._BASE_PATH}/resetpassword", json={"email": email, **extra})

    def timezone(self, email: str) -> Any:
        """Get the timezone of the user with the given email."""
        return self._get(f"{self._BASE_PATH}/timezone/{email}")


class AsyncUsersClient(AsyncBaseClient):
    """Asynchronous client for the user endpoints (/users/*)."""

    _BASE_PATH = "/users"

    async def create(self, **data: Any) -> Any:
        return await self._post(self._BASE_PATH, json=data)

    async def me(self) -> Any:
        return await self._get(f"{self._BASE_PATH}/me")

    async def update(self, **data: Any) -> Any:
        return await self._put(f"{self._BASE_PATH}/me", json=data)

    async def reset_password(self, email: str, **extra: Any) -> Any:
        return await self._post(f"{self._BASE_PATH}/resetpassword", json={"email": email, **extra})

    async def timezone(self, email: str) -> Any:
        return await self._get(f"{self._BASE_PATH}/timezone/{email}")


class PropertiesClient(BaseClient):
    """Synchronous client for user properties (/properties/*).

    Properties are arbitrary key/value pairs stored on the current user.
    """

    _BASE_PATH = "/properties"

    def list(self) -> Any:
        """Get all of the current user's properties."""
        return self._get(self._BASE_PATH)

    def get(self, key: str) -> Any:
        """Get a single property by key."""
        return self._get(f"{self._BASE_PATH}/{key}")

    def set(self, **properties: Any) -> Any:
        """Set or update one or more properties.

        Note that property names are keys of the request body and are
        therefore decamelized like any other key.
        """
        return self._put(self._BASE_PATH, json=properties)


class AsyncPropertiesClient(AsyncBaseClient):
    """Asynchronous client for user properties (/properties/*)."""

    _BASE_PATH = "/properties"

    async def list(self) -> Any:
        return await self._get(self._BASE_PATH)

    async def get(self, key: str) -> Any:
        return await self._get(f"{self._BASE_PATH}/{key}")

    async def set(self, **properties: Any) -> Any:
        return await self._put(self._BASE_PATH, json=properties)
