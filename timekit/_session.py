"""Session state shared by a client and its include views.

A session holds the client configuration and the identity of the current
user. Both are read by the HTTP layer on every request; neither is reset
automatically.

This is an internal module. Import from `timekit` instead.
"""

import base64
import logging
import os
from typing import Any, Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# Environment variables read by load_env_options(), mapped to config keys
ENV_CONFIG_KEYS = {
    "TIMEKIT_APP": "app",
    "TIMEKIT_API_BASE_URL": "apiBaseUrl",
    "TIMEKIT_API_VERSION": "apiVersion",
    "TIMEKIT_TIMEZONE": "timezone",
}


class TimekitConfig(BaseModel):
    """Client configuration.

    Every option can be given either by its wire name (``apiBaseUrl``) or
    its Python name (``api_base_url``). Unknown options are kept as extras.
    Values are stored as given, without type checks; the HTTP layer
    renders them as strings when building URLs and headers.

    Attributes:
        app: Client identifier sent as the ``Timekit-App`` header.
        api_base_url: URL prefix of the API.
        api_version: Version path segment appended to the base URL.
        convert_response_to_camelcase: Camelize response keys when set.
        input_timestamp_format: Sent as ``Timekit-InputTimestampFormat``.
        output_timestamp_format: Sent as ``Timekit-OutputTimestampFormat``.
        timezone: Sent as ``Timekit-Timezone``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    app: Any = "demo"
    api_base_url: Any = Field("https://api.timekit.io/", alias="apiBaseUrl")
    api_version: Any = Field("v1", alias="apiVersion")
    convert_response_to_camelcase: Any = Field(False, alias="convertResponseToCamelcase")
    input_timestamp_format: Any = Field(None, alias="inputTimestampFormat")
    output_timestamp_format: Any = Field(None, alias="outputTimestampFormat")
    timezone: Any = None


class User(BaseModel):
    """Identity used for Basic auth.

    Both fields are empty for an anonymous session.
    """

    email: str = ""
    api_token: str = ""

    @property
    def is_authenticated(self) -> bool:
        return bool(self.email and self.api_token)


def _to_wire_keys(options: Mapping[str, Any]) -> dict[str, Any]:
    """Map Python option names to their wire aliases; other keys pass through."""
    wire: dict[str, Any] = {}
    for key, value in options.items():
        field = TimekitConfig.model_fields.get(key)
        wire[field.alias or key if field else key] = value
    return wire


class Session:
    """Configuration and identity for one client instance.

    The session is shared by reference between a client and every include
    view derived from it, so ``configure`` and ``set_user`` on any of them
    are visible to all.
    """

    def __init__(self, **options: Any) -> None:
        self._config = TimekitConfig()
        self._user = User()
        if options:
            self.configure(options)

    @property
    def config(self) -> TimekitConfig:
        """The live configuration model (read by the HTTP layer)."""
        return self._config

    @property
    def user(self) -> User:
        """The live identity (read by the HTTP layer)."""
        return self._user

    def configure(self, options: Mapping[str, Any] | None = None, /, **kwargs: Any) -> dict[str, Any]:
        """Merge options into the configuration.

        Keys present in the supplied options overwrite the current values;
        all other keys are left untouched. Unknown keys are stored as-is.

        Args:
            options: Mapping of option names to values.
            **kwargs: Further options, merged after ``options``.

        Returns:
            The full resulting configuration keyed by wire names.
        """
        merged = {**(options or {}), **kwargs}
        current = self._config.model_dump(by_alias=True)
        self._config = TimekitConfig.model_validate({**current, **_to_wire_keys(merged)})
        logger.debug("Configuration updated: %s", sorted(merged))
        return self.get_config()

    def get_config(self) -> dict[str, Any]:
        """Return a copy of the configuration keyed by wire names.

        Mutating the returned dict has no effect on the session; use
        ``configure`` instead.
        """
        return self._config.model_dump(by_alias=True)

    def set_user(self, email: str, api_token: str) -> None:
        """Overwrite the current identity, including with empty strings."""
        self._user = User(email=email, api_token=api_token)

    def get_user(self) -> User:
        """Return a snapshot of the current identity."""
        return self._user.model_copy()

    def authorization_header(self) -> str | None:
        """Build the Basic auth header value, or None when anonymous."""
        if not self._user.is_authenticated:
            return None
        credentials = f"{self._user.email}:{self._user.api_token}"
        return "Basic " + base64.b64encode(credentials.encode("utf-8")).decode("ascii")


def load_env_options() -> tuple[dict[str, Any], str, str]:
    """Read client settings from the environment.

    A ``.env`` file in the working directory (or a parent) is loaded first;
    variables already set in the process environment take precedence.

    Returns:
        A tuple of (config options, email, api token). Unset variables are
        omitted from the options and yield empty credentials.
    """
    load_dotenv()
    options = {
        config_key: os.environ[env_key]
        for env_key, config_key in ENV_CONFIG_KEYS.items()
        if os.environ.get(env_key)
    }
    return options, os.environ.get("TIMEKIT_EMAIL", ""), os.environ.get("TIMEKIT_API_TOKEN", "")
