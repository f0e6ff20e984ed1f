"""Request pipeline for the Timekit client.

Every call made by a sub-client passes through ``HTTPClient.request`` (or
its async twin). The pipeline:
- Composes the absolute URL from the configured base URL and API version
- Attaches the Timekit-App, timestamp/timezone and Basic auth headers
- Injects one-shot ``include`` directives into the query string
- Decamelizes request body keys
- Unwraps the ``data`` envelope of responses and optionally camelizes keys
- Maps transport and HTTP failures to the client's exception hierarchy

This is an internal module and should not be imported directly by users.
"""

import copy
import logging
from typing import Any, Literal, Sequence

import httpx

from timekit._casing import camelize_keys, decamelize_keys
from timekit._session import Session
from timekit.exceptions import (
    APIError,
    AuthenticationError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# HTTP methods used by the Timekit API
HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

# Optional headers, sent only when the matching config option is set
OPTIONAL_HEADERS = {
    "input_timestamp_format": "Timekit-InputTimestampFormat",
    "output_timestamp_format": "Timekit-OutputTimestampFormat",
    "timezone": "Timekit-Timezone",
}


def _parse_error_response(response: httpx.Response) -> tuple[str, str | None, dict | None]:
    """Parse an error response to extract message, type, and details.

    Timekit reports failures as ``{"error": "..."}`` or, for validation
    failures, ``{"errors": {"field": ["msg", ...]}}``. Falls back to the
    raw response text if the body is not JSON.

    Args:
        response: The HTTP response to parse.

    Returns:
        A tuple of (message, error_type, details).
    """
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        if text:
            return text, None, None
        return f"HTTP {response.status_code} error", None, None

    if isinstance(body, dict):
        errors = body.get("errors")
        if isinstance(errors, dict):
            messages = []
            for field, problems in errors.items():
                if isinstance(problems, list):
                    problems = ", ".join(str(p) for p in problems)
                messages.append(f"{field}: {problems}")
            return "; ".join(messages), "validation_error", errors

        for key in ("error", "message", "detail"):
            value = body.get(key)
            if isinstance(value, str):
                return value, body.get("type"), body.get("details")
            if isinstance(value, dict):
                return value.get("message", str(value)), value.get("type"), value

    return str(body), None, None


def _raise_for_status(response: httpx.Response) -> None:
    """Raise an appropriate exception for error status codes.

    Args:
        response: The HTTP response to check.

    Raises:
        AuthenticationError: For HTTP 401 responses.
        NotFoundError: For HTTP 404 responses.
        ValidationError: For HTTP 422 responses.
        ServerError: For HTTP 5xx responses.
        APIError: For other HTTP 4xx responses.
    """
    if response.is_success:
        return

    message, error_type, details = _parse_error_response(response)
    status_code = response.status_code

    try:
        response_body = response.json()
    except ValueError:
        response_body = response.text

    if status_code == 401:
        raise AuthenticationError(message=message, details=details, response_body=response_body)
    elif status_code == 404:
        raise NotFoundError(message=message, details=details, response_body=response_body)
    elif status_code == 422:
        raise ValidationError(message=message, details=details, response_body=response_body)
    elif status_code >= 500:
        raise ServerError(
            message=message,
            status_code=status_code,
            details=details,
            response_body=response_body,
        )
    else:
        raise APIError(
            message=message,
            status_code=status_code,
            error_type=error_type,
            details=details,
            response_body=response_body,
        )


def _unwrap_response(body: Any, convert_to_camelcase: bool) -> Any:
    """Strip the ``data`` envelope and optionally camelize keys.

    Applied to a single call's successful response only.
    """
    if isinstance(body, dict) and "data" in body:
        body = body["data"]
        if convert_to_camelcase:
            body = camelize_keys(body)
    return body


class _RequestPipeline:
    """Request assembly shared by the sync and async HTTP clients.

    Attributes:
        session: The session providing configuration and identity.
        timeout: Request timeout in seconds.
    """

    def __init__(self, session: Session, timeout: float) -> None:
        self.session = session
        self.timeout = timeout
        self._includes: list[str] = []

    def build_url(self, path: str) -> str:
        """Compose the absolute URL for an endpoint path.

        Plain concatenation of base URL, API version and path; slashes are
        not normalized.
        """
        config = self.session.config
        return f"{config.api_base_url}{config.api_version}{path}"

    def build_headers(self) -> dict[str, str]:
        """Assemble the headers for the next request from the session."""
        config = self.session.config
        headers: dict[str, str] = {}
        if config.app is not None:
            headers["Timekit-App"] = str(config.app)
        authorization = self.session.authorization_header()
        if authorization:
            headers["Authorization"] = authorization
        for option, header in OPTIONAL_HEADERS.items():
            value = getattr(config, option)
            if value:
                headers[header] = str(value)
        return headers

    def _take_includes(self) -> list[str]:
        includes, self._includes = self._includes, []
        return includes

    def _prepare(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None,
        json: Any,
    ) -> dict[str, Any]:
        includes = self._take_includes()
        if includes:
            params = dict(params or {})
            params["include"] = ",".join(includes)

        # Filter out None values from params
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        if json is not None:
            json = decamelize_keys(json)

        headers = self.build_headers()
        url = self.build_url(path)
        logger.debug(
            "%s %s (authenticated=%s, include=%s)",
            method,
            url,
            "Authorization" in headers,
            ",".join(includes) or None,
        )
        return {
            "method": method,
            "url": url,
            "params": params,
            "json": json,
            "headers": headers,
        }

    def _finish(self, response: httpx.Response) -> Any:
        if not response.is_success:
            logger.warning(
                "%s %s failed with HTTP %s",
                response.request.method,
                response.request.url,
                response.status_code,
            )
        _raise_for_status(response)

        # Return parsed JSON, raw text for non-JSON bodies, or None when empty
        if not response.content:
            return None
        try:
            body = response.json()
        except ValueError:
            logger.debug("Non-JSON response from %s", response.request.url)
            return response.text
        return _unwrap_response(body, self.session.config.convert_response_to_camelcase)

    def _transport_error(self, url: str, error: httpx.TransportError) -> Exception:
        if isinstance(error, httpx.TimeoutException):
            logger.warning("Request to %s timed out after %ss", url, self.timeout)
            return TimeoutError(message=f"Request to {url} timed out", timeout=self.timeout, url=url)
        logger.warning("Request to %s failed: %s", url, error)
        return ConnectionError(message=f"Failed to connect to {url}", url=url, cause=error)


class HTTPClient(_RequestPipeline):
    """Synchronous request pipeline.

    Wraps httpx.Client. The session is read on every request, so changes
    made through ``configure`` or ``set_user`` apply to the next call.

    Attributes:
        session: The session providing configuration and identity.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        session: Session,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            session: The session providing configuration and identity.
            timeout: Request timeout in seconds.
            transport: Custom transport (e.g., MockTransport for testing).
        """
        super().__init__(session, timeout)
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def with_includes(self, includes: Sequence[str]) -> "HTTPClient":
        """Return a view that sends ``includes`` with its next request.

        The view shares this client's session and connection pool. Its
        includes are consumed by the first request made through it.
        """
        view = copy.copy(self)
        view._includes = list(includes)
        return view

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Make an HTTP request and return the normalized response body.

        Args:
            method: The HTTP method (GET, POST, etc.).
            path: The endpoint path, appended to base URL and API version.
            params: Query parameters to include in the URL.
            json: JSON body to send; keys are decamelized.

        Returns:
            The unwrapped response body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the server returns an error response.
        """
        prepared = self._prepare(method, path, params, json)
        try:
            response = self._client.request(**prepared)
        except httpx.TransportError as e:
            raise self._transport_error(prepared["url"], e) from e
        return self._finish(response)

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a GET request."""
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a POST request."""
        return self.request("POST", path, params=params, json=json)

    def put(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a PUT request."""
        return self.request("PUT", path, params=params, json=json)

    def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a DELETE request."""
        return self.request("DELETE", path, params=params)


class AsyncHTTPClient(_RequestPipeline):
    """Asynchronous request pipeline.

    Wraps httpx.AsyncClient; identical request assembly to HTTPClient.

    Attributes:
        session: The session providing configuration and identity.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        session: Session,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the async HTTP client.

        Args:
            session: The session providing configuration and identity.
            timeout: Request timeout in seconds.
            transport: Custom transport (e.g., MockTransport for testing).
        """
        super().__init__(session, timeout)
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    def with_includes(self, includes: Sequence[str]) -> "AsyncHTTPClient":
        """Return a view that sends ``includes`` with its next request."""
        view = copy.copy(self)
        view._includes = list(includes)
        return view

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Make an async HTTP request and return the normalized response body.

        Args:
            method: The HTTP method (GET, POST, etc.).
            path: The endpoint path, appended to base URL and API version.
            params: Query parameters to include in the URL.
            json: JSON body to send; keys are decamelized.

        Returns:
            The unwrapped response body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the server returns an error response.
        """
        prepared = self._prepare(method, path, params, json)
        try:
            response = await self._client.request(**prepared)
        except httpx.TransportError as e:
            raise self._transport_error(prepared["url"], e) from e
        return self._finish(response)

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make an async GET request."""
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make an async POST request."""
        return await self.request("POST", path, params=params, json=json)

    async def put(
        self,
        path: str,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make an async PUT request."""
        return await self.request("PUT", path, params=params, json=json)

    async def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make an async DELETE request."""
        return await self.request("DELETE", path, params=params)
