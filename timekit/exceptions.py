"""Exception hierarchy for the Timekit API client.

This module defines all exceptions that can be raised by the Timekit client
library. The hierarchy is designed to allow catching specific error types or
broader categories as needed.

Exception Hierarchy:
    TimekitClientError (base)
    ├── ConnectionError - Network/connection failures
    ├── TimeoutError - Request timeout
    └── APIError - Server returned an error response
        ├── AuthenticationError (HTTP 401)
        ├── NotFoundError (HTTP 404)
        ├── ValidationError (HTTP 422)
        └── ServerError (HTTP 5xx)

Example:
    Catching specific errors::

        try:
            client.auth(email="doc.brown@timekit.io", password="secret")
        except AuthenticationError:
            print("Wrong email or password")

    Catching all API errors::

        try:
            client.events.create(...)
        except APIError as e:
            print(f"API error {e.status_code}: {e.message}")
"""

from typing import Any


class TimekitClientError(Exception):
    """Base exception for all Timekit client errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConnectionError(TimekitClientError):
    """Failed to reach the Timekit API.

    Raised when the transport cannot complete the exchange with the server,
    e.g. DNS failure, refused connection or a dropped socket.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed to connect.
        cause: The underlying transport exception.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.url = url
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} (url: {self.url})"
        return self.message


class TimeoutError(TimekitClientError):
    """Request timed out.

    Attributes:
        message: Human-readable error description.
        timeout: The timeout value in seconds.
        url: The URL that timed out.
    """

    def __init__(
        self,
        message: str,
        timeout: float | None = None,
        url: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        details = []
        if self.timeout is not None:
            details.append(f"timeout: {self.timeout}s")
        if self.url:
            details.append(f"url: {self.url}")
        if not details:
            return self.message
        return f"{self.message} ({', '.join(details)})"


class APIError(TimekitClientError):
    """The Timekit API returned an error response.

    Base class for all API-level errors. Raised when the server answers
    with an HTTP error status code (4xx or 5xx).

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from the server.
        error_type: Error type/code from the response body (if available).
        details: Additional error details from the response (if available).
        response_body: Raw response body for debugging.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        if self.error_type:
            return f"[HTTP {self.status_code}] [{self.error_type}] {self.message}"
        return f"[HTTP {self.status_code}] {self.message}"


class AuthenticationError(APIError):
    """Credentials were missing or rejected (HTTP 401).

    Raised by ``auth()`` for a wrong email/password pair and by any other
    call made without a valid API token.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_type="unauthorized",
            details=details,
            response_body=response_body,
        )


class NotFoundError(APIError):
    """Resource not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=404,
            error_type="not_found",
            details=details,
            response_body=response_body,
        )


class ValidationError(APIError):
    """The API rejected the request payload (HTTP 422).

    The client performs no validation of its own; this is always the
    server's verdict. ``details`` usually maps field names to messages.

    Example:
        try:
            client.users.create(email="not-an-email")
        except ValidationError as e:
            for field, errors in (e.details or {}).items():
                print(f"  {field}: {errors}")
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=422,
            error_type="validation_error",
            details=details,
            response_body=response_body,
        )


class ServerError(APIError):
    """Server-side error (HTTP 5xx)."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            error_type="server_error",
            details=details,
            response_body=response_body,
        )
