"""Pytest configuration and shared fixtures."""

import json
from typing import Any, Callable, Iterator

import httpx
import pytest

from timekit import AsyncTimekitClient, TimekitClient


class RecordingHandler:
    """MockTransport handler that records requests and replies with a fixed response.

    Attributes:
        requests: Every request received, in order.
        status_code: Status code of the canned response.
        body: JSON body of the canned response.
    """

    def __init__(self, status_code: int = 200, body: Any = None) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = {"data": {}} if body is None else body

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def handler() -> RecordingHandler:
    """A recording handler answering 200 with an empty envelope."""
    return RecordingHandler()


@pytest.fixture
def make_client() -> Iterator[Callable[..., TimekitClient]]:
    """Factory for sync clients backed by a MockTransport."""
    clients: list[TimekitClient] = []

    def factory(handler: Callable[[httpx.Request], httpx.Response], **config: Any) -> TimekitClient:
        client = TimekitClient(transport=httpx.MockTransport(handler), **config)
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()


@pytest.fixture
def make_async_client() -> Callable[..., AsyncTimekitClient]:
    """Factory for async clients backed by a MockTransport."""

    def factory(handler: Callable[[httpx.Request], httpx.Response], **config: Any) -> AsyncTimekitClient:
        return AsyncTimekitClient(transport=httpx.MockTransport(handler), **config)

    return factory
