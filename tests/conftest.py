from typing import Callable, List

import httpx
import pytest

from influxline.client import HttpClient


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network access")


class MockServer:
    """
    Records requests and answers them with a configurable handler.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(204)
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def respond(self, status_code: int, **kwargs) -> None:
        self.handler = lambda request: httpx.Response(status_code, **kwargs)

    def fail(self, exc: Exception) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc

        self.handler = handler

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def mock_server() -> MockServer:
    return MockServer()


@pytest.fixture
def http_client(mock_server: MockServer):
    client = httpx.Client(transport=httpx.MockTransport(mock_server))
    yield client
    client.close()


@pytest.fixture
def client(http_client: httpx.Client) -> HttpClient:
    return HttpClient("http://localhost:8086", http_client=http_client)
