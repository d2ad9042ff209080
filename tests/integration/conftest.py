from collections.abc import Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from bfhl_form.config.settings import Settings
from bfhl_form.form.controller import build_controller
from bfhl_form.remote.example_client_adapter import ExampleRemoteClient
from bfhl_form.remote.httpx_client_adapter import HttpxRemoteClient
from bfhl_form.web.app import create_app

REMOTE_URL = "https://remote.test/bfhl"

REMOTE_RESPONSE = {
    "is_success": True,
    "alphabets": ["A", "B"],
    "numbers": ["1", "2"],
    "highest_lowercase_alphabet": ["b"],
}


class RecordingRemote:
    """httpx MockTransport handler that records requests and replies in turn."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: object = REMOTE_RESPONSE

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(session_secret_key="test-secret", remote_provider="http")


@pytest.fixture
def remote() -> RecordingRemote:
    return RecordingRemote()


@pytest.fixture
def client(test_settings: Settings, remote: RecordingRemote) -> Generator[TestClient, None, None]:
    remote_client = HttpxRemoteClient(
        endpoint_url=REMOTE_URL,
        transport=httpx.MockTransport(remote),
    )
    app = create_app(test_settings, build_controller(test_settings, client=remote_client))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def example_client(test_settings: Settings) -> Generator[TestClient, None, None]:
    app = create_app(test_settings, build_controller(test_settings, client=ExampleRemoteClient()))
    with TestClient(app) as test_client:
        yield test_client
