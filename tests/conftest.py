import json

import pytest

from typed_api_client.config import ClientOptions
from typed_api_client.transport import TransportRequest, TransportResponse

BASE_URL = "https://api.example.com"

TODO = {"userId": 1, "id": 1, "title": "a", "completed": False}


class StubTransport:
    """Returns a canned response and records every request it receives."""

    def __init__(self, payload=None, status_code: int = 200, content: bytes | None = None):
        self.requests: list[TransportRequest] = []
        if content is None:
            content = json.dumps(payload).encode("utf-8")
        self.response = TransportResponse(status_code=status_code, content=content)

    async def send(self, request: TransportRequest) -> TransportResponse:
        self.requests.append(request)
        return self.response


@pytest.fixture
def options():
    return ClientOptions(base_url=BASE_URL, headers={"Accept": "application/json", "Authorization": "Bearer t"})


@pytest.fixture
def stub():
    def make(payload=None, status_code: int = 200, content: bytes | None = None):
        return StubTransport(payload, status_code=status_code, content=content)
    return make
