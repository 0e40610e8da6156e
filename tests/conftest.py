"""
Shared fixtures for the Face API client tests.

The Face service is replaced by an httpx.MockTransport that records every
request and answers through a swappable handler.
"""

import json

import httpx
import pytest

from mscs_face import FaceServiceClient

API_KEY = "test-subscription-key"
REGION = "WE"
BASE_URL = "https://westeurope.api.cognitive.microsoft.com/face/v1.0"


class FakeFaceService:
    """Records requests and answers them with `handler` (sync or async)."""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: httpx.Response(200)

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    def respond_json(self, payload, status_code: int = 200):
        self.handler = lambda request: httpx.Response(status_code, json=payload)

    def respond_error(self, code: str, message: str, status_code: int = 400):
        self.respond_json({"error": {"code": code, "message": message}}, status_code)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def request_json(request: httpx.Request):
    """Decoded JSON body of a recorded request."""
    return json.loads(request.content)


@pytest.fixture
def service():
    return FakeFaceService()


@pytest.fixture
def http_client(service):
    return httpx.AsyncClient(transport=httpx.MockTransport(service))


@pytest.fixture
def client(http_client):
    return FaceServiceClient(API_KEY, REGION, http_client=http_client)
