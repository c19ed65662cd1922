import io
import json

import pytest
import requests
from requests.adapters import HTTPAdapter

from fbgraph import client


class TrackedResponse(requests.Response):
    """requests.Response that counts how many times it was closed."""

    def __init__(self):
        super().__init__()
        self.close_calls = 0

    def close(self):
        self.close_calls += 1
        super().close()


def make_response(body, status_code: int = 200, url: str = "https://graph.facebook.com/v2.11/me") -> TrackedResponse:
    if not isinstance(body, (bytes, str)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")

    response = TrackedResponse()
    response.status_code = status_code
    response.raw = io.BytesIO(body)
    response.encoding = "utf-8"
    response.url = url
    return response


class StubAdapter(HTTPAdapter):
    """Records the requests sent through it and answers with canned responses."""

    def __init__(self, body=None, status_code: int = 200, exc: Exception | None = None):
        super().__init__()
        self.body = {} if body is None else body
        self.status_code = status_code
        self.exc = exc
        self.sent = []

    def send(self, request, **kwargs):
        self.sent.append({"request": request, "body": request.body, "timeout": kwargs.get("timeout")})

        if self.exc is not None:
            raise self.exc

        response = make_response(self.body, self.status_code, request.url)
        response.request = request
        return response


@pytest.fixture()
def stub_session(monkeypatch):
    """Replaces the client's session with one answering from a StubAdapter."""

    def install(body=None, status_code: int = 200, exc: Exception | None = None) -> StubAdapter:
        adapter = StubAdapter(body, status_code, exc)
        session = requests.Session()
        session.mount("https://", adapter)
        monkeypatch.setattr(client, "SESSION", session)
        return adapter

    return install
