"""Shared fixtures: a requests.Session that answers from canned payloads."""

import json

import pytest
import requests

from huebridge.bridge import Bridge

BASE = "http://bridge/api/user"


class FakeResponse(requests.Response):
    def __init__(self, url: str, payload=None, status: int = 200, text=None):
        super().__init__()
        self.status_code = status
        self.reason = "OK" if status < 400 else "Error"
        self.url = url
        self.encoding = "utf-8"
        body = text if text is not None else json.dumps(payload)
        self._content = body.encode("utf-8")
        self.closed = False

    def close(self):
        self.closed = True


class FakeSession(requests.Session):
    """Records every request and answers from ``routes[(METHOD, path)]``."""

    def __init__(self):
        super().__init__()
        self.routes = {}
        self.calls = []
        self.responses = []
        self.closed = False

    def add(self, method: str, path: str, payload=None, status: int = 200, text=None):
        self.routes[(method, BASE + path)] = (payload, status, text)

    def request(self, method, url, **kwargs):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "json": kwargs.get("json"),
                "has_body": kwargs.get("json") is not None or kwargs.get("data") is not None,
                "timeout": kwargs.get("timeout"),
            }
        )
        if (method, url) not in self.routes:
            raise requests.ConnectionError(f"no route for {method} {url}")
        payload, status, text = self.routes[(method, url)]
        response = FakeResponse(url, payload, status, text)
        self.responses.append(response)
        return response

    def close(self):
        self.closed = True
        super().close()


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def bridge(session):
    return Bridge("bridge", "user", session=session)
