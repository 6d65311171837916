"""Shared fixtures: a fake HTTP collaborator standing in for requests.Session."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import pytest

from zabbix_rpc.session import ZabbixSession, set_default_session

ENDPOINT = "https://example/api"


class FakeResponse:
    def __init__(self, body: Any, status_code: int = 200):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        if isinstance(self._body, (str, bytes)):
            return json.loads(self._body)
        return self._body


class FakeHttp:
    """
    Records every post() and answers through `handler(payload)`.

    The handler returns the `result` value for a successful call, a
    FakeResponse for full control, or raises to simulate transport errors.
    """

    def __init__(self, handler: Optional[Callable[[Dict[str, Any]], Any]] = None):
        self.handler = handler or (lambda payload: None)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url, json=None, headers=None, timeout=None, verify=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout, "verify": verify})
        answer = self.handler(json)
        if isinstance(answer, FakeResponse):
            return answer
        return FakeResponse({"jsonrpc": "2.0", "result": answer, "id": json["id"]})

    def close(self):
        self.closed = True

    @property
    def methods(self) -> List[str]:
        return [c["json"]["method"] for c in self.calls]


def api_error(payload: Dict[str, Any], code: int = -32602, message: str = "Invalid params.", data: str = "No permissions.") -> FakeResponse:
    return FakeResponse(
        {
            "jsonrpc": "2.0",
            "error": {"code": code, "message": message, "data": data},
            "id": payload["id"],
        }
    )


@pytest.fixture
def http() -> FakeHttp:
    return FakeHttp()


@pytest.fixture
def session(http: FakeHttp) -> ZabbixSession:
    """Session with endpoint and token already set."""
    return ZabbixSession(ENDPOINT, "tok1", http=http)


@pytest.fixture
def anonymous(http: FakeHttp) -> ZabbixSession:
    """Session with an endpoint but no token."""
    return ZabbixSession(ENDPOINT, http=http)


@pytest.fixture(autouse=True)
def _reset_default_session():
    set_default_session(None)
    yield
    set_default_session(None)
