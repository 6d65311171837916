"""Tests for session state: connect / disconnect and the default session."""

import pytest

from zabbix_rpc.connection import connect, connect_from_env, disconnect
from zabbix_rpc.errors import ApiError, AuthenticationError, ConfigurationError
from zabbix_rpc.session import Credential, ZabbixSession, get_default_session
from zabbix_rpc.zabbix_client import invoke

from conftest import ENDPOINT, FakeHttp, api_error


def _login_handler(token="sess-token"):
    def handler(payload):
        if payload["method"] == "user.login":
            return token
        return []

    return handler


def test_connect_with_token_makes_no_call(http):
    s = ZabbixSession(http=http)

    assert connect(s, ENDPOINT, token="tok1") == "tok1"

    assert s.token == "tok1"
    assert s.endpoint == ENDPOINT
    assert http.calls == []


def test_connect_strips_trailing_slash(http):
    s = ZabbixSession(http=http)
    connect(s, "https://example/api/", token="t")
    assert s.endpoint == "https://example/api"


def test_disconnect_keeps_endpoint_and_reconnect(http):
    s = ZabbixSession(http=http)
    connect(s, ENDPOINT, token="tok1")

    disconnect(s)
    assert s.token is None
    assert s.endpoint == ENDPOINT

    connect(s, token="tok2")
    assert s.token == "tok2"
    assert s.endpoint == ENDPOINT
    assert http.calls == []


def test_disconnect_is_idempotent(anonymous):
    disconnect(anonymous)
    disconnect(anonymous)
    assert anonymous.token is None


def test_calls_fail_after_disconnect(session, http):
    disconnect(session)
    with pytest.raises(AuthenticationError):
        invoke(session, "host.get")
    assert http.calls == []


def test_disconnect_with_logout(session, http):
    disconnect(session, logout=True)

    assert http.methods == ["user.logout"]
    assert http.calls[0]["json"]["auth"] == "tok1"
    assert session.token is None


def test_disconnect_with_logout_clears_token_on_error(session, http):
    http.handler = api_error
    with pytest.raises(ApiError):
        disconnect(session, logout=True)
    assert session.token is None


def test_connect_with_username_password(http):
    http.handler = _login_handler()
    s = ZabbixSession(http=http)

    assert connect(s, ENDPOINT, username="Admin", password="zabbix") == "sess-token"

    assert s.token == "sess-token"
    body = http.calls[0]["json"]
    assert body["method"] == "user.login"
    assert body["params"] == {"username": "Admin", "password": "zabbix"}
    assert "auth" not in body


def test_connect_with_credential_object(http):
    http.handler = _login_handler("t2")
    s = ZabbixSession(http=http)

    connect(s, ENDPOINT, credential=Credential("Admin", lambda: "s3cret"))

    assert s.token == "t2"
    assert http.calls[0]["json"]["params"] == {"username": "Admin", "password": "s3cret"}


def test_credential_repr_hides_password():
    assert "s3cret" not in repr(Credential("Admin", "s3cret"))


def test_connect_without_credentials(http):
    s = ZabbixSession(http=http)
    with pytest.raises(ConfigurationError):
        connect(s, ENDPOINT)
    with pytest.raises(ConfigurationError):
        connect(s, ENDPOINT, username="Admin")
    assert http.calls == []


def test_connect_without_endpoint(http):
    with pytest.raises(ConfigurationError):
        connect(ZabbixSession(http=http), token="tok1")


def test_failed_relogin_keeps_current_token(session, http):
    http.handler = api_error
    with pytest.raises(ApiError):
        connect(session, username="Admin", password="wrong")
    assert session.token == "tok1"
    assert "auth" not in http.calls[0]["json"]


def test_relogin_replaces_token(session, http):
    http.handler = _login_handler("fresh")
    connect(session, username="Admin", password="zabbix")
    assert session.token == "fresh"
    assert "auth" not in http.calls[0]["json"]


def test_from_env(monkeypatch):
    monkeypatch.setenv("ZABBIX_URL", "https://zbx.example/api_jsonrpc.php/")
    monkeypatch.setenv("ZABBIX_API_TOKEN", "envtok")
    monkeypatch.setenv("ZABBIX_VERIFY_SSL", "false")
    monkeypatch.setenv("ZABBIX_READ_TIMEOUT", "5")

    s = ZabbixSession.from_env(http=FakeHttp())

    assert s.endpoint == "https://zbx.example/api_jsonrpc.php"
    assert s.token == "envtok"
    assert s.verify_ssl is False
    assert s.timeout == (10, 5)


def test_connect_from_env_with_user(monkeypatch):
    monkeypatch.setenv("ZABBIX_URL", ENDPOINT)
    monkeypatch.delenv("ZABBIX_API_TOKEN", raising=False)
    monkeypatch.setenv("ZABBIX_USER", "Admin")
    monkeypatch.setenv("ZABBIX_PASSWORD", "zabbix")
    http = FakeHttp(_login_handler("envsess"))
    s = ZabbixSession(http=http)

    assert connect_from_env(s) == "envsess"
    assert http.methods == ["user.login"]


def test_default_session_is_shared(monkeypatch):
    monkeypatch.setenv("ZABBIX_URL", ENDPOINT)
    assert get_default_session() is get_default_session()
    assert get_default_session().endpoint == ENDPOINT


def test_sessions_are_independent():
    a = ZabbixSession(ENDPOINT, "a", http=FakeHttp())
    b = ZabbixSession(ENDPOINT, "b", http=FakeHttp())
    invoke(a, "host.get")
    invoke(b, "host.get")
    invoke(a, "host.get")
    assert [c["json"]["auth"] for c in a.http.calls] == ["a", "a"]
    assert [c["json"]["auth"] for c in b.http.calls] == ["b"]
    a_first, a_second = [c["json"]["id"] for c in a.http.calls]
    assert a_first < b.http.calls[0]["json"]["id"] < a_second


def test_close_closes_http(session, http):
    session.close()
    assert http.closed


def test_login_without_token_in_result(http):
    http.handler = lambda p: None
    s = ZabbixSession(ENDPOINT, http=http)
    with pytest.raises(AuthenticationError):
        connect(s, username="Admin", password="zabbix")
    assert s.token is None
