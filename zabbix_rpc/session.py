import itertools
import threading
from typing import Any, Callable, Optional, Tuple, Union

import requests

from . import config
from .log import get_logger

logger = get_logger(__name__)

Timeout = Union[float, Tuple[float, float]]


class Credential:
    """
    Username plus secret for user.login.

    `password` may be a plain string or a zero-argument callable returning
    the decrypted secret (e.g. a keyring lookup), so the secret does not
    have to sit in memory until login.
    """

    __slots__ = ("username", "_password")

    def __init__(self, username: str, password: Union[str, Callable[[], str]]):
        self.username = username
        self._password = password

    @property
    def password(self) -> str:
        if callable(self._password):
            return self._password()
        return self._password

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, password='***')"


# Request ids are unique for the whole process, shared by every session
_request_ids = itertools.count(1)
_request_ids_lock = threading.Lock()


def next_request_id() -> int:
    with _request_ids_lock:
        return next(_request_ids)


def normalize_endpoint(endpoint: str) -> str:
    return endpoint.strip().rstrip("/")


class ZabbixSession:
    """
    Endpoint and auth token for one Zabbix API user.

    Sessions are independent: every call takes the session explicitly, so
    several servers (or users) can be driven from one process. Request ids
    come from one process-wide counter and never repeat across sessions.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        token: Optional[str] = None,
        *,
        verify_ssl: bool = True,
        timeout: Timeout = (config.DEFAULT_CONNECT_TIMEOUT, config.DEFAULT_READ_TIMEOUT),
        http: Any = None,
    ):
        self.endpoint = normalize_endpoint(endpoint) if endpoint else None
        self.token = token or None
        self.verify_ssl = verify_ssl
        self.timeout = timeout

        if http is None:
            http = requests.Session()
            http.headers.update({"Content-Type": "application/json-rpc"})
        self.http = http

        if not verify_ssl:
            config.silence_insecure_warnings()

    @classmethod
    def from_env(cls, http: Any = None) -> "ZabbixSession":
        return cls(
            config.zabbix_url() or None,
            config.zabbix_api_token() or None,
            verify_ssl=config.verify_ssl(),
            timeout=config.timeout(),
            http=http,
        )

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def next_request_id(self) -> int:
        return next_request_id()

    def close(self) -> None:
        close = getattr(self.http, "close", None)
        if close is not None:
            close()

    def __repr__(self) -> str:
        state = "authenticated" if self.is_authenticated else "anonymous"
        return f"<ZabbixSession {self.endpoint or '(no endpoint)'} {state}>"


# Process-wide convenience session for scripts
_default_session: Optional[ZabbixSession] = None
_default_lock = threading.Lock()


def get_default_session() -> ZabbixSession:
    global _default_session
    with _default_lock:
        if _default_session is None:
            _default_session = ZabbixSession.from_env()
            logger.debug("Built default session for %s", _default_session.endpoint)
        return _default_session


def set_default_session(session: Optional[ZabbixSession]) -> None:
    global _default_session
    with _default_lock:
        _default_session = session
