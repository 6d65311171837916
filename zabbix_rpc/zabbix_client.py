from typing import Any, Dict, Optional

import requests

from .errors import ApiError, AuthenticationError, ConfigurationError, TransportError
from .log import get_logger
from .session import ZabbixSession, get_default_session

logger = get_logger(__name__)

LOGIN_METHOD = "user.login"
LOGOUT_METHOD = "user.logout"
VERSION_PREFIX = "apiinfo."


def requires_auth(method: str) -> bool:
    return method not in (LOGIN_METHOD, LOGOUT_METHOD) and not method.startswith(VERSION_PREFIX)


def _sends_auth(method: str, session: ZabbixSession) -> bool:
    if method == LOGOUT_METHOD:
        return session.is_authenticated
    return requires_auth(method)


def build_request(
    session: ZabbixSession,
    method: str,
    params: Any = None,
    force_id: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Validate the session for `method` and assemble the JSON-RPC envelope.

    Raises ConfigurationError / AuthenticationError without touching the
    network, and without consuming a request id.
    """
    if not session.endpoint:
        raise ConfigurationError("Zabbix endpoint URL is not set; call connect() first")
    if requires_auth(method) and not session.is_authenticated:
        raise AuthenticationError(f"{method} requires an auth token; call connect() first")

    payload: Dict[str, Any] = {
        "jsonrpc": "2.0",
        "method": method,
        "params": {} if params is None else params,
        "id": force_id if force_id is not None else session.next_request_id(),
    }
    if _sends_auth(method, session):
        payload["auth"] = session.token
    return payload


def _post(session: ZabbixSession, payload: Dict[str, Any]) -> Dict[str, Any]:
    try:
        r = session.http.post(
            session.endpoint,
            json=payload,
            headers={"Content-Type": "application/json-rpc"},
            timeout=session.timeout,
            verify=session.verify_ssl,
        )
    except requests.RequestException as e:
        logger.warning("Zabbix request %s (id=%s) failed: %s", payload["method"], payload["id"], e)
        raise TransportError(str(e)) from e

    try:
        data = r.json()
    except ValueError as e:
        if not r.ok:
            msg = f"HTTP {r.status_code} from {session.endpoint}"
        else:
            msg = f"Invalid JSON in response from {session.endpoint}"
        logger.warning("Zabbix request %s (id=%s) failed: %s", payload["method"], payload["id"], msg)
        raise TransportError(msg, status_code=r.status_code) from e

    if not isinstance(data, dict) or ("result" not in data and "error" not in data):
        if not r.ok:
            msg = f"HTTP {r.status_code} from {session.endpoint}"
        else:
            msg = f"No JSON-RPC result or error in response from {session.endpoint}"
        logger.warning("Zabbix request %s (id=%s) failed: %s", payload["method"], payload["id"], msg)
        raise TransportError(msg, status_code=r.status_code)
    return data


def invoke(
    session: ZabbixSession,
    method: str,
    params: Any = None,
    *,
    force_id: Optional[int] = None,
    raw: bool = False,
    throw_on_error: bool = False,
) -> Any:
    """
    Send one JSON-RPC request and interpret the response.

    - raw=False: return the `result` payload
    - raw=True: return the whole envelope (jsonrpc, id, result/error)
    - an `error` object is returned inside the envelope for the caller
      to inspect; throw_on_error=True raises ApiError instead
    """
    payload = build_request(session, method, params, force_id)
    logger.debug("Calling %s (id=%s)", method, payload["id"])

    data = _post(session, payload)

    if "error" in data:
        err = ApiError.from_response(data["error"])
        logger.debug("%s (id=%s) returned error: %s", method, payload["id"], err)
        if throw_on_error:
            raise err
        return data

    if raw:
        return data
    return data.get("result")


def call(
    method: str,
    params: Optional[Dict[str, Any]] = None,
    *,
    session: Optional[ZabbixSession] = None,
    **kwargs: Any,
) -> Any:
    """
    Shorthand for invoke() on the default session (see ZABBIX_* env vars).
    """
    return invoke(session or get_default_session(), method, params, **kwargs)
