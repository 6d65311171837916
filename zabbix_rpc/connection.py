from typing import Any, Optional

from . import config
from .errors import AuthenticationError, ConfigurationError
from .log import get_logger
from .session import ZabbixSession, get_default_session, normalize_endpoint
from .zabbix_client import LOGIN_METHOD, LOGOUT_METHOD, invoke

logger = get_logger(__name__)


def connect(
    session: ZabbixSession,
    endpoint: Optional[str] = None,
    *,
    username: Optional[str] = None,
    password: Optional[str] = None,
    credential: Any = None,
    token: Optional[str] = None,
) -> str:
    """
    Point `session` at `endpoint` and authenticate it.

    - token given: stored as-is, no network call (API tokens, or a token
      obtained elsewhere)
    - otherwise username/password, taken from the explicit arguments or
      from `credential` (anything with .username / .password), are sent
      to user.login and the returned token is stored

    The endpoint may be omitted when the session already has one, so a
    disconnected session can be re-authenticated with only a new token.
    Returns the stored token.
    """
    if endpoint:
        session.endpoint = normalize_endpoint(endpoint)
    if not session.endpoint:
        raise ConfigurationError("No Zabbix endpoint URL given")

    if token:
        session.token = token
        logger.info("Connected to %s with a supplied token", session.endpoint)
        return token

    if (not username or not password) and credential is not None:
        username = username or getattr(credential, "username", None)
        password = password or getattr(credential, "password", None)
    if not username or not password:
        raise ConfigurationError("Either a token or a username and password is required")

    # user.login never carries auth; the old token stays until the new one arrives
    result = invoke(
        session,
        LOGIN_METHOD,
        {"username": username, "password": password},
        throw_on_error=True,
    )
    if not result or not isinstance(result, str):
        raise AuthenticationError(f"{LOGIN_METHOD} returned no token")

    session.token = result
    logger.info("Logged in to %s as %s", session.endpoint, username)
    return result


def connect_from_env(session: Optional[ZabbixSession] = None) -> str:
    """
    connect() using ZABBIX_URL plus ZABBIX_API_TOKEN or
    ZABBIX_USER / ZABBIX_PASSWORD.
    """
    session = session or get_default_session()
    return connect(
        session,
        config.zabbix_url() or None,
        username=config.zabbix_user() or None,
        password=config.zabbix_password() or None,
        token=config.zabbix_api_token() or None,
    )


def disconnect(session: ZabbixSession, *, logout: bool = False) -> None:
    """
    Forget the session token; the endpoint is kept. Idempotent.

    With logout=True a token obtained from user.login is also invalidated
    server-side first. API tokens must not be logged out.
    """
    try:
        if logout and session.is_authenticated:
            invoke(session, LOGOUT_METHOD, [], throw_on_error=True)
            logger.info("Logged out of %s", session.endpoint)
    finally:
        session.token = None
