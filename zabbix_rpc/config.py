# config.py
import os
import warnings
from typing import Tuple

import urllib3

# -----------------------------------------------------------------------------
# Configuration with defaults + environment variable overrides
#
# Nothing here is required at import time. Missing URL / credentials only
# fail when a session tries to connect or call the API.
# -----------------------------------------------------------------------------

# Env var names:
#   ZABBIX_URL
#   ZABBIX_API_TOKEN
#   ZABBIX_USER
#   ZABBIX_PASSWORD
#   ZABBIX_VERIFY_SSL
#   ZABBIX_CONNECT_TIMEOUT
#   ZABBIX_READ_TIMEOUT
#   ZABBIX_LOG_LEVEL

DEFAULT_CONNECT_TIMEOUT = 10
DEFAULT_READ_TIMEOUT = 60
DEFAULT_LOG_LEVEL = "WARNING"


def _env(name: str, default: str) -> str:
    """
    Return environment variable value if set and non-empty, otherwise default.
    """
    v = os.getenv(name)
    return v.strip() if v is not None and v.strip() else default


def _env_int(name: str, default: int) -> int:
    try:
        return int(_env(name, str(default)))
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    return _env(name, "true" if default else "false").lower() in ("1", "true", "yes", "on")


def zabbix_url() -> str:
    return _env("ZABBIX_URL", "")


def zabbix_api_token() -> str:
    return _env("ZABBIX_API_TOKEN", "")


def zabbix_user() -> str:
    return _env("ZABBIX_USER", "")


def zabbix_password() -> str:
    return _env("ZABBIX_PASSWORD", "")


def verify_ssl() -> bool:
    return _env_bool("ZABBIX_VERIFY_SSL", True)


def timeout() -> Tuple[int, int]:
    """
    (connect, read) timeout pair handed to requests.
    """
    return (
        _env_int("ZABBIX_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
        _env_int("ZABBIX_READ_TIMEOUT", DEFAULT_READ_TIMEOUT),
    )


def log_level() -> str:
    return _env("ZABBIX_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def silence_insecure_warnings() -> None:
    """
    Ignore certificate warnings for sessions running with verify_ssl=False.
    """
    urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    # SubjectAltNameWarning exists only in older urllib3
    SubjectAltNameWarning = getattr(urllib3.exceptions, "SubjectAltNameWarning", None)
    if SubjectAltNameWarning is not None:
        warnings.simplefilter("ignore", SubjectAltNameWarning)
