from typing import Any, Optional


class ZabbixError(Exception):
    """Base class for every error raised by zabbix_rpc."""


class ConfigurationError(ZabbixError):
    """Endpoint or credentials missing; raised before any network activity."""


class AuthenticationError(ZabbixError):
    """A protected method was called on a session without an auth token."""


class TransportError(ZabbixError):
    """
    The HTTP layer failed (connection refused, timeout, SSL, non-JSON error
    page). The underlying requests exception, if any, is kept as __cause__.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiError(ZabbixError):
    """Well-formed `error` object returned by the Zabbix API."""

    def __init__(self, code: Any, message: str, data: Optional[str] = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"Zabbix API error {code}: {message} - {data}")

    @classmethod
    def from_response(cls, error: Any) -> "ApiError":
        if not isinstance(error, dict):
            return cls(None, str(error))
        return cls(error.get("code"), str(error.get("message", "")), error.get("data"))


class NotFoundError(ZabbixError):
    """A name could not be resolved to an identifier."""

    def __init__(self, kind: Any, token: str):
        self.kind = kind
        self.token = token
        label = getattr(kind, "value", kind)
        super().__init__(f"No {label} named {token!r} found")
