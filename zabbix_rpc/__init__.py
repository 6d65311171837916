"""
zabbix_rpc - thin client for the Zabbix JSON-RPC API.

    from zabbix_rpc import ZabbixSession, connect, invoke, resolve_group_ids

    session = ZabbixSession()
    connect(session, "https://zabbix.example.se/api_jsonrpc.php", token="...")
    hosts = invoke(session, "host.get", {"output": ["host"]})
    group_ids = resolve_group_ids(session, ["Linux servers", "42"])
"""
__all__ = [
    # Session
    "ZabbixSession",
    "Credential",
    "get_default_session",
    "set_default_session",
    "connect",
    "connect_from_env",
    "disconnect",
    # RPC
    "invoke",
    "call",
    # Resolution
    "ResolveKind",
    "resolve",
    "resolve_group_ids",
    "resolve_template_ids",
    # Errors
    "ZabbixError",
    "ConfigurationError",
    "AuthenticationError",
    "TransportError",
    "ApiError",
    "NotFoundError",
    # Logging
    "setup_logging",
]

from .connection import connect, connect_from_env, disconnect
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    NotFoundError,
    TransportError,
    ZabbixError,
)
from .log import setup_logging
from .resolvers import ResolveKind, resolve, resolve_group_ids, resolve_template_ids
from .session import Credential, ZabbixSession, get_default_session, set_default_session
from .zabbix_client import call, invoke
