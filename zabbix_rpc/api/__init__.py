# zabbix_rpc/api/__init__.py

from . import (
    actions,
    apiinfo,
    discovery,
    hosts,
    maintenance,
    users,
)

__all__ = [
    "actions",
    "apiinfo",
    "discovery",
    "hosts",
    "maintenance",
    "users",
]
