from ..session import ZabbixSession
from ..zabbix_client import invoke


def get_api_version(session: ZabbixSession) -> str:
    """
    Server API version, e.g. "7.0.3". Needs an endpoint but no token.
    """
    return invoke(session, "apiinfo.version", throw_on_error=True)
