from typing import Any, Dict, Iterable, List, Optional, Union

from ..helpers import as_id_list, as_list, status_flag
from ..session import ZabbixSession
from ..zabbix_client import invoke

# dcheck types used most often
CHECK_ICMP_PING = 12
CHECK_ZABBIX_AGENT = 9
CHECK_SNMPV2 = 11
CHECK_TCP = 15


def get_discovery_rules(
    session: ZabbixSession,
    *,
    names: Optional[Union[str, Iterable[str]]] = None,
    rule_ids: Optional[Iterable[str]] = None,
    output: Any = "extend",
    **extra: Any,
) -> List[Dict[str, Any]]:
    params: Dict[str, Any] = {"output": output, "selectDChecks": "extend"}
    if names:
        params["filter"] = {"name": as_list(names)}
    if rule_ids:
        params["druleids"] = as_id_list(rule_ids)
    params.update(extra)
    return invoke(session, "drule.get", params, throw_on_error=True)


def create_discovery_rule(
    session: ZabbixSession,
    name: str,
    ip_range: str,
    checks: List[Dict[str, Any]],
    *,
    delay: str = "1h",
    proxy_id: Optional[str] = None,
    enabled: bool = True,
    **extra: Any,
) -> List[str]:
    """
    Network discovery rule over `ip_range` (e.g. "192.168.1.1-254").
    Returns the new rule ids.
    """
    if not checks:
        raise ValueError("A discovery rule needs at least one check")

    params: Dict[str, Any] = {
        "name": name,
        "iprange": ip_range,
        "dchecks": checks,
        "delay": delay,
        "status": status_flag(enabled),
    }
    if proxy_id:
        params["proxyid"] = str(proxy_id)
    params.update(extra)
    return invoke(session, "drule.create", params, throw_on_error=True)["druleids"]


def set_discovery_rule_status(session: ZabbixSession, rule_id: str, enabled: bool) -> List[str]:
    res = invoke(
        session,
        "drule.update",
        {"druleid": str(rule_id), "status": status_flag(enabled)},
        throw_on_error=True,
    )
    return res["druleids"]


def delete_discovery_rules(session: ZabbixSession, rule_ids: Union[str, Iterable[str]]) -> List[str]:
    ids = as_id_list(rule_ids)
    if not ids:
        raise ValueError("No discovery rule ids given")
    return invoke(session, "drule.delete", ids, throw_on_error=True)["druleids"]
