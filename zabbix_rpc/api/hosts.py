from typing import Any, Dict, Iterable, List, Optional, Union

from ..helpers import as_id_list, as_list, status_flag
from ..resolvers import ResolveKind, as_id_objects, resolve
from ..session import ZabbixSession
from ..zabbix_client import invoke

Names = Union[str, Iterable[str]]

AGENT_INTERFACE = 1


def _agent_interface(ip: Optional[str], dns: Optional[str], port: str) -> Dict[str, Any]:
    return {
        "type": AGENT_INTERFACE,
        "main": 1,
        "useip": 1 if ip else 0,
        "ip": ip or "",
        "dns": dns or "",
        "port": str(port),
    }


def get_hosts(
    session: ZabbixSession,
    *,
    names: Optional[Names] = None,
    host_ids: Optional[Iterable[str]] = None,
    group_names: Optional[Names] = None,
    output: Any = "extend",
    **extra: Any,
) -> List[Dict[str, Any]]:
    """
    host.get filtered by technical name, id and/or host group (name or id).
    Extra keyword arguments go straight into the params.
    """
    params: Dict[str, Any] = {"output": output}
    if names:
        params["filter"] = {"host": as_list(names)}
    if host_ids:
        params["hostids"] = as_id_list(host_ids)
    if group_names:
        params["groupids"] = resolve(session, ResolveKind.GROUP, as_list(group_names))
    params.update(extra)
    return invoke(session, "host.get", params, throw_on_error=True)


def create_host(
    session: ZabbixSession,
    name: str,
    *,
    groups: Names,
    templates: Optional[Names] = None,
    ip: Optional[str] = None,
    dns: Optional[str] = None,
    port: Union[str, int] = "10050",
    visible_name: Optional[str] = None,
    enabled: bool = True,
    **extra: Any,
) -> List[str]:
    """
    Create a host with one Zabbix agent interface.

    `groups` and `templates` take names or ids (mixed is fine).
    Returns the new host ids.
    """
    group_tokens = as_list(groups)
    if not group_tokens:
        raise ValueError("A host needs at least one host group")
    if not ip and not dns:
        raise ValueError("Either ip or dns is required for the agent interface")

    params: Dict[str, Any] = {
        "host": name,
        "status": status_flag(enabled),
        "interfaces": [_agent_interface(ip, dns, str(port))],
        "groups": as_id_objects(ResolveKind.GROUP, resolve(session, ResolveKind.GROUP, group_tokens)),
    }
    if templates:
        template_ids = resolve(session, ResolveKind.TEMPLATE, as_list(templates))
        params["templates"] = as_id_objects(ResolveKind.TEMPLATE, template_ids)
    if visible_name:
        params["name"] = visible_name
    params.update(extra)

    res = invoke(session, "host.create", params, throw_on_error=True)
    return res["hostids"]


def update_host(
    session: ZabbixSession,
    host_id: str,
    *,
    groups: Optional[Names] = None,
    templates: Optional[Names] = None,
    **fields: Any,
) -> List[str]:
    """
    host.update. `groups` / `templates` replace the current ones and accept
    names or ids.
    """
    params: Dict[str, Any] = {"hostid": str(host_id)}
    if groups is not None:
        params["groups"] = as_id_objects(ResolveKind.GROUP, resolve(session, ResolveKind.GROUP, as_list(groups)))
    if templates is not None:
        params["templates"] = as_id_objects(
            ResolveKind.TEMPLATE, resolve(session, ResolveKind.TEMPLATE, as_list(templates))
        )
    params.update(fields)
    return invoke(session, "host.update", params, throw_on_error=True)["hostids"]


def set_host_status(session: ZabbixSession, host_id: str, enabled: bool) -> List[str]:
    return update_host(session, host_id, status=status_flag(enabled))


def delete_hosts(session: ZabbixSession, host_ids: Union[str, Iterable[str]]) -> List[str]:
    ids = as_id_list(host_ids)
    if not ids:
        raise ValueError("No host ids given")
    return invoke(session, "host.delete", ids, throw_on_error=True)["hostids"]
