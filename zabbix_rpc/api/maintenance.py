from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Union

from ..helpers import as_id_list, as_list, to_unix
from ..resolvers import ResolveKind, as_id_objects, resolve
from ..session import ZabbixSession
from ..zabbix_client import invoke

Timestamp = Union[datetime, int, float]

MAINTENANCE_WITH_DATA = 0
MAINTENANCE_NO_DATA = 1
TIMEPERIOD_ONE_TIME = 0


def get_maintenances(
    session: ZabbixSession,
    *,
    names: Optional[Union[str, Iterable[str]]] = None,
    maintenance_ids: Optional[Iterable[str]] = None,
    group_names: Optional[Union[str, Iterable[str]]] = None,
    output: Any = "extend",
    **extra: Any,
) -> List[Dict[str, Any]]:
    params: Dict[str, Any] = {
        "output": output,
        "selectHostGroups": ["groupid", "name"],
        "selectHosts": ["hostid", "host"],
        "selectTimeperiods": "extend",
    }
    if names:
        params["filter"] = {"name": as_list(names)}
    if maintenance_ids:
        params["maintenanceids"] = as_id_list(maintenance_ids)
    if group_names:
        params["groupids"] = resolve(session, ResolveKind.GROUP, as_list(group_names))
    params.update(extra)
    return invoke(session, "maintenance.get", params, throw_on_error=True)


def one_time_period(start: Timestamp, end: Timestamp) -> Dict[str, Any]:
    start_ts = to_unix(start)
    return {
        "timeperiod_type": TIMEPERIOD_ONE_TIME,
        "start_date": start_ts,
        "period": to_unix(end) - start_ts,
    }


def create_maintenance(
    session: ZabbixSession,
    name: str,
    active_since: Timestamp,
    active_till: Timestamp,
    *,
    groups: Optional[Union[str, Iterable[str]]] = None,
    host_ids: Optional[Iterable[str]] = None,
    with_data: bool = True,
    periods: Optional[List[Dict[str, Any]]] = None,
    description: str = "",
) -> List[str]:
    """
    Create a maintenance window.

    `groups` take host group names or ids. Without explicit `periods` the
    window gets a single one-time period spanning active_since..active_till.
    Returns the new maintenance ids.
    """
    since = to_unix(active_since)
    till = to_unix(active_till)
    if till <= since:
        raise ValueError("active_till must be after active_since")

    group_tokens = as_list(groups)
    hosts = as_id_list(host_ids)
    if not group_tokens and not hosts:
        raise ValueError("A maintenance needs at least one host group or host")

    params: Dict[str, Any] = {
        "name": name,
        "active_since": since,
        "active_till": till,
        "maintenance_type": MAINTENANCE_WITH_DATA if with_data else MAINTENANCE_NO_DATA,
        "description": description,
        "timeperiods": periods or [one_time_period(since, till)],
    }
    if group_tokens:
        params["groups"] = as_id_objects(ResolveKind.GROUP, resolve(session, ResolveKind.GROUP, group_tokens))
    if hosts:
        params["hosts"] = [{"hostid": h} for h in hosts]

    res = invoke(session, "maintenance.create", params, throw_on_error=True)
    return res["maintenanceids"]


def update_maintenance(session: ZabbixSession, maintenance_id: str, **fields: Any) -> List[str]:
    params: Dict[str, Any] = {"maintenanceid": str(maintenance_id)}
    for key in ("active_since", "active_till"):
        if key in fields:
            fields[key] = to_unix(fields[key])
    params.update(fields)
    res = invoke(session, "maintenance.update", params, throw_on_error=True)
    return res["maintenanceids"]


def delete_maintenances(session: ZabbixSession, maintenance_ids: Union[str, Iterable[str]]) -> List[str]:
    ids = as_id_list(maintenance_ids)
    if not ids:
        raise ValueError("No maintenance ids given")
    res = invoke(session, "maintenance.delete", ids, throw_on_error=True)
    return res["maintenanceids"]
