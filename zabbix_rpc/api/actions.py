from typing import Any, Dict, Iterable, List, Optional, Union

from ..helpers import as_id_list, as_list, status_flag
from ..session import ZabbixSession
from ..zabbix_client import invoke

# action eventsource values
EVENT_SOURCE_TRIGGER = 0
EVENT_SOURCE_DISCOVERY = 1
EVENT_SOURCE_AUTOREGISTRATION = 2
EVENT_SOURCE_INTERNAL = 3
EVENT_SOURCE_SERVICE = 4


def get_actions(
    session: ZabbixSession,
    *,
    names: Optional[Union[str, Iterable[str]]] = None,
    action_ids: Optional[Iterable[str]] = None,
    output: Any = "extend",
    **extra: Any,
) -> List[Dict[str, Any]]:
    params: Dict[str, Any] = {"output": output}
    if names:
        params["filter"] = {"name": as_list(names)}
    if action_ids:
        params["actionids"] = as_id_list(action_ids)
    params.update(extra)
    return invoke(session, "action.get", params, throw_on_error=True)


def create_action(
    session: ZabbixSession,
    name: str,
    event_source: int,
    operations: List[Dict[str, Any]],
    *,
    filter: Optional[Dict[str, Any]] = None,
    esc_period: str = "1h",
    **extra: Any,
) -> List[str]:
    if not operations:
        raise ValueError("An action needs at least one operation")

    params: Dict[str, Any] = {
        "name": name,
        "eventsource": int(event_source),
        "operations": operations,
    }
    # esc_period is only valid for trigger, internal and service actions
    if event_source in (EVENT_SOURCE_TRIGGER, EVENT_SOURCE_INTERNAL, EVENT_SOURCE_SERVICE):
        params["esc_period"] = esc_period
    if filter:
        params["filter"] = filter
    params.update(extra)
    return invoke(session, "action.create", params, throw_on_error=True)["actionids"]


def set_action_status(session: ZabbixSession, action_id: str, enabled: bool) -> List[str]:
    res = invoke(
        session,
        "action.update",
        {"actionid": str(action_id), "status": status_flag(enabled)},
        throw_on_error=True,
    )
    return res["actionids"]


def delete_actions(session: ZabbixSession, action_ids: Union[str, Iterable[str]]) -> List[str]:
    ids = as_id_list(action_ids)
    if not ids:
        raise ValueError("No action ids given")
    return invoke(session, "action.delete", ids, throw_on_error=True)["actionids"]
