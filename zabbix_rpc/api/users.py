from typing import Any, Dict, Iterable, List, Optional, Union

from ..helpers import as_id_list, as_list
from ..session import ZabbixSession
from ..zabbix_client import invoke


def get_users(
    session: ZabbixSession,
    *,
    usernames: Optional[Union[str, Iterable[str]]] = None,
    user_ids: Optional[Iterable[str]] = None,
    output: Any = "extend",
    **extra: Any,
) -> List[Dict[str, Any]]:
    params: Dict[str, Any] = {"output": output}
    if usernames:
        params["filter"] = {"username": as_list(usernames)}
    if user_ids:
        params["userids"] = as_id_list(user_ids)
    params.update(extra)
    return invoke(session, "user.get", params, throw_on_error=True)


def create_user(
    session: ZabbixSession,
    username: str,
    password: str,
    *,
    role_id: Union[str, int],
    user_group_ids: Union[str, Iterable[str]],
    name: Optional[str] = None,
    surname: Optional[str] = None,
    **extra: Any,
) -> List[str]:
    """
    Create a user in the given user groups with the given role.
    Returns the new user ids.
    """
    groups = as_id_list(user_group_ids)
    if not groups:
        raise ValueError("A user needs at least one user group")

    params: Dict[str, Any] = {
        "username": username,
        "passwd": password,
        "roleid": str(role_id),
        "usrgrps": [{"usrgrpid": g} for g in groups],
    }
    if name is not None:
        params["name"] = name
    if surname is not None:
        params["surname"] = surname
    params.update(extra)
    return invoke(session, "user.create", params, throw_on_error=True)["userids"]


def update_user(session: ZabbixSession, user_id: str, **fields: Any) -> List[str]:
    params: Dict[str, Any] = {"userid": str(user_id)}
    params.update(fields)
    return invoke(session, "user.update", params, throw_on_error=True)["userids"]


def delete_users(session: ZabbixSession, user_ids: Union[str, Iterable[str]]) -> List[str]:
    ids = as_id_list(user_ids)
    if not ids:
        raise ValueError("No user ids given")
    return invoke(session, "user.delete", ids, throw_on_error=True)["userids"]
