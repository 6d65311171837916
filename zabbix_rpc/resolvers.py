"""
Name -> id resolution for host groups and templates.

Tokens made only of digits are taken to be ids already and pass through
without an API call. A group or template literally named "42" therefore
cannot be resolved by name; use its id.

When a name filter matches more than one object the first one returned is
used.
"""
import re
from enum import Enum
from typing import Any, Dict, Iterable, List, Union

from .errors import NotFoundError
from .log import get_logger
from .session import ZabbixSession
from .zabbix_client import invoke

logger = get_logger(__name__)

_NUMERIC_ID = re.compile(r"[0-9]+")


class ResolveKind(Enum):
    GROUP = "host group"
    TEMPLATE = "template"

    @property
    def method(self) -> str:
        return _LOOKUP[self][0]

    @property
    def name_field(self) -> str:
        return _LOOKUP[self][1]

    @property
    def id_field(self) -> str:
        return _LOOKUP[self][2]


# kind -> (get method, name field used in the filter, id field)
_LOOKUP = {
    ResolveKind.GROUP: ("hostgroup.get", "name", "groupid"),
    ResolveKind.TEMPLATE: ("template.get", "host", "templateid"),
}


def is_numeric_id(token: Any) -> bool:
    return _NUMERIC_ID.fullmatch(str(token)) is not None


def _lookup(session: ZabbixSession, kind: ResolveKind, name: str) -> str:
    res = invoke(
        session,
        kind.method,
        {
            "output": [kind.id_field, kind.name_field],
            "filter": {kind.name_field: [name]},
        },
        throw_on_error=True,
    )
    if not res:
        raise NotFoundError(kind, name)
    if len(res) > 1:
        logger.debug("%d %ss named %r, using the first", len(res), kind.value, name)
    return str(res[0][kind.id_field])


def resolve(
    session: ZabbixSession,
    kind: ResolveKind,
    tokens: Union[str, int, Iterable[Union[str, int]]],
) -> List[str]:
    """
    Turn a mix of names and ids into ids, keeping order and duplicates.

    Fails with NotFoundError on the first name without a match; nothing is
    returned for the rest of the batch.
    """
    if isinstance(tokens, (str, int)):
        tokens = [tokens]

    ids: List[str] = []
    for token in tokens:
        token = str(token)
        if is_numeric_id(token):
            ids.append(token)
        else:
            ids.append(_lookup(session, kind, token))
    return ids


def resolve_group_ids(session: ZabbixSession, names: Union[str, Iterable[str]]) -> List[str]:
    return resolve(session, ResolveKind.GROUP, names)


def resolve_template_ids(session: ZabbixSession, names: Union[str, Iterable[str]]) -> List[str]:
    return resolve(session, ResolveKind.TEMPLATE, names)


def as_id_objects(kind: ResolveKind, ids: Iterable[str]) -> List[Dict[str, str]]:
    """
    [{"groupid": "7"}, ...] as host.create / maintenance.create expect.
    """
    return [{kind.id_field: i} for i in ids]
