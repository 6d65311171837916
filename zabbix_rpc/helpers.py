from datetime import datetime
from typing import Any, Iterable, List, Union


def as_list(value: Any) -> List[Any]:
    """
    Accept a single value or any iterable of values; strings count as one.
    """
    if value is None:
        return []
    if isinstance(value, (str, int, dict)):
        return [value]
    return list(value)


def as_id_list(value: Union[str, int, Iterable[Union[str, int]], None]) -> List[str]:
    return [str(v) for v in as_list(value)]


def to_unix(value: Union[datetime, int, float]) -> int:
    if isinstance(value, datetime):
        return int(value.timestamp())
    return int(value)


def status_flag(enabled: bool) -> int:
    # Zabbix status fields: 0 = enabled/monitored, 1 = disabled
    return 0 if enabled else 1
