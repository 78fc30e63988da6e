"""Query string serialization for Tracker requests.

aiohttp only accepts str/int/float query values, while callers naturally
pass booleans, lists of ids, datetimes and enums. Everything is normalized
to strings here, following Tracker's conventions.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from enum import Enum
from typing import Any


def serialize_value(value: Any) -> str:
    """Convert one query value to its Tracker string form.

    - bool -> "true" / "false"
    - list/tuple/set -> comma-separated values
    - datetime -> ISO 8601
    - Enum -> its value
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return serialize_value(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(serialize_value(v) for v in value)
    return str(value)


def serialize_query(options: Mapping[str, Any] | None) -> dict[str, str]:
    """Serialize a query mapping, dropping keys whose value is None."""
    if not options:
        return {}
    return {key: serialize_value(value) for key, value in options.items() if value is not None}


def form_array(key: str, values: Iterable[Any]) -> list[tuple[str, str]]:
    """Build repeated ``key[]`` form pairs (e.g. ``story_ids[]=1&story_ids[]=2``)."""
    name = key if key.endswith("[]") else f"{key}[]"
    return [(name, serialize_value(v)) for v in values]
