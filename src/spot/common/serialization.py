from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Any


def jsonable(obj: Any) -> Any:
    """Turn models and view states into plain JSON-ready values.

    Dataclasses may list computed properties to include in `_extra_json`.
    """

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, time):
        return obj.strftime("%H:%M")
    if hasattr(obj, "to_dict"):
        return jsonable(obj.to_dict())
    if is_dataclass(obj) and not isinstance(obj, type):
        out = {f.name: jsonable(getattr(obj, f.name)) for f in fields(obj)}
        for name in getattr(type(obj), "_extra_json", ()):
            out[name] = jsonable(getattr(obj, name))
        return out
    if isinstance(obj, dict):
        return {str(jsonable(k)): jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [jsonable(v) for v in obj]
    return str(obj)
