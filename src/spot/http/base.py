from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, Dict, List, Optional, TypeVar

from ..core.exceptions import ApiError, SessionExpiredError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def fallback(default_factory: Callable[[], Any]) -> Callable[[F], F]:
    """Turn API failures of a read into a default value.

    Session expiry still propagates so the app can force a new login.
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except SessionExpiredError:
                raise
            except ApiError as e:
                logger.error("%s failed, using default: %s", func.__qualname__, e)
                return default_factory()

        return wrapper  # type: ignore[return-value]

    return decorator


list_or_empty = fallback(list)


def as_list(payload: Any) -> List[Dict[str, Any]]:
    if isinstance(payload, list):
        return [r for r in payload if isinstance(r, dict)]
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        return [r for r in payload["data"] if isinstance(r, dict)]
    return []


def as_dict(payload: Any) -> Optional[Dict[str, Any]]:
    return payload if isinstance(payload, dict) else None


def opt_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)
