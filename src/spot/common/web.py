"""Helpers shared by the screen controllers."""

from __future__ import annotations

from datetime import date
from functools import wraps
from typing import Any, Optional

from flask import jsonify, redirect, request, session, url_for

from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..core.state import Error
from .datetime_utils import parse_iso_date
from .serialization import jsonable


def current_user_id() -> Optional[int]:
    value = session.get("user_id")
    return int(value) if value is not None else None


def current_role() -> Role:
    return Role.parse(session.get("role"))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get("token") or "user_id" not in session:
            if request.accept_mimetypes.best == "application/json" or request.is_json:
                return jsonify({"status": "error", "message": "Please log in to continue"}), 401
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    """Allow only the given roles; others get a 403 JSON body."""

    def decorator(view):
        @wraps(view)
        @login_required
        def wrapper(*args, **kwargs):
            if current_role() not in roles:
                return jsonify({"status": "error", "message": "Access denied: You don't have permission"}), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator


student_required = roles_required(Role.STUDENT)
teacher_required = roles_required(Role.TEACHER)
admin_required = roles_required(Role.ADMIN, Role.SYSTEM_ADMIN)
system_admin_required = roles_required(Role.SYSTEM_ADMIN)


def payload() -> dict:
    """Request body as a dict, JSON or form."""

    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()


def int_field(data: dict, name: str) -> int:
    try:
        return int(data.get(name))
    except (TypeError, ValueError):
        raise ValidationError(f"{name} is invalid")


def month_arg(name: str = "month") -> date:
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return date.today().replace(day=1)
    try:
        return parse_iso_date(raw[:7] + "-01")
    except ValueError:
        raise ValidationError("Month must be in YYYY-MM format")


def date_arg(name: str) -> Optional[date]:
    raw = (request.args.get(name) or "").strip()
    if not raw:
        return None
    try:
        return parse_iso_date(raw)
    except ValueError:
        raise ValidationError(f"{name} must be in YYYY-MM-DD format")


def render(screen: str, status: int = 200, **data: Any):
    return jsonify({"screen": screen, **{k: jsonable(v) for k, v in data.items()}}), status


def render_state(screen: str, state, **extra: Any):
    """Respond with a view state; an Error state answers 400."""

    status = 400 if isinstance(state, Error) else 200
    return render(screen, status, state=state, **extra)
