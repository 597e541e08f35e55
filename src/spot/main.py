from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, redirect, request, session, url_for

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .config import get_settings_module
from .container import build_container
from .core.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    SessionExpiredError,
    ValidationError,
)
from .core.logging import setup_logging
from .courses.controller import register as register_courses
from .dashboard.controller import register as register_dashboard
from .enrollments.controller import register as register_enrollments
from .http.connection import ApiConnection
from .notifications.controller import register as register_notifications
from .schedules.controller import register as register_schedules
from .seats.controller import register as register_seats
from .sections.controller import register as register_sections
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(*, connection: Optional[ApiConnection] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    environment = getattr(settings, "ENVIRONMENT", "development")
    log_dir = getattr(settings, "LOG_DIR", None)
    setup_logging(environment=environment, log_dir=Path(log_dir) if log_dir else None)

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    api_base_url = getattr(settings, "API_BASE_URL")
    logger.info("SPOT client starting settings=%s api=%s", settings_module, api_base_url)

    container = build_container(
        api_base_url=api_base_url,
        api_timeout=float(getattr(settings, "API_TIMEOUT", 15)),
        notifications_path=getattr(settings, "NOTIFICATIONS_PATH", "") or None,
        connection=connection,
    )
    app.extensions["spot.container"] = container

    _register_error_handlers(app)

    register_auth(app, container)
    register_dashboard(app, container)
    register_courses(app, container)
    register_sections(app, container)
    register_schedules(app, container)
    register_enrollments(app, container)
    register_seats(app, container)
    register_attendance(app, container)
    register_users(app, container)
    register_notifications(app, container)

    return app


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(SessionExpiredError)
    def session_expired(e: SessionExpiredError):
        logger.warning("Session expired on %s, redirecting to login", request.path)
        session.clear()
        return redirect(url_for("login"))

    @app.errorhandler(ValidationError)
    def validation_error(e: ValidationError):
        return jsonify({"status": "error", "message": str(e)}), 400

    @app.errorhandler(AuthenticationError)
    def authentication_error(e: AuthenticationError):
        return jsonify({"status": "error", "message": str(e)}), 401

    @app.errorhandler(AuthorizationError)
    def authorization_error(e: AuthorizationError):
        return jsonify({"status": "error", "message": str(e)}), 403

    @app.errorhandler(ApiError)
    def api_error(e: ApiError):
        status = e.status_code if e.status_code and 400 <= e.status_code < 600 else 502
        return jsonify({"status": "error", "message": e.message}), status
