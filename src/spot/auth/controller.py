from __future__ import annotations

from flask import Flask, jsonify, redirect, request, session, url_for

from ..common.web import login_required, payload, render
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="index")
    def index():
        if session.get("token"):
            return redirect(url_for("dashboard"))
        return redirect(url_for("login"))

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if request.method != "POST":
            return render("login")

        data = payload()
        password = data.get("password", "")
        try:
            if data.get("student_id"):
                auth = container.auth_service.login_with_student_id(
                    physical_id=data.get("student_id", ""), password=password
                )
            else:
                auth = container.auth_service.login(email=data.get("email", ""), password=password)
        except ValidationError as e:
            return jsonify({"status": "error", "message": str(e)}), 400
        except AuthenticationError as e:
            return jsonify({"status": "error", "message": str(e)}), 401

        return jsonify(
            {
                "status": "success",
                "user": {
                    "id": auth.user_id,
                    "role": auth.role.value,
                    "email": auth.email,
                    "name": auth.name,
                    "google_linked": auth.google_linked,
                },
                "redirect": url_for("dashboard"),
            }
        )

    @app.route("/logout", endpoint="logout")
    def logout():
        container.auth_service.logout()
        session.clear()
        return redirect(url_for("login"))

    @app.route("/me", endpoint="me")
    @login_required
    def me():
        return jsonify(
            {
                "id": session.get("user_id"),
                "role": session.get("role"),
                "email": session.get("email"),
                "name": session.get("name"),
            }
        )

