from __future__ import annotations

from flask import Flask

from ..common.web import current_user_id, login_required, render_state
from ..container import Container
from .viewmodel import NotificationViewModel


def register(app: Flask, container: Container) -> None:
    def _vm() -> NotificationViewModel:
        return NotificationViewModel(container.notification_service, current_user_id())

    def _respond(vm: NotificationViewModel, state):
        return render_state("notifications", state, unread_count=vm.unread_count)

    @app.route("/notifications", methods=["GET"], endpoint="notifications")
    @login_required
    def notifications():
        vm = _vm()
        return _respond(vm, vm.load())

    @app.route("/notifications/<notification_id>/read", methods=["POST"], endpoint="notification_read")
    @login_required
    def notification_read(notification_id: str):
        vm = _vm()
        return _respond(vm, vm.mark_read(notification_id))

    @app.route("/notifications/read-all", methods=["POST"], endpoint="notifications_read_all")
    @login_required
    def notifications_read_all():
        vm = _vm()
        return _respond(vm, vm.mark_all_read())

    @app.route("/notifications/<notification_id>", methods=["DELETE"], endpoint="notification_delete")
    @login_required
    def notification_delete(notification_id: str):
        vm = _vm()
        return _respond(vm, vm.delete(notification_id))

    @app.route("/notifications", methods=["DELETE"], endpoint="notifications_clear")
    @login_required
    def notifications_clear():
        vm = _vm()
        return _respond(vm, vm.clear_all())
