from __future__ import annotations

import io
import logging
from datetime import date

from flask import Flask, request, send_file

from ..common.web import (
    current_user_id,
    date_arg,
    month_arg,
    payload,
    render,
    render_state,
    roles_required,
    student_required,
    teacher_required,
)
from ..core.enums import Role
from ..core.exceptions import InvalidQrCodeError
from ..core.state import Error
from ..container import Container
from .calendar import count_by_status
from .qr import decode_qr_image, render_qr_png
from .report_service import report_filename, write_report_csv
from .viewmodel import AttendanceViewModel

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _vm() -> AttendanceViewModel:
        user_id = current_user_id()
        return AttendanceViewModel(
            container.attendance_service,
            student_id=user_id,
            activity=container.activity_for(user_id),
        )

    @app.route("/attendance/scan", methods=["POST"], endpoint="attendance_scan")
    @student_required
    def attendance_scan():
        """Log attendance from a scanned payload or an uploaded camera frame."""

        vm = _vm()
        upload = request.files.get("image")
        if upload is not None:
            try:
                text = decode_qr_image(upload.stream)
            except InvalidQrCodeError as e:
                logger.info("Uploaded frame rejected: %s", e)
                return render("attendance_scan", 400, state=Error(str(e)), scanner_active=True)
        else:
            text = payload().get("text", "")

        state = vm.scan(text)
        return render_state("attendance_scan", state, scanner_active=vm.scanner_active)

    @app.route("/attendance/history", endpoint="attendance_history")
    @student_required
    def attendance_history():
        return render("attendance_history", records=container.attendance_service.student_history(current_user_id()))

    @app.route("/sections/<int:section_id>/calendar", endpoint="attendance_calendar")
    @student_required
    def attendance_calendar(section_id: int):
        month = month_arg()
        vm = _vm()
        state = vm.load_calendar(section_id, month)
        counts = count_by_status(state.data) if hasattr(state, "data") else {}
        return render_state("attendance_calendar", state, month=month.strftime("%Y-%m"), counts=counts)

    @app.route("/teacher/sections/<int:section_id>/attendance", endpoint="attendance_tracking")
    @teacher_required
    def attendance_tracking(section_id: int):
        vm = _vm()
        state = vm.load_section_history(section_id, on=date_arg("date"))
        return render_state("attendance_tracking", state)

    @app.route("/teacher/sections/<int:section_id>/attendance.csv", endpoint="attendance_export")
    @teacher_required
    def attendance_export(section_id: int):
        report = container.report_service.build_section_report(
            section_id, start=date_arg("start"), end=date_arg("end")
        )
        filename = report_filename(section_id, date.today())
        return app.response_class(
            write_report_csv(report.rows),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/teacher/sections/<int:section_id>/report", endpoint="attendance_report")
    @teacher_required
    def attendance_report(section_id: int):
        report = container.report_service.build_section_report(
            section_id, start=date_arg("start"), end=date_arg("end")
        )
        return render(
            "attendance_report",
            rows=report.rows,
            by_date=report.by_date,
            by_student=report.by_student,
            summary=report.summary,
        )

    @app.route("/teacher/sections/<int:section_id>/qr", endpoint="attendance_qr")
    @teacher_required
    def attendance_qr(section_id: int):
        payload_text = container.attendance_service.generate_qr(section_id)
        return render(
            "attendance_qr",
            section_id=section_id,
            payload=payload_text,
            in_session=container.attendance_service.class_in_session(section_id),
        )

    @app.route("/teacher/sections/<int:section_id>/qr.png", endpoint="attendance_qr_png")
    @teacher_required
    def attendance_qr_png(section_id: int):
        png = render_qr_png(container.attendance_service.qr_payload(section_id))
        return send_file(io.BytesIO(png), mimetype="image/png", download_name=f"section_{section_id}_qr.png")

    @app.route("/teacher/sections/<int:section_id>/analytics", endpoint="attendance_analytics")
    @roles_required(Role.TEACHER, Role.ADMIN, Role.SYSTEM_ADMIN)
    def attendance_analytics(section_id: int):
        return render("attendance_analytics", analytics=container.attendance_service.analytics(section_id))
