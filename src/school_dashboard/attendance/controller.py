from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.request_body import parse_body
from ..container import Container
from .schemas import AttendanceCreate


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_list")
    def list_attendance():
        rows = container.attendance_service.list_for_class(
            class_name=request.args.get("class"),
            section=request.args.get("section"),
            attendance_date=request.args.get("date"),
        )
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_record")
    def record_attendance():
        body = parse_body(AttendanceCreate)
        record = container.attendance_service.record(
            student_id=body.student_id,
            attendance_date=body.date,
            status=body.status,
            notes=body.notes,
        )
        return jsonify(record.to_dict()), 201
