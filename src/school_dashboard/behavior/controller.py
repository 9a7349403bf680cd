from __future__ import annotations

from flask import Flask, jsonify

from ..common.request_body import parse_body
from ..container import Container
from .schemas import ViolationCreate


def register(app: Flask, container: Container) -> None:
    @app.route("/api/behavior", methods=["GET"], endpoint="behavior_list")
    def list_violations():
        return jsonify([v.to_dict() for v in container.behavior_service.list_violations()])

    @app.route("/api/behavior", methods=["POST"], endpoint="behavior_create")
    def create_violation():
        body = parse_body(ViolationCreate)
        violation = container.behavior_service.record_violation(
            student_id=body.student_id,
            violation_type=body.violation_type,
            description=body.description,
            violation_date=body.date,
            severity=body.severity,
            lesson_period=body.lesson_period,
        )
        return jsonify(violation.to_dict()), 201

    @app.route("/api/behavior/<int:violation_id>", methods=["DELETE"], endpoint="behavior_delete")
    def delete_violation(violation_id: int):
        # Removing an unknown id is still a success.
        container.behavior_service.delete_violation(violation_id)
        return "", 204
