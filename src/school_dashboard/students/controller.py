from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.request_body import parse_body
from ..container import Container
from .schemas import StudentCreate


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="students_list")
    def list_students():
        students = container.student_service.list_students(
            class_name=request.args.get("class"),
            section=request.args.get("section"),
            search=request.args.get("search"),
        )
        return jsonify([s.to_dict() for s in students])

    @app.route("/api/students/<int:student_id>", methods=["GET"], endpoint="students_get")
    def get_student(student_id: int):
        return jsonify(container.student_service.get_student(student_id).to_dict())

    @app.route("/api/students", methods=["POST"], endpoint="students_create")
    def create_student():
        body = parse_body(StudentCreate)
        student = container.student_service.create_student(
            name=body.name,
            class_name=body.class_name,
            section=body.section,
        )
        return jsonify(student.to_dict()), 201
