from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedule", methods=["GET"], endpoint="schedule_get")
    def get_schedule():
        schedule = container.schedule_service.get_schedule(
            class_name=request.args.get("class"),
            section=request.args.get("section"),
        )
        return jsonify(schedule.to_dict())
