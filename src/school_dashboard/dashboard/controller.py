from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard/attendance-summary", methods=["GET"], endpoint="dashboard_attendance_summary")
    def attendance_summary():
        return jsonify(container.dashboard_service.attendance_summary().to_dict())

    @app.route("/api/dashboard/recent-activities", methods=["GET"], endpoint="dashboard_recent_activities")
    def recent_activities():
        return jsonify([a.to_dict() for a in container.dashboard_service.recent_activities()])

    @app.route("/api/dashboard/recent-announcements", methods=["GET"], endpoint="dashboard_recent_announcements")
    def recent_announcements():
        return jsonify([a.to_dict() for a in container.dashboard_service.recent_announcements()])
