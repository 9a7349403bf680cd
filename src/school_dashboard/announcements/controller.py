from __future__ import annotations

from flask import Flask, jsonify

from ..common.request_body import parse_body
from ..container import Container
from .schemas import AnnouncementCreate


def register(app: Flask, container: Container) -> None:
    @app.route("/api/announcements", methods=["GET"], endpoint="announcements_list")
    def list_announcements():
        return jsonify([a.to_dict() for a in container.announcement_service.list_announcements()])

    @app.route("/api/announcements", methods=["POST"], endpoint="announcements_create")
    def create_announcement():
        body = parse_body(AnnouncementCreate)
        announcement = container.announcement_service.publish(
            title=body.title,
            content=body.content,
            start_date=body.start_date,
            end_date=body.end_date,
            importance=body.importance,
        )
        return jsonify(announcement.to_dict()), 201

    @app.route("/api/announcements/<int:announcement_id>", methods=["DELETE"], endpoint="announcements_delete")
    def delete_announcement(announcement_id: int):
        container.announcement_service.delete(announcement_id)
        return "", 204
