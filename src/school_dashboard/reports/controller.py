from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..container import Container
from .model import ReportData

CSV_FIELDS = ["student_id", "name", "class_name", "section", "present", "absent", "late", "excused"]


def register(app: Flask, container: Container) -> None:
    def _build_report(report_type: str) -> ReportData:
        container.report_service.parse_report_type(report_type)
        return container.report_service.build_attendance_report(
            class_name=request.args.get("class"),
            section=request.args.get("section"),
            start=request.args.get("start"),
            end=request.args.get("end"),
            period=request.args.get("period"),
        )

    def _write_report_csv(*, data: ReportData, filename: str):
        """Per-student counts for the report window as a CSV download."""

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row.to_dict())

        # BOM so spreadsheet apps pick up UTF-8 (Arabic names).
        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/reports/<report_type>", methods=["GET"], endpoint="reports_get")
    def get_report(report_type: str):
        return jsonify(_build_report(report_type).report.to_dict())

    @app.route("/api/reports/<report_type>/csv", methods=["GET"], endpoint="reports_csv")
    def export_report_csv(report_type: str):
        data = _build_report(report_type)
        filename = f"attendance_report_{data.window.start:%Y%m%d}_{data.window.end:%Y%m%d}.csv"
        return _write_report_csv(data=data, filename=filename)
