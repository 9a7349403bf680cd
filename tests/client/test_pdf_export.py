from __future__ import annotations

import asyncio
import sys
import types

import pytest

from school_dashboard.client.pdf import (
    PdfLibraryUnavailable,
    export_attendance_report,
    load_pdf_library,
    render_attendance_report,
)

REPORT = {
    "totalStudents": 5,
    "presentCount": 3,
    "absentCount": 1,
    "lateCount": 1,
    "date": "2025-03-12",
    "className": "الثالث",
    "section": "أ",
}


class RecordingDoc:
    def __init__(self):
        self.calls = []

    def add_page(self):
        self.calls.append(("add_page",))

    def set_font(self, family, size=0):
        self.calls.append(("set_font", family, size))

    def text(self, x, y, txt):
        self.calls.append(("text", x, y, txt))

    def output(self):
        return bytearray(b"%PDF-1.3 fake")


def test_render_draws_every_figure():
    doc = RecordingDoc()
    out = render_attendance_report(doc, REPORT)

    assert out == b"%PDF-1.3 fake"
    assert doc.calls[0] == ("add_page",)
    texts = [c[3] for c in doc.calls if c[0] == "text"]
    assert texts[0] == "Attendance Report"
    assert "Date: 2025-03-12" in texts
    assert "Class: الثالث / أ" in texts
    assert "Present: 3" in texts
    assert "Late: 1" in texts


def test_render_without_class_label():
    doc = RecordingDoc()
    report = {k: v for k, v in REPORT.items() if k not in ("className", "section")}
    render_attendance_report(doc, report)

    texts = [c[3] for c in doc.calls if c[0] == "text"]
    assert not any(t.startswith("Class:") for t in texts)


def test_missing_library_is_reported_distinctly():
    with pytest.raises(PdfLibraryUnavailable) as exc:
        asyncio.run(load_pdf_library("school_dashboard_missing_pdf_backend"))
    assert exc.value.module_name == "school_dashboard_missing_pdf_backend"


def test_export_uses_the_loaded_library(monkeypatch):
    monkeypatch.setitem(
        sys.modules,
        "recording_pdf_backend",
        types.SimpleNamespace(FPDF=RecordingDoc),
    )
    out = asyncio.run(export_attendance_report(REPORT, module_name="recording_pdf_backend"))
    assert out.startswith(b"%PDF")
