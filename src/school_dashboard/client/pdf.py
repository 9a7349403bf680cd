"""PDF export of an attendance report.

The drawing library is optional and acquired on demand; a missing library
surfaces as :class:`PdfLibraryUnavailable` instead of an ``ImportError``
from deep inside the export.
"""
from __future__ import annotations

import asyncio
import importlib
import logging
from types import ModuleType
from typing import Any, Mapping

logger = logging.getLogger(__name__)

DEFAULT_PDF_LIBRARY = "fpdf"


class PdfLibraryUnavailable(RuntimeError):
    def __init__(self, module_name: str):
        super().__init__(f"PDF library '{module_name}' is not installed")
        self.module_name = module_name


async def load_pdf_library(module_name: str = DEFAULT_PDF_LIBRARY) -> ModuleType:
    try:
        return await asyncio.to_thread(importlib.import_module, module_name)
    except ImportError as exc:
        logger.warning("PDF export unavailable: %s", exc)
        raise PdfLibraryUnavailable(module_name) from exc


def render_attendance_report(doc: Any, report: Mapping[str, Any], *, font: str = "helvetica") -> bytes:
    """Draw ``report`` (the JSON body of an attendance report) onto ``doc``.

    ``font`` must already be usable by ``doc``; the built-in core fonts only
    cover Latin-1, so Arabic class labels need a Unicode font registered
    beforehand.
    """
    doc.add_page()
    doc.set_font(font, size=18)
    doc.text(20, 20, "Attendance Report")

    doc.set_font(font, size=12)
    lines = [f"Date: {report['date']}"]
    if report.get("className"):
        label = report["className"]
        if report.get("section"):
            label = f"{label} / {report['section']}"
        lines.append(f"Class: {label}")
    lines += [
        f"Total students: {report['totalStudents']}",
        f"Present: {report['presentCount']}",
        f"Absent: {report['absentCount']}",
        f"Late: {report['lateCount']}",
    ]

    y = 35
    for line in lines:
        doc.text(20, y, line)
        y += 10

    return bytes(doc.output())


async def export_attendance_report(
    report: Mapping[str, Any],
    *,
    module_name: str = DEFAULT_PDF_LIBRARY,
    font: str = "helvetica",
) -> bytes:
    library = await load_pdf_library(module_name)
    return render_attendance_report(library.FPDF(), report, font=font)
