"""Async client for the dashboard API: request helpers, query cache and view scopes."""
from .api import ApiClient
from .errors import (
    ApiError,
    ApiNotFoundError,
    ApiNotImplementedError,
    ApiServerError,
    ApiValidationError,
)
from .pdf import PdfLibraryUnavailable, export_attendance_report, load_pdf_library, render_attendance_report
from .query_cache import QueryClient, QueryKey
from .scope import ViewScope, ViewScopeClosed

__all__ = [
    "ApiClient",
    "ApiError",
    "ApiNotFoundError",
    "ApiNotImplementedError",
    "ApiServerError",
    "ApiValidationError",
    "PdfLibraryUnavailable",
    "QueryClient",
    "QueryKey",
    "ViewScope",
    "ViewScopeClosed",
    "export_attendance_report",
    "load_pdf_library",
    "render_attendance_report",
]
