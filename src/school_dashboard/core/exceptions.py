from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(DomainError):
    """Raised when a referenced entity id does not exist."""

    def __init__(self, resource: str, entity_id: Optional[int] = None):
        message = f"{resource} not found"
        if entity_id is not None:
            message += f" with id: {entity_id}"
        super().__init__(message)
        self.resource = resource
        self.entity_id = entity_id


class ReportNotImplementedError(DomainError):
    """Raised for report types that are recognized but not built yet."""

    def __init__(self, report_type: str):
        super().__init__(f"{report_type.capitalize()} report not implemented yet")
        self.report_type = report_type
