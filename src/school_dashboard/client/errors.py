from __future__ import annotations

from typing import List, Optional


class ApiError(Exception):
    """Non-success answer from the dashboard API."""

    def __init__(self, message: str, status_code: int, errors: Optional[List[dict]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []


class ApiValidationError(ApiError):
    """400: the request was rejected before reaching the store."""


class ApiNotFoundError(ApiError):
    """404: a referenced id does not exist."""


class ApiNotImplementedError(ApiError):
    """501: recognized but unsupported (behavior/statistics reports)."""


class ApiServerError(ApiError):
    """5xx other than 501."""


def error_for_status(status_code: int, message: str, errors: Optional[List[dict]] = None) -> ApiError:
    if status_code == 400:
        return ApiValidationError(message, status_code, errors)
    if status_code == 404:
        return ApiNotFoundError(message, status_code, errors)
    if status_code == 501:
        return ApiNotImplementedError(message, status_code, errors)
    if status_code >= 500:
        return ApiServerError(message, status_code, errors)
    return ApiError(message, status_code, errors)
