"""Translate exceptions raised below the controllers into JSON responses."""
from __future__ import annotations

import logging
import time

import pydantic
from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from .exceptions import NotFoundError, ReportNotImplementedError, ValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error(message: str, status: int, errors=None):
    body = {"message": message}
    if errors:
        body["errors"] = errors
    return jsonify(body), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation(exc: ValidationError):
        logger.info("Rejected %s %s: %s", request.method, request.path, exc)
        errors = [{"field": exc.field, "message": str(exc)}] if exc.field else None
        return _error(str(exc), 400, errors)

    @app.errorhandler(pydantic.ValidationError)
    def handle_schema(exc: pydantic.ValidationError):
        errors = [
            {"field": ".".join(str(p) for p in err["loc"]) or "body", "message": err["msg"]}
            for err in exc.errors()
        ]
        logger.info("Rejected %s %s: %d invalid field(s)", request.method, request.path, len(errors))
        return _error("Invalid request data", 400, errors)

    @app.errorhandler(NotFoundError)
    def handle_not_found(exc: NotFoundError):
        return _error(str(exc), 404)

    @app.errorhandler(ReportNotImplementedError)
    def handle_not_implemented(exc: ReportNotImplementedError):
        return _error(str(exc), 501)

    @app.errorhandler(HTTPException)
    def handle_http(exc: HTTPException):
        # Unknown routes, wrong methods and the like keep their status.
        if exc.code is not None and exc.code < 400:
            return exc
        return _error(exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return _error(INTERNAL_ERROR_MESSAGE, 500)


def register_request_logging(app: Flask) -> None:
    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = g.get("request_started")
        elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        logger.info("%s %s -> %s (%.1f ms)", request.method, request.path, response.status_code, elapsed_ms)
        return response
