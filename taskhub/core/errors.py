# taskhub/core/errors.py
from __future__ import annotations
from flask import current_app
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound


class ApiError(Exception):
    """Client-visible failure; rendered as a plain-text body with `status_code`."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ApiError):
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


class ConflictError(ApiError):
    status_code = 409


# ---------- helpers ----------
def plain_text(message: str, status: int = 200):
    return message, status, {"Content-Type": "text/plain; charset=utf-8"}


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def _api_error(e: ApiError):
        current_app.logger.warning("%s -> %s", e.status_code, e.message)
        return plain_text(e.message, e.status_code)

    # unknown paths and known paths with an unsupported method look the same
    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def _no_route(e):
        return plain_text("Endpoint not found", 404)

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return plain_text(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def _unexpected(e):
        current_app.logger.exception("unhandled error")
        return plain_text("Internal server error", 500)
