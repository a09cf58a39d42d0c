from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    OperationFailed,
    StoreUnavailable,
    ValidationError,
)
from .logging import get_logger
from .pagination import Page

logger = get_logger(__name__)

# Most specific first: StoreUnavailable is an OperationFailed.
_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
    (StoreUnavailable, 503),
    (OperationFailed, 500),
)


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def status_for(exc: DomainError) -> int:
    for error_cls, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_cls):
            return status
    return 500


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        status = status_for(exc)
        if status >= 500:
            logger.error("%s %s failed: %s", request.method, request.path, exc)
        return error_response(str(exc), status)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return error_response(exc.description or exc.name, exc.code or 500)


def int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer")


def str_arg(name: str) -> Optional[str]:
    return request.args.get(name) or None


def json_body():
    payload = request.get_json(silent=True)
    if payload is None:
        raise ValidationError("Request body must be JSON")
    return payload


def page_to_json(page: Page, items: list) -> dict:
    return {
        "data": items,
        "totalCount": page.total_count,
        "page": page.page,
        "limit": page.limit,
    }
