from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .validators import require_positive_id

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, 400),
    (ConfigurationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
]


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def current_user_id() -> int:
    return int(session["user_id"])


def current_role() -> Role:
    return Role(session["role"])


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return error_response("Not authenticated", 401)
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    allowed = {Role(r).value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return error_response("Not authenticated", 401)
            if session.get("role") not in allowed:
                return error_response("Insufficient permissions", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def path_id(value, field_name: str = "id") -> int:
    return require_positive_id(value, field_name)


def register_error_handlers(app: Flask) -> None:
    def _handle_domain_error(exc: DomainError):
        for error_type, status in _STATUS_BY_ERROR:
            if isinstance(exc, error_type):
                return error_response(str(exc), status)
        return error_response(str(exc), 400)

    def _handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return error_response(exc.description or exc.name, exc.code or 500)
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_response("Internal server error", 500)

    app.register_error_handler(DomainError, _handle_domain_error)
    app.register_error_handler(Exception, _handle_unexpected)
