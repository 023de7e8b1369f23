from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BackendError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
)


def json_error(message: str, status: int, *, details: str | None = None):
    body = {"error": message}
    if details:
        body["details"] = details
    return jsonify(body), status


def register_http(app: Flask, *, cors_origin: str = "*") -> None:
    """CORS headers on every response and JSON bodies for every error."""

    @app.after_request
    def add_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = cors_origin
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
        return response

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        for error_type, status in STATUS_BY_ERROR:
            if isinstance(e, error_type):
                return json_error(str(e), status)
        return json_error(str(e), 400)

    @app.errorhandler(BackendError)
    def handle_backend_error(e: BackendError):
        logger.error("Backend failure on %s %s: %s (%s)", request.method, request.path, e, e.details)
        return json_error(str(e), 500, details=e.details)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        messages = {404: "Not found", 405: "Method not allowed"}
        return json_error(messages.get(e.code, e.name), e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return json_error("Internal server error", 500)


def make_guards(auth_service):
    """Build ``login_required`` / ``admin_required`` decorators.

    The resolved caller is stored on ``flask.g.current_user``.
    """

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.current_user = auth_service.authenticate(request.headers.get("Authorization"))
            return view(*args, **kwargs)

        return wrapper

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.current_user = auth_service.authenticate(request.headers.get("Authorization"))
            auth_service.require_admin(g.current_user)
            return view(*args, **kwargs)

        return wrapper

    return login_required, admin_required


def json_body() -> dict:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body
