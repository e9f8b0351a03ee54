from __future__ import annotations

import logging
from functools import wraps
from typing import Callable, Tuple

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import AuthenticationError, DomainError, InternalError

logger = logging.getLogger(__name__)


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def json_body() -> dict:
    """Request JSON body; malformed or missing JSON is treated as an empty object."""
    data = request.get_json(silent=True)
    return data if data is not None else {}


def auth_decorators(tokens) -> Tuple[Callable, Callable]:
    """Build (token_required, admin_required) bound to a TokenService.

    token_required stores the decoded claims on ``g.current_user``.
    """

    def token_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            header = request.headers.get("Authorization", "")
            parts = header.split(" ", 1)
            token = parts[1].strip() if len(parts) == 2 and parts[0].lower() == "bearer" else ""
            if not token:
                return error_response("Access token required", 401)
            try:
                g.current_user = tokens.decode(token)
            except AuthenticationError as e:
                logger.info("Rejected token: %s", e)
                return error_response(str(e), 403)
            return view(*args, **kwargs)

        return wrapper

    def admin_required(view):
        @wraps(view)
        @token_required
        def wrapper(*args, **kwargs):
            if not g.current_user.is_admin:
                return error_response("Administrator permissions required", 403)
            return view(*args, **kwargs)

        return wrapper

    return token_required, admin_required


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(InternalError)
    def handle_internal(e: InternalError):
        logger.exception("Internal error on %s %s", request.method, request.path)
        return error_response(e.public_message, e.status_code)

    @app.errorhandler(DomainError)
    def handle_domain(e: DomainError):
        return error_response(str(e), e.status_code)

    @app.errorhandler(404)
    def handle_not_found(e):
        return error_response("Route not found", 404)

    @app.errorhandler(405)
    def handle_method_not_allowed(e):
        return error_response("Method not allowed", 405)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return error_response(e.description or e.name, e.code or 500)
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return error_response("Internal server error", 500)
