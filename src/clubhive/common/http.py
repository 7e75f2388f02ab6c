from __future__ import annotations

import logging
from typing import Any, Optional

from flask import Flask, jsonify, request

from ..core.exceptions import AuthorizationError, StoreError, ValidationError

logger = logging.getLogger(__name__)


def ok(message: str = "", code: int = 200, **payload: Any):
    return jsonify({"success": True, "message": message, **payload}), code


def fail(message: str, code: int = 400, *, field: Optional[str] = None):
    return jsonify({"success": False, "message": message, "field": field}), code


def register_error_handlers(app: Flask) -> None:
    """Turn domain failures raised inside a view into JSON bodies."""

    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return fail(str(e), 400, field=e.field)

    @app.errorhandler(AuthorizationError)
    def _authorization_error(e: AuthorizationError):
        return fail(str(e) or "Admin access required", 403)

    @app.errorhandler(StoreError)
    def _store_error(e: StoreError):
        logger.exception("Store failure while handling request")
        return fail("Storage is unavailable, please retry", 500)

    @app.errorhandler(404)
    def _not_found(e):
        return fail("Not found", 404)


def request_payload() -> dict[str, Any]:
    """JSON body when there is one, form fields otherwise."""
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        return body
    return request.form.to_dict()
