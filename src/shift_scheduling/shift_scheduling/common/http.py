from __future__ import annotations

import logging
from typing import Any, Tuple

from flask import Response, jsonify, request

from ..core.exceptions import DomainError, NotFoundError, ShiftConflictError, ValidationError

logger = logging.getLogger(__name__)


def json_body() -> dict:
    """Request JSON object, or an empty dict when the body is missing or not an object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_response(exc: Exception) -> Tuple[Response, int]:
    """Map domain errors to JSON responses; anything else is a 500."""
    if isinstance(exc, ValidationError):
        return jsonify({"errors": exc.errors}), 400
    if isinstance(exc, ShiftConflictError):
        return jsonify({"errors": [str(exc)], "conflicts": [_as_dict(c) for c in exc.conflicts]}), 409
    if isinstance(exc, NotFoundError):
        return jsonify({"errors": [str(exc)]}), 404
    if isinstance(exc, DomainError):
        return jsonify({"errors": [str(exc)]}), 400

    logger.exception("Unhandled error on %s %s", request.method, request.path)
    return jsonify({"errors": ["Internal server error"]}), 500


def _as_dict(item: Any) -> Any:
    return item.to_dict() if hasattr(item, "to_dict") else item
