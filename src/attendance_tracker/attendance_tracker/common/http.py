"""JSON helpers shared by the Flask controllers."""
from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..core.exceptions import DomainError, NotFoundError

logger = logging.getLogger(__name__)


def ok(payload=None, status: int = 200):
    body = {"success": True}
    if payload is not None:
        body["data"] = payload
    return jsonify(body), status


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def api_errors(view):
    """Turn domain errors into JSON responses (404 for missing, 400 otherwise)."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return fail(str(e), 404)
        except DomainError as e:
            logger.warning("%s %s rejected: %s", request.method, request.path, e)
            return fail(str(e), 400)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.path)
            return fail("Internal server error", 500)

    return wrapper
