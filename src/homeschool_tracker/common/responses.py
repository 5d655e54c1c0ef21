from __future__ import annotations

from flask import jsonify, request

from ..core.exceptions import DomainError, NotFoundError, StorageError, ValidationError

_STATUS = (
    (ValidationError, 400),
    (NotFoundError, 404),
    (StorageError, 503),
)


def error_response(e: DomainError):
    status = next((code for kind, code in _STATUS if isinstance(e, kind)), 400)
    return jsonify({"success": False, "message": str(e)}), status


def ok(status: int = 200, **payload):
    return jsonify({"success": True, **payload}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object body")
    return data
