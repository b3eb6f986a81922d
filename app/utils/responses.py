from flask import jsonify


def ok(data=None, message="success", status=200):
    payload = {"status": "success", "message": message}
    if data is not None:
        payload["data"] = data
    return jsonify(payload), status


def document(data, status=200):
    """Reply with a record (or list of records) as the bare JSON body."""
    return jsonify(data), status


def error(message, status=400, code=None):
    return jsonify({
        "status": "error",
        "message": message,
        "code": code or status
    }), status


def validation_error_response(errors):
    return jsonify({
        "status": "error",
        "message": "Invalid request",
        "code": 400,
        "errors": errors,
    }), 400


def store_error_response(action: str, exc: Exception):
    """500 carrying the underlying store error, e.g. "Error saving category: ..."."""
    return error(f"Error {action}: {exc}", status=500)
