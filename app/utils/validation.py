from functools import wraps
from typing import Iterable, List

from flask import request
from pydantic import ValidationError

from .responses import error, validation_error_response


def missing_fields(data, required: Iterable[str]) -> List[str]:
    """Return the required fields that are absent or falsy ("" and 0 count as missing)."""
    if not isinstance(data, dict):
        return list(required)
    return [field for field in required if not data.get(field)]


def required_aliases(schema) -> List[str]:
    return [
        info.alias or name
        for name, info in schema.model_fields.items()
        if info.is_required()
    ]


def _request_data(source: str) -> dict:
    if source == "args":
        return request.args.to_dict()
    if source == "form":
        return request.form.to_dict()
    return request.get_json(silent=True) or {}


def validate_schema(schema, source="json", message=None):
    """Decorator validating request data against a Pydantic schema.

    Required fields are checked by truthiness first so that an empty string
    or a zero is rejected the same way as an absent key. The parsed model is
    stored on ``request.validated_data``.
    """

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            data = _request_data(source)
            missing = missing_fields(data, required_aliases(schema))
            if missing:
                return error(message or f"{', '.join(missing)} required", status=400)
            try:
                obj = schema.model_validate(data)
            except ValidationError as ve:
                return validation_error_response(
                    ve.errors(include_url=False, include_context=False, include_input=False)
                )
            request.validated_data = obj
            return fn(*args, **kwargs)
        return wrapper

    return decorator
