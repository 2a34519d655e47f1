"""Utilities for validating incoming Flask requests."""

from __future__ import annotations

from functools import wraps
from typing import Any, Iterable, Mapping, TypeVar

from flask import Request, request
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError
from werkzeug.exceptions import BadRequest

from utils.errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_json_request(
    req: Request,
    *,
    required_keys: Iterable[str] | None = None,
    allow_empty: bool = False,
) -> dict:
    """Return the parsed JSON body or raise a 400 error."""

    if not req.is_json:
        raise BadRequest("Request content type must be application/json.")

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request JSON body is required.")

    if not isinstance(data, dict):
        raise BadRequest("Request JSON payload must be an object.")

    if not data and not allow_empty:
        raise BadRequest("Request JSON body must not be empty.")

    if required_keys:
        missing = [key for key in required_keys if not data.get(key)]
        if missing:
            raise BadRequest(
                "Missing required fields: {}.".format(
                    ", ".join(sorted(missing))
                )
            )

    return data


def _describe(error: Mapping[str, Any]) -> dict:
    field = ".".join(str(part) for part in error.get("loc", ())) or None
    message = error.get("msg", "Invalid value")
    if error.get("type") == "value_error" and "error" in error.get("ctx", {}):
        message = str(error["ctx"]["error"])
    elif error.get("type") == "missing":
        message = f"{field.capitalize() if field else 'Field'} is required"
    return {"field": field, "message": message}


def validate(schema: type[SchemaT], payload: Mapping[str, Any]) -> SchemaT:
    """Check ``payload`` against ``schema``, reporting every violation at once."""

    try:
        return schema.model_validate(payload)
    except SchemaError as exc:
        details = [_describe(error) for error in exc.errors(include_url=False)]
        raise ValidationError(details) from exc


def validated(schema: type[BaseModel]):
    """Validate the JSON body before the view runs; the view gets ``payload``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            data = parse_json_request(request, allow_empty=True)
            kwargs["payload"] = validate(schema, data)
            return view(*args, **kwargs)

        return wrapper

    return decorator
