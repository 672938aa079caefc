"""Request body validation decorator.

@validate_request inspects the view function's signature. Parameters that
Flask fills from the URL (view_args) are passed through untouched; the
remaining parameter must be annotated with a Pydantic BaseModel subclass
and is built from the JSON request body.

    @todos_bp.put("/<todo_id>")
    @validate_request
    def update_todo(todo_id: str, data: TodoUpdate):
        ...

Decode and validation failures raise ValidationError with details:
- model: schema name
- received: the decoded body (when it was JSON)
- errors: [{field, message, expected_type}, ...]
"""

import inspect
from functools import wraps

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

# Never echoed back in error details
_REDACTED_FIELDS = {"password"}


def _format_errors(exc: PydanticValidationError) -> list[dict]:
    errors = []
    for err in exc.errors():
        errors.append({
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "expected_type": err["type"],
        })
    return errors


def _redact(body: dict) -> dict:
    return {
        key: "***" if key in _REDACTED_FIELDS else value
        for key, value in body.items()
    }


def validate_request(f):
    """Validate the JSON body against the view's BaseModel parameter."""
    signature = inspect.signature(f)
    params = list(signature.parameters.values())

    if not params:
        raise TypeError(f"{f.__name__} has no parameters to validate")
    if params[0].annotation is inspect.Parameter.empty:
        raise TypeError(f"First parameter of {f.__name__} lacks a type annotation")

    @wraps(f)
    def wrapper(*args, **kwargs):
        view_args = request.view_args or {}

        for param in params:
            if param.name in view_args or param.name in kwargs:
                continue

            model = param.annotation
            if not (inspect.isclass(model) and issubclass(model, BaseModel)):
                raise TypeError(
                    f"Parameter '{param.name}' of {f.__name__} must be annotated "
                    "with a Pydantic BaseModel subclass"
                )

            body = request.get_json(silent=True)
            if not isinstance(body, dict):
                raise ValidationError(
                    "Invalid request payload",
                    {"model": model.__name__, "expected": "JSON object"}
                )

            try:
                kwargs[param.name] = model.model_validate(body)
            except PydanticValidationError as e:
                raise ValidationError(
                    "Invalid request payload",
                    {
                        "model": model.__name__,
                        "received": _redact(body),
                        "errors": _format_errors(e),
                    }
                )

        return f(*args, **kwargs)

    return wrapper
