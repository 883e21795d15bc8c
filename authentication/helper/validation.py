import json
from typing import Callable, Dict, List, Type, TypeVar
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_body(model: Type[ModelT]) -> Callable:
    """
    Build a dependency that validates the JSON body against ``model``.
    A missing body validates as ``{}`` so every required field is reported,
    instead of a single error for the whole body.
    """

    async def dependency(request: Request) -> ModelT:
        raw = await request.body()
        try:
            payload = json.loads(raw) if raw.strip() else {}
        except ValueError:
            raise RequestValidationError([{
                "type": "json_invalid",
                "loc": ("body",),
                "msg": "JSON decode error",
                "input": {},
            }])
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            errors = [{**error, "loc": ("body", *error["loc"])} for error in exc.errors()]
            raise RequestValidationError(errors, body=payload)

    return dependency


def _message(field: str, error: dict) -> str:
    error_type = error.get("type")
    ctx = error.get("ctx") or {}
    if error_type == "missing":
        return f'"{field}" is required'
    if error_type == "string_type":
        return f'"{field}" must be a string'
    if error_type == "string_too_short":
        if ctx.get("min_length", 1) <= 1 or error.get("input") == "":
            return f'"{field}" is not allowed to be empty'
        return f'"{field}" length must be at least {ctx["min_length"]} characters long'
    if error_type == "string_too_long":
        return f'"{field}" length must be less than or equal to {ctx.get("max_length")} characters long'
    if error_type == "value_error" and "email" in str(error.get("msg", "")).lower():
        return f'"{field}" must be a valid email'
    if error_type == "model_type":
        return f'"{field}" must be of type object'
    if error_type == "json_invalid":
        return f'"{field}" must be valid JSON'
    return f'"{field}" {error.get("msg", "is invalid")}'


def format_validation_errors(errors: List[dict]) -> List[dict]:
    """Group pydantic errors per field, as ``[{field, location, messages}]``, in field order."""
    grouped: Dict[str, dict] = {}
    for error in errors:
        loc = tuple(error.get("loc") or ())
        location = str(loc[0]) if loc else "body"
        field = ".".join(str(part) for part in loc[1:]) or location
        entry = grouped.setdefault(field, {"field": field, "location": location, "messages": []})
        message = _message(field, error)
        if message not in entry["messages"]:
            entry["messages"].append(message)
    return list(grouped.values())
