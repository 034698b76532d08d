"""JSON response envelopes shared by every endpoint."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

CREATED = "created"
UPDATED = "updated"
DELETED = "deleted"
GET = "get"

RESPONSE_FORMATS: Dict[str, tuple[int, str]] = {
    CREATED: (status.HTTP_201_CREATED, "Data successfully created!"),
    UPDATED: (status.HTTP_200_OK, "Data successfully updated!"),
    DELETED: (status.HTTP_200_OK, "Data successfully deleted!"),
    GET: (status.HTTP_200_OK, "Data successfully get!"),
}


def success(response_type: str, data: Any = None, message: Optional[str] = None) -> JSONResponse:
    code, default_message = RESPONSE_FORMATS.get(response_type, (status.HTTP_200_OK, "Successfully Action!"))
    payload: Dict[str, Any] = {
        "response_code": code,
        "response_status": f"successfully-{response_type}",
        "message": message or default_message,
    }
    if data is not None:
        payload["data"] = jsonable_encoder(data)
    return JSONResponse(status_code=code, content=payload)


def _error(code: int, response_status: str, message: str, errors: Any) -> JSONResponse:
    payload: Dict[str, Any] = {
        "response_code": code,
        "response_status": response_status,
        "message": message,
    }
    if errors is not None:
        payload["errors"] = jsonable_encoder(errors)
    return JSONResponse(status_code=code, content=payload)


def error_validator(errors: Any, message: Optional[str] = None) -> JSONResponse:
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "failed-validation",
        message or "Error! The request not expected!",
        errors,
    )


def error_not_found(errors: Any, message: Optional[str] = None) -> JSONResponse:
    return _error(
        status.HTTP_404_NOT_FOUND,
        "failed-not-found",
        message or "Error! The resource not found!",
        errors,
    )


def error_bad_request(errors: Any, message: Optional[str] = None) -> JSONResponse:
    return _error(
        status.HTTP_400_BAD_REQUEST,
        "failed-bad-request",
        message or "Bad Request!",
        errors,
    )


def error_server(errors: Any, message: Optional[str] = None) -> JSONResponse:
    logger.error("Server error: %s", errors, exc_info=True)
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "failed-server",
        message or "Internal Server Error!",
        errors,
    )


_TYPE_MESSAGES = {
    "bool_type": ("Field '{field}' must be a boolean value (true or false)", "One of the fields must be a boolean value (true or false)"),
    "int_type": ("Field '{field}' must be a number", "One of the fields must be a number"),
    "int_from_float": ("Field '{field}' must be a number", "One of the fields must be a number"),
    "string_type": ("Field '{field}' must be a string", "One of the fields must be a string"),
}


def describe_body_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Turn pydantic body errors into a single human readable sentence."""
    for error in errors:
        error_type = error.get("type", "")
        loc = tuple(error.get("loc", ()))
        field = str(loc[1]) if len(loc) > 1 else ""

        if error_type == "json_invalid":
            return "Invalid JSON format. Please check your request payload"
        if error_type == "missing":
            if len(loc) <= 1:
                return "Empty request body. Please provide valid JSON data"
            return "Required field is missing"
        if error_type in _TYPE_MESSAGES:
            with_field, generic = _TYPE_MESSAGES[error_type]
            return with_field.format(field=field) if field else generic
    return "Invalid request payload. Please check your data format"
