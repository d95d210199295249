"""
Error Helpers - TalentFlow
talentflow/routers/errors.py

ErrorResponse-shaped HTTP errors shared by every router, plus the
application-level exception handlers registered in main.py.
"""

import logging
from datetime import datetime, timezone
from typing import NoReturn, Optional

from fastapi import Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.responses import JSONResponse

from talentflow.core.exceptions import EntityNotFoundException, StorageBackendException
from talentflow.models.common import ErrorResponse

logger = logging.getLogger(__name__)


#  Validation Error Messages


FIELD_MESSAGES = {
    "name": {
        "missing": "Name is required",
        "string_too_short": "Name cannot be empty",
        "string_too_long": "Name must not exceed 255 characters",
    },
    "person_id": {
        "missing": "Person ID is required",
        "string_too_short": "Person ID cannot be empty",
    },
    "personId": {
        "missing": "Person ID is required",
        "string_too_short": "Person ID cannot be empty",
    },
    "thresholds": {
        "too_short": "At least one level threshold is required",
    },
}

DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "string_too_short": "Field '{field}' is too short",
    "string_too_long": "Field '{field}' is too long",
    "too_short": "Field '{field}' has too few items",
    "enum": "Field '{field}' has an unsupported value",
    "less_than_equal": "Field '{field}' exceeds maximum allowed value",
    "greater_than_equal": "Field '{field}' is below minimum allowed value",
    "string_type": "Field '{field}' must be a string",
    "float_type": "Field '{field}' must be a number",
    "float_parsing": "Field '{field}' must be a valid number",
    "int_type": "Field '{field}' must be an integer",
    "int_parsing": "Field '{field}' must be a valid integer",
    "date_from_datetime_parsing": "Field '{field}' must be a valid date",
    "date_parsing": "Field '{field}' must be a valid date",
    "extra_forbidden": "Unknown field '{field}' is not allowed",
}


def get_validation_message(field: str, error_type: str) -> str:
    if field in FIELD_MESSAGES:
        for key in FIELD_MESSAGES[field]:
            if key in error_type:
                return FIELD_MESSAGES[field][key]
    for key, template in DEFAULT_MESSAGES.items():
        if key in error_type:
            return template.format(field=field)
    return f"Invalid value for field '{field}'"


def error_content(error_code: str, message: str, details: Optional[dict] = None) -> dict:
    return ErrorResponse(error_code=error_code, message=message, details=details).model_dump(
        mode="json"
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_content("VALIDATION_ERROR", "Request validation failed"),
        )
    err = errors[0]
    error_type = err.get("type", "")
    loc = err.get("loc", [])
    if "json_invalid" in error_type:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_content("INVALID_REQUEST", "Malformed JSON request body"),
        )
    field = ".".join(str(part) for part in loc if part not in ("body", "query", "path"))
    # Model-level validators report no field; their own message is the useful one
    message = get_validation_message(field, error_type) if field else err.get("msg", "")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_content(
            "VALIDATION_ERROR",
            message or "Request validation failed",
            {"field": field, "type": error_type} if field else None,
        ),
    )


async def storage_exception_handler(request: Request, exc: StorageBackendException):
    logger.error(f"Storage backend failure on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=error_content("STORAGE_UNAVAILABLE", exc.message),
    )


#  Exception Helpers


def raise_error(status_code: int, error_code: str, message: str) -> NoReturn:
    raise HTTPException(
        status_code=status_code,
        detail=error_content(error_code, message),
    )


def raise_not_found(exc: EntityNotFoundException) -> NoReturn:
    """404 with an error code derived from the entity type (e.g. EMPLOYEE_NOT_FOUND)."""
    code = exc.entity_type.upper().replace(" ", "_") + "_NOT_FOUND"
    raise_error(status.HTTP_404_NOT_FOUND, code, str(exc))


def raise_duplicate(message: str) -> NoReturn:
    raise_error(status.HTTP_409_CONFLICT, "DUPLICATE_ENTITY", message)


def raise_invalid_thresholds(message: str) -> NoReturn:
    raise_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "INVALID_THRESHOLDS", message)


def raise_validation_error(message: str) -> NoReturn:
    raise_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", message)
