import logging
from fastapi import Request, responses, exceptions
from pydantic import ValidationError
from typing import Union
from sqlalchemy.exc import IntegrityError, DBAPIError
from error import ServerError

logger = logging.getLogger(__name__)


def _error_message(error: dict) -> str:
    """Prefer the raw text of a validator's ValueError over pydantic's prefix"""
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and isinstance(ctx.get("error"), ValueError):
        return str(ctx["error"])
    return error.get("msg", "")


def validation_error_handler(
    request: Request, exec: Union[ValidationError, exceptions.RequestValidationError]
) -> responses.JSONResponse:
    """Validation Error Handler

    This method is serves a custom error handler
    for all validation errors raised by pydantic.
    The first failing field is reported in `message` and `field`,
    every failing field is listed under `errors` for form display
    """
    errors = [
        {"field": str(error.get("loc")[-1]), "message": _error_message(error)}
        for error in exec.errors()
    ]
    first = errors[0]

    return responses.JSONResponse(
        status_code=422,
        content={
            "message": f"Invalid {first['field']}: {first['message']}",
            "field": first["field"],
            "errors": errors,
        },
    )


def validation_http_exceptions_handler(
    request: Request, exec: exceptions.HTTPException
) -> responses.JSONResponse:
    """Validation handler for http exceptions"""
    return responses.JSONResponse(
        status_code=exec.status_code, content={"message": exec.detail}
    )


def db_error_handler(request: Request, exec: Union[IntegrityError, DBAPIError]):
    """Db error handler"""
    logger.error(f"Database error on {request.url.path}: {exec}")

    # Return user-friendly message that doesn't reveal database details
    user_msg = "An internal error occurred. Please try again or contact support."

    return responses.JSONResponse(
        status_code=500, content={"message": user_msg}
    )


def server_error_handler(request: Request, exec: ServerError) -> responses.JSONResponse:
    """Server error handler"""
    return responses.JSONResponse(
        status_code=exec.status_code,
        content={"message": str(exec.msg)}
    )
