"""Exception handlers that render every failure as a ``{success: false, message}`` envelope."""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.application.schemas import ErrorResponse

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_errors(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(message=message).model_dump(),
    )


def describe_validation_errors(errors: Sequence[dict[str, Any]]) -> str:
    """Turn pydantic/FastAPI validation errors into one readable sentence."""
    if not errors:
        return "Invalid request"

    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    error_type = first.get("type", "")

    if error_type == "json_invalid":
        return "Invalid JSON body"
    if error_type == "missing" and not loc:
        return "Request body is required"
    if not loc:
        return f"Invalid request body: {first.get('msg', 'unexpected value')}"
    return f"Invalid {'.'.join(loc)}: {first.get('msg', 'unexpected value')}"


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
