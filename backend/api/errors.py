"""Global exception handlers rendering every failure as `{"error": <message>}`."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from backend.core.exceptions import ApplicationError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message or GENERIC_ERROR_MESSAGE})


def register_error_handlers(app: FastAPI) -> None:
    """Register application, request-validation and catch-all handlers."""

    @app.exception_handler(ApplicationError)
    async def handle_application_error(request: Request, exc: ApplicationError) -> JSONResponse:
        logger.info("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Rejected request body on %s: %s", request.url.path, exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST, describe_request_errors(exc.errors()))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        # Never leaks internal details.
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def describe_request_errors(errors: Iterable[Dict[str, Any]]) -> str:
    messages = []
    for error in errors:
        location = tuple(error.get("loc", ()))
        if error.get("type") == "json_invalid":
            messages.append("Malformed JSON body")
        elif location[:1] == ("body",):
            messages.append("Request body must be a JSON object")
        else:
            messages.append(str(error.get("msg") or "Invalid request"))
    return ", ".join(dict.fromkeys(messages)) or "Invalid request"
