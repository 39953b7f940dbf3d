"""
HTTP error rendering.

Every error body has the shape {"error": <label>, "message": <text>}.
Client faults (4xx) carry the validator message. Server and provider faults
are always 500 with a fixed message; the internal message is only logged.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from extraction.errors import GenerationError

logger = logging.getLogger(__name__)

BAD_REQUEST_LABEL = "Bad Request"
SERVER_ERROR_LABEL = "Internal Server Error"
GENERIC_SERVER_MESSAGE = "Failed to process request"


def server_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"error": SERVER_ERROR_LABEL, "message": GENERIC_SERVER_MESSAGE},
    )


async def generation_error_handler(request: Request, exc: GenerationError) -> JSONResponse:
    """Render a GenerationError. 5xx codes (including 504) become 500."""
    if exc.status_code >= 500:
        logger.error(
            f"Error {exc.status_code}: {exc.message}",
            extra={"path": request.url.path, "method": request.method},
        )
        return server_error_response()

    logger.warning(
        f"Error {exc.status_code}: {exc.message}",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": BAD_REQUEST_LABEL, "message": exc.message},
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render FastAPI parameter validation failures as a 400 Bad Request."""
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    message = f"Invalid request parameters: {', '.join(fields)}" if fields else "Invalid request parameters"

    logger.warning(
        f"Error 400: {message}",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=400,
        content={"error": BAD_REQUEST_LABEL, "message": message},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GenerationError, generation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
