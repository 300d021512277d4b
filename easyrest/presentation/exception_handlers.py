"""Exception handlers for converting exceptions to HTTP responses.

Instead of one handler per exception, base exception handlers determine
the HTTP status code from the error_code attribute.

To add a new exception:
1. Create the exception class (inheriting from ApplicationError)
2. Add its error_code to ERROR_CODE_TO_HTTP_STATUS in error_codes.py
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from easyrest.application.exceptions import ApplicationError
from easyrest.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """
    Handle ALL application layer exceptions.

    The HTTP status code is determined by the error_code attribute
    using the ERROR_CODE_TO_HTTP_STATUS mapping.
    """
    http_status = get_http_status_for_error_code(exc.error_code)

    return JSONResponse(
        status_code=http_status,
        content={
            "detail": exc.message,
            "error_code": exc.error_code,
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all other unhandled exceptions.

    This is the catch-all handler for any unexpected errors, e.g. a finder
    or authorization predicate that raised.
    """
    # Log the actual error for debugging
    logger.error(f"Unhandled error: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal server error occurred",
            "error_code": "INTERNAL_SERVER_ERROR",
        },
    )
