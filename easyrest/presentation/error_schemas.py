"""Pydantic models for error responses used in OpenAPI schema generation."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Model for every error response.

    This is the format returned by the exception handlers in
    easyrest/presentation/exception_handlers.py.
    """

    detail: str = Field(
        ...,
        description="High-level description of the error",
        examples=["Not authorized", "Item '42' not found in 'widgets'"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["UNAUTHORIZED", "RESOURCE_NOT_FOUND", "MALFORMED_REQUEST"],
    )


def error_responses(*status_codes: int) -> dict[int, dict]:
    """Build the ``responses`` mapping of a route from the error statuses it can return."""
    return {code: {"model": ErrorResponse} for code in status_codes}
