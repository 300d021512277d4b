"""Error code to HTTP status code mapping.

This module provides a centralized mapping of error codes to HTTP status codes.
When you add a new exception, simply add its error_code to this mapping.
"""

from fastapi import status


# Map error codes to HTTP status codes
ERROR_CODE_TO_HTTP_STATUS = {
    # Request errors
    "MALFORMED_REQUEST": status.HTTP_400_BAD_REQUEST,

    # Authorization errors
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,

    # Resource errors
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "OPERATION_NOT_SUPPORTED": status.HTTP_405_METHOD_NOT_ALLOWED,

    # Application errors
    "APPLICATION_ERROR": status.HTTP_400_BAD_REQUEST,

    # Collaborator errors
    "COLLABORATOR_FAILURE": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "INTERNAL_SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error_code(error_code: str) -> int:
    """
    Get HTTP status code for a given error code.

    Args:
        error_code: The error code from the exception

    Returns:
        HTTP status code (defaults to 400 if not found)
    """
    return ERROR_CODE_TO_HTTP_STATUS.get(
        error_code,
        status.HTTP_400_BAD_REQUEST,  # Default for unknown errors
    )
