"""Application layer exceptions."""

from easyrest.application.exceptions.exceptions import (
    ApplicationError,
    CollaboratorFailureError,
    MalformedRequestError,
    OperationNotSupportedError,
    ResourceNotFoundError,
    UnauthorizedError,
)

__all__ = [
    "ApplicationError",
    "CollaboratorFailureError",
    "MalformedRequestError",
    "OperationNotSupportedError",
    "ResourceNotFoundError",
    "UnauthorizedError",
]
