"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ResourceNotFoundError(ApplicationError):
    """Raised when the addressed item does not exist and disclosure is allowed."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, error_code="RESOURCE_NOT_FOUND")


class UnauthorizedError(ApplicationError):
    """Raised when the authorization predicate denies an action."""

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, error_code="UNAUTHORIZED")


class MalformedRequestError(ApplicationError):
    """Raised when a request body or page token cannot be decoded."""

    def __init__(self, message: str = "Malformed request"):
        super().__init__(message, error_code="MALFORMED_REQUEST")


class OperationNotSupportedError(ApplicationError):
    """Raised when an operation is invoked on a resource that does not declare it."""

    def __init__(self, message: str = "Operation not supported"):
        super().__init__(message, error_code="OPERATION_NOT_SUPPORTED")


class CollaboratorFailureError(ApplicationError):
    """Raised when a create, mutate or delete function fails.

    The message is sent to the client, so it never carries the cause.
    """

    def __init__(self, message: str = "Resource operation failed"):
        super().__init__(message, error_code="COLLABORATOR_FAILURE")
