"""Domain layer exceptions for resource declaration errors."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions are raised when a resource declaration breaks one of
    its invariants. They surface at registration time, never per request.

    Examples:
        - Empty resource path
        - Duplicate sub-entity path
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidResourceDescriptorException(DomainException):
    """Raised when a resource descriptor is declared in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_RESOURCE_DESCRIPTOR")
