"""Domain exceptions - resource declaration violations."""

from easyrest.domain.exceptions.domain_exceptions import (
    DomainException,
    InvalidResourceDescriptorException,
)

__all__ = [
    "DomainException",
    "InvalidResourceDescriptorException",
]
