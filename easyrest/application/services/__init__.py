"""Application services."""

from easyrest.application.services.resource_service import ResourceService, call_collaborator

__all__ = ["ResourceService", "call_collaborator"]
