"""FastAPI application factory."""

from collections.abc import Iterable
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from easyrest.application.exceptions import ApplicationError
from easyrest.domain.exceptions import InvalidResourceDescriptorException
from easyrest.domain.resource import ResourceDescriptor
from easyrest.infrastructure.config.settings import Settings, get_settings
from easyrest.infrastructure.logging_config import configure_logging
from easyrest.presentation.exception_handlers import (
    application_error_handler,
    generic_exception_handler,
)
from easyrest.presentation.router import register_api


def create_app(
    resources: Iterable[ResourceDescriptor],
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Create an application exposing the given resources.

    Every resource is mounted under ``settings.api_prefix``. The routes of
    each resource are fixed here and never change afterwards.

    Args:
        resources: Resource declarations to mount
        settings: Application settings (defaults to get_settings())

    Returns:
        The configured FastAPI application

    Raises:
        InvalidResourceDescriptorException: If two resources share a path
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Generic REST endpoints generated from resource declarations",
        version=settings.app_version,
        debug=settings.debug,
    )

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    # - ApplicationError handles ALL dispatch outcomes (401, 404, 400, 500, ...)
    # - Exception handles everything else
    app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)

    api = APIRouter(prefix=settings.api_prefix)
    mounted = []
    for descriptor in resources:
        if descriptor.path in mounted:
            raise InvalidResourceDescriptorException(
                f"Duplicate resource path '{descriptor.path}'."
            )
        register_api(api, descriptor)
        mounted.append(descriptor.path)
    app.include_router(api)

    @app.get("/")
    async def root() -> dict[str, str | list[str]]:
        """Health check endpoint."""
        return {
            "message": settings.app_name,
            "status": "running",
            "version": settings.app_version,
            "environment": settings.environment,
            "resources": mounted,
        }

    return app
