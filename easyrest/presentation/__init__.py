"""Presentation layer - FastAPI routes and error responses."""

from easyrest.presentation.router import build_resource_router, register_api

__all__ = ["build_resource_router", "register_api"]
