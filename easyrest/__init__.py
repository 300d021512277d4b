"""EasyREST - REST/CRUD endpoints for FastAPI from a handful of functions.

Supply functions to find and mutate data objects and EasyREST handles the
REST implementation: routing, authorization checkpoints and DTO shaping.

Usage:
    widgets = ResourceDescriptor(
        path="widgets",
        dto_type=WidgetDTO,
        find_one=store.get,
        find_all=store.all,
        find_all_paged=store.page,
        to_dto=WidgetDTO.from_entity,
        mutate=store.update,
    )
    register_api(app, widgets)
"""

from easyrest.application.routing import Operation, RouteSpec, resolve_routes
from easyrest.domain.page import Page
from easyrest.domain.resource import Action, ResourceDescriptor, SubEntity
from easyrest.presentation.router import register_api

__all__ = [
    "Action",
    "Operation",
    "Page",
    "ResourceDescriptor",
    "RouteSpec",
    "SubEntity",
    "register_api",
    "resolve_routes",
]
