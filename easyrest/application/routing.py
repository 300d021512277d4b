"""Route exposure resolver.

Maps the capabilities declared on a ResourceDescriptor to the routes that
get registered for it. The result depends only on which optional functions
are set, and is computed once when the resource is mounted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from easyrest.domain.resource import ResourceDescriptor, SubEntity


class Operation(str, Enum):
    """The handlers a resource can expose."""

    LIST_ALL = "list_all"
    LIST_PAGED = "list_paged"
    CREATE = "create"
    SEARCH = "search"
    SUB_ENTITY = "sub_entity"
    GET_ONE = "get_one"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class RouteSpec:
    """One route: HTTP method and path (relative to the resource) bound to an operation."""

    method: str
    path: str
    operation: Operation
    sub_entity: Optional[SubEntity] = None


def resolve_routes(descriptor: ResourceDescriptor) -> tuple[RouteSpec, ...]:
    """
    Resolve the routes to register for a resource, in registration order.

    Sub-entity routes come before the single item getter so that a literal
    sub path always wins over the generic ``/{key}`` route.

    Args:
        descriptor: The resource declaration

    Returns:
        Route specs in the order they must be registered
    """
    routes = [
        RouteSpec("GET", "/", Operation.LIST_ALL),
        RouteSpec("GET", "/page/{token}", Operation.LIST_PAGED),
    ]

    if descriptor.can_create:
        routes.append(RouteSpec("POST", "/", Operation.CREATE))

    if descriptor.can_search:
        routes.append(RouteSpec("POST", "/filter", Operation.SEARCH))

    for sub_entity in descriptor.sub_entities:
        routes.append(
            RouteSpec(
                "GET",
                f"/{{key}}/{sub_entity.sub_path}",
                Operation.SUB_ENTITY,
                sub_entity=sub_entity,
            )
        )

    routes.append(RouteSpec("GET", "/{key}", Operation.GET_ONE))

    if descriptor.can_mutate:
        routes.append(RouteSpec("PUT", "/{key}", Operation.UPDATE))

    if descriptor.can_delete:
        routes.append(RouteSpec("DELETE", "/{key}", Operation.DELETE))

    return tuple(routes)
