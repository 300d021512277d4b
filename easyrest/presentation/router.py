"""REST API registration.

Builds the FastAPI routes of a resource from its descriptor. Each route
decodes the request (path key, page token, JSON body), hands over to the
ResourceService and lets FastAPI encode the result.

URL structure, relative to the parent router::

    GET    /{path}/                  list all
    GET    /{path}/page/{token}      one page
    POST   /{path}/                  create           (if create is set)
    POST   /{path}/filter            search           (if search is set)
    GET    /{path}/{key}/{sub_path}  sub-entity list  (one per sub-entity)
    GET    /{path}/{key}             get one
    PUT    /{path}/{key}             update           (if mutate is set)
    DELETE /{path}/{key}             delete           (if delete is set)
"""

import logging
import re
from collections.abc import Callable
from typing import Any, Union

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from pydantic import TypeAdapter, ValidationError

from easyrest.application.exceptions import MalformedRequestError
from easyrest.application.routing import Operation, RouteSpec, resolve_routes
from easyrest.application.services.resource_service import ResourceService
from easyrest.domain.resource import ResourceDescriptor
from easyrest.presentation.error_schemas import error_responses

logger = logging.getLogger(__name__)

DELETED_CONFIRMATION = "deleted"

_TOKEN_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


async def parse_body(request: Request, adapter: TypeAdapter) -> Any:
    """
    Decode the request body into the transport type.

    Args:
        request: Incoming request
        adapter: TypeAdapter of the resource's transport type

    Returns:
        The decoded transport value

    Raises:
        MalformedRequestError: If the body is not a JSON object of the transport type
    """
    try:
        payload = await request.json()
    except ValueError as exc:
        logger.info(f"Error parsing body: {exc}")
        raise MalformedRequestError("Request body is not valid JSON") from exc

    if not isinstance(payload, dict):
        logger.info("Error parsing body: not a JSON object")
        raise MalformedRequestError("Request body must be a JSON object")

    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        logger.info(f"Error parsing body: {exc.error_count()} validation error(s)")
        raise MalformedRequestError("Request body does not match the resource") from exc


def parse_page_token(token: str) -> int:
    """
    Parse a page token as a base-10 signed 64-bit integer.

    Raises:
        MalformedRequestError: If the token is not such an integer
    """
    if not _TOKEN_PATTERN.fullmatch(token):
        logger.info(f"Error parsing page token: '{token}'")
        raise MalformedRequestError(f"Invalid page token '{token}'")

    value = int(token)
    if not _INT64_MIN <= value <= _INT64_MAX:
        logger.info(f"Page token out of range: '{token}'")
        raise MalformedRequestError(f"Invalid page token '{token}'")
    return value


def _build_endpoint(
    route: RouteSpec, service: ResourceService, adapter: TypeAdapter
) -> Callable[..., Any]:
    """Build the endpoint function for one route."""
    operation = route.operation

    if operation is Operation.LIST_ALL:

        async def list_all(request: Request) -> Any:
            return await service.list_all(request)

        return list_all

    if operation is Operation.LIST_PAGED:

        async def list_page(token: str, request: Request) -> Any:
            page_token = parse_page_token(token)
            return await service.list_page(request, page_token)

        return list_page

    if operation is Operation.CREATE:

        async def create(request: Request) -> Any:
            patch = await parse_body(request, adapter)
            return await service.create(request, patch)

        return create

    if operation is Operation.SEARCH:

        async def search(request: Request) -> Any:
            criteria = await parse_body(request, adapter)
            return await service.search(request, criteria)

        return search

    if operation is Operation.SUB_ENTITY:
        sub_entity = route.sub_entity

        async def list_sub_entity(key: str, request: Request) -> Any:
            return await service.list_sub_entity(request, key, sub_entity)

        return list_sub_entity

    if operation is Operation.GET_ONE:

        async def get_one(key: str, request: Request) -> Any:
            return await service.get_one(request, key)

        return get_one

    if operation is Operation.UPDATE:

        async def update(key: str, request: Request) -> Any:
            # the body is decoded before the item is looked up
            patch = await parse_body(request, adapter)
            return await service.update(request, key, patch)

        return update

    if operation is Operation.DELETE:

        async def delete(key: str, request: Request) -> PlainTextResponse:
            await service.delete(request, key)
            return PlainTextResponse(DELETED_CONFIRMATION)

        return delete

    raise ValueError(f"Unknown operation: {operation}")


def _route_options(
    route: RouteSpec, descriptor: ResourceDescriptor, adapter: TypeAdapter
) -> dict[str, Any]:
    """Request body, response model, error responses and naming of a route for OpenAPI."""
    dto_type = descriptor.dto_type
    name = f"{descriptor.path}_{route.operation.value}"
    if route.sub_entity is not None:
        name = f"{name}_{route.sub_entity.sub_path}"

    options: dict[str, Any] = {
        "name": name,
        "status_code": status.HTTP_200_OK,
        "response_model": None,
    }

    if route.operation in (Operation.LIST_ALL, Operation.SEARCH):
        options["response_model"] = list[dto_type]
    elif route.operation in (Operation.GET_ONE, Operation.CREATE, Operation.UPDATE):
        options["response_model"] = dto_type
    elif route.operation is Operation.DELETE:
        options["response_class"] = PlainTextResponse

    if route.operation in (Operation.CREATE, Operation.SEARCH, Operation.UPDATE):
        # bodies are decoded by parse_body, so the schema is declared here
        options["openapi_extra"] = {
            "requestBody": {
                "required": True,
                "content": {"application/json": {"schema": adapter.json_schema()}},
            }
        }

    codes = [status.HTTP_401_UNAUTHORIZED]
    if route.operation in (Operation.LIST_PAGED, Operation.CREATE, Operation.SEARCH, Operation.UPDATE):
        codes.append(status.HTTP_400_BAD_REQUEST)
    if "{key}" in route.path:
        codes.append(status.HTTP_404_NOT_FOUND)
    if route.operation in (Operation.CREATE, Operation.UPDATE, Operation.DELETE):
        codes.append(status.HTTP_500_INTERNAL_SERVER_ERROR)
    options["responses"] = error_responses(*sorted(codes))

    return options


def build_resource_router(descriptor: ResourceDescriptor) -> APIRouter:
    """
    Build the router of one resource, mounted at ``/{descriptor.path}``.

    Args:
        descriptor: The resource declaration

    Returns:
        APIRouter holding the routes the descriptor's capabilities allow
    """
    service = ResourceService(descriptor)
    adapter = TypeAdapter(descriptor.dto_type)
    router = APIRouter(prefix=f"/{descriptor.path}", tags=[descriptor.path])

    for route in resolve_routes(descriptor):
        router.add_api_route(
            route.path,
            _build_endpoint(route, service, adapter),
            methods=[route.method],
            **_route_options(route, descriptor, adapter),
        )

    return router


def register_api(
    parent: Union[APIRouter, FastAPI], descriptor: ResourceDescriptor
) -> APIRouter:
    """
    Register the REST API of a resource under a parent router or app.

    Args:
        parent: Router or application to mount the resource on
        descriptor: The resource declaration

    Returns:
        The resource router that was mounted
    """
    logger.info(f"Registering REST api {descriptor.path}")

    router = build_resource_router(descriptor)
    parent.include_router(router)
    return router
