"""Resource service - the checkpoint protocol behind every REST operation."""

import inspect
import logging
from collections.abc import Callable
from typing import Any, Generic, Optional

from starlette.concurrency import run_in_threadpool

from easyrest.application.exceptions import (
    CollaboratorFailureError,
    OperationNotSupportedError,
    ResourceNotFoundError,
    UnauthorizedError,
)
from easyrest.domain.resource import D, Action, ResourceDescriptor, SubEntity, T

logger = logging.getLogger(__name__)


async def call_collaborator(fn: Callable[..., Any], *args: Any) -> Any:
    """
    Invoke a caller-supplied function from async code.

    Coroutine functions are awaited. Plain functions run in the threadpool
    so a slow store never blocks the event loop.
    """
    if inspect.iscoroutinefunction(fn):
        return await fn(*args)
    result = await run_in_threadpool(fn, *args)
    if inspect.isawaitable(result):
        result = await result
    return result


class ResourceService(Generic[T, D]):
    """
    Use cases of one resource, run against its descriptor.

    Every operation follows the same sequence: lookup (when an item is
    addressed), authorization, delegation, DTO conversion. Outcomes other
    than success are raised as application exceptions and turned into HTTP
    responses by the global exception handlers.

    Existence is never disclosed to a caller who may not act: when the
    addressed item is missing, the predicate is asked without an item and a
    denial wins over not-found.

    The service holds no state besides the immutable descriptor, so one
    instance serves all concurrent requests.
    """

    def __init__(self, descriptor: ResourceDescriptor[T, D]):
        """
        Initialize service with the resource declaration.

        Args:
            descriptor: Functions and policy of the resource
        """
        self._descriptor = descriptor

    @property
    def descriptor(self) -> ResourceDescriptor[T, D]:
        return self._descriptor

    async def _authorize(self, context: Any, action: Action, *items: T) -> None:
        """Run the authorization predicate, raising UnauthorizedError on denial."""
        authorize = self._descriptor.authorize
        if authorize is None:
            return

        if not await call_collaborator(authorize, context, action, *items):
            logger.debug(
                "Denied %s on '%s' (%d item(s))",
                action.value,
                self._descriptor.path,
                len(items),
            )
            raise UnauthorizedError()

    async def _checkpoint(self, context: Any, action: Action, key: str) -> T:
        """
        Look up the addressed item and authorize the action on it.

        Args:
            context: Request context handed to the predicate
            action: Action being attempted
            key: Item key from the path

        Returns:
            The found item, authorized for the action

        Raises:
            UnauthorizedError: If the predicate denies, found or not
            ResourceNotFoundError: If the item is missing and the caller may know it
        """
        item = await call_collaborator(self._descriptor.find_one, key)

        if item is None:
            # don't leak existence information if unauthorized
            await self._authorize(context, action)
            raise ResourceNotFoundError(
                f"Item '{key}' not found in '{self._descriptor.path}'"
            )

        await self._authorize(context, action, item)
        return item

    def _require(self, fn: Optional[Callable[..., Any]], operation: str) -> Callable[..., Any]:
        if fn is None:
            raise OperationNotSupportedError(
                f"Resource '{self._descriptor.path}' does not support {operation}"
            )
        return fn

    async def _delegate(self, fn: Callable[..., Any], operation: str, *args: Any) -> Any:
        """Call a mutating collaborator, converting any failure to CollaboratorFailureError."""
        try:
            return await call_collaborator(fn, *args)
        except Exception as exc:
            logger.error(
                f"Error in {operation} on '{self._descriptor.path}': {exc}",
                exc_info=True,
            )
            raise CollaboratorFailureError() from exc

    async def list_all(self, context: Any) -> list[D]:
        """Return every item as its DTO, in the order the finder produced them."""
        await self._authorize(context, Action.GET_ALL)

        items = await call_collaborator(self._descriptor.find_all)
        return [self._descriptor.to_dto(item) for item in items]

    async def list_page(self, context: Any, token: int) -> Any:
        """
        Return one page from the paged finder.

        The page is passed through unchanged: the paged finder is expected
        to produce the transport shape itself.
        """
        await self._authorize(context, Action.GET_ALL)

        return await call_collaborator(self._descriptor.find_all_paged, token)

    async def get_one(self, context: Any, key: str) -> D:
        """Return a single item as its DTO."""
        item = await self._checkpoint(context, Action.GET_ONE, key)
        return self._descriptor.to_dto(item)

    async def search(self, context: Any, criteria: D) -> list[D]:
        """Return the items matching a DTO-shaped filter."""
        search = self._require(self._descriptor.search, "search")

        await self._authorize(context, Action.GET_ALL)

        items = await call_collaborator(search, criteria)
        return [self._descriptor.to_dto(item) for item in items]

    async def create(self, context: Any, patch: D) -> D:
        """
        Create an item from a DTO.

        Raises:
            UnauthorizedError: If creation is denied
            CollaboratorFailureError: If the create function fails
        """
        create = self._require(self._descriptor.create, "create")

        await self._authorize(context, Action.CREATE)

        item = await self._delegate(create, "create", patch)
        return self._descriptor.to_dto(item)

    async def update(self, context: Any, key: str, patch: D) -> D:
        """
        Apply a DTO patch to an existing item.

        Raises:
            UnauthorizedError: If the mutation is denied
            ResourceNotFoundError: If the item is missing
            CollaboratorFailureError: If the mutate function fails
        """
        mutate = self._require(self._descriptor.mutate, "mutate")

        item = await self._checkpoint(context, Action.MUTATE, key)

        mutated = await self._delegate(mutate, "mutate", item, patch)
        return self._descriptor.to_dto(mutated)

    async def delete(self, context: Any, key: str) -> None:
        """
        Delete an existing item.

        The deleted representation is not returned.

        Raises:
            UnauthorizedError: If the deletion is denied
            ResourceNotFoundError: If the item is missing
            CollaboratorFailureError: If the delete function fails
        """
        delete = self._require(self._descriptor.delete, "delete")

        item = await self._checkpoint(context, Action.DELETE, key)

        await self._delegate(delete, "delete", item)

    async def list_sub_entity(self, context: Any, key: str, sub_entity: SubEntity[T]) -> Any:
        """
        Return a sub-entity list of an item.

        Guarded like a single item read. The elements are returned raw, they
        are meant for direct transport.
        """
        item = await self._checkpoint(context, Action.GET_ONE, key)
        return await call_collaborator(sub_entity.get, item)
