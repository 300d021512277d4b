"""Resource descriptor - the declarative bundle behind one REST resource."""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, TypeVar, Union

from easyrest.domain.exceptions import InvalidResourceDescriptorException

# Internal entity type
T = TypeVar("T")
# Data transport type (DTO) used for the JSON in the API
D = TypeVar("D")

R = TypeVar("R")

# A collaborator may be a plain function or a coroutine function
MaybeAsync = Union[R, Awaitable[R]]


class Action(str, Enum):
    """Action tag handed to the authorization predicate."""

    GET_ALL = "get_all"
    GET_ONE = "get_one"
    MUTATE = "mutate"
    CREATE = "create"
    DELETE = "delete"


@dataclass(frozen=True)
class SubEntity(Generic[T]):
    """A read-only list reachable from a parent item at ``/<key>/<sub_path>``."""

    sub_path: str
    get: Callable[[T], MaybeAsync[Sequence[Any]]]


@dataclass(frozen=True)
class ResourceDescriptor(Generic[T, D]):
    """
    Declaration of one REST resource.

    Supply functions to find and mutate data objects and the dispatch layer
    builds the REST endpoints around them. Which optional functions are set
    decides which routes exist; this is read once at registration.

    Type Parameters:
        T: The internal entity type
        D: The transport type exchanged as JSON. May be the same as T, but
           keeping them apart lets storage and API shapes evolve separately.

    Attributes:
        path: Mount segment of the resource under its parent router
        dto_type: Runtime type of D, used to decode request bodies
        find_one: Lookup by key, returns None when the item does not exist
        find_all: Returns every item
        find_all_paged: Returns one page for a numeric page token
        to_dto: Converts an entity to its transport shape
        search: Filter items using a D as the filter (optional)
        mutate: Applies a D patch to an existing item (optional)
        create: Creates an item from a D (optional)
        delete: Deletes an item (optional)
        sub_entities: Read-only sub lists exposed under each item
        authorize: Access check; items are missing for aggregate actions and
            when the addressed item was not found (optional)
    """

    path: str
    dto_type: Any
    find_one: Callable[[str], MaybeAsync[Optional[T]]]
    find_all: Callable[[], MaybeAsync[Sequence[T]]]
    find_all_paged: Callable[[int], Any]
    to_dto: Callable[[T], D]
    search: Optional[Callable[[D], MaybeAsync[Sequence[T]]]] = None
    mutate: Optional[Callable[[T, D], MaybeAsync[T]]] = None
    create: Optional[Callable[[D], MaybeAsync[T]]] = None
    delete: Optional[Callable[[T], MaybeAsync[T]]] = None
    sub_entities: Sequence[SubEntity[T]] = field(default_factory=tuple)
    authorize: Optional[Callable[..., MaybeAsync[bool]]] = None

    def __post_init__(self):
        """
        Validate descriptor invariants at construction time.

        A descriptor that breaks these could not be mounted unambiguously,
        so it is rejected before any route is built.
        """
        if not self.path or not self.path.strip():
            raise InvalidResourceDescriptorException("Resource path cannot be empty.")

        if "/" in self.path:
            raise InvalidResourceDescriptorException(
                f"Invalid resource path: '{self.path}'. Path must be a single segment."
            )

        seen: set[str] = set()
        for sub_entity in self.sub_entities:
            sub_path = sub_entity.sub_path
            if not sub_path or "/" in sub_path:
                raise InvalidResourceDescriptorException(
                    f"Invalid sub-entity path '{sub_path}' on resource '{self.path}'."
                )
            if sub_path in seen:
                raise InvalidResourceDescriptorException(
                    f"Duplicate sub-entity path '{sub_path}' on resource '{self.path}'."
                )
            seen.add(sub_path)

        object.__setattr__(self, "sub_entities", tuple(self.sub_entities))

    @property
    def can_search(self) -> bool:
        return self.search is not None

    @property
    def can_create(self) -> bool:
        return self.create is not None

    @property
    def can_mutate(self) -> bool:
        return self.mutate is not None

    @property
    def can_delete(self) -> bool:
        return self.delete is not None
